"""Replaying recorded network bandwidth."""

from __future__ import annotations

import os
from typing import List, Union

__all__ = ["NetworkTrace"]

PathLike = Union[str, "os.PathLike[str]"]


class NetworkTrace:
    """Bandwidth samples in Kbps, one per line of the trace file."""

    def __init__(self, path: PathLike) -> None:
        with open(path, encoding="utf-8") as handle:
            self._data: List[float] = [float(line.strip()) for line in handle]
        self._index = 0

    def __len__(self) -> int:
        return len(self._data)

    def next(self) -> float:
        """Return the next sample, wrapping around at the end of the trace."""
        if not self._data:
            raise IndexError("network trace is empty")
        sample = self._data[self._index]
        self._index = (self._index + 1) % len(self._data)
        return sample