"""Locating input files and naming the formats a conversion can produce."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Union

__all__ = ["ConvertOutputFormat", "find_all_files", "expand_directory"]

PathLike = Union[str, "os.PathLike[str]"]


class ConvertOutputFormat(Enum):
    """Output formats supported by the converter."""

    PLY = "ply"
    PCD = "pcd"
    PNG = "png"
    MP4 = "mp4"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, s: str) -> "ConvertOutputFormat":
        """Parse a format name such as ``"ply"``; raise ValueError for unknown names."""
        try:
            return cls(s)
        except ValueError:
            raise ValueError(f"{s} is not a valid output format") from None


def expand_directory(path: PathLike) -> List[Path]:
    """List the regular, non-hidden files directly inside ``path``.

    Subdirectories are not searched.
    """
    directory = Path(path)
    return sorted(
        entry
        for entry in directory.iterdir()
        if entry.is_file() and not entry.name.startswith(".")
    )


def find_all_files(paths: Iterable[PathLike]) -> List[Path]:
    """Resolve files and directories into a flat list of files.

    Every missing path is reported; if any is missing, FileNotFoundError is raised.
    """
    candidates = [Path(p) for p in paths]
    missing = [p for p in candidates if not p.exists()]
    for path in missing:
        print(f"File {str(path)!r} does not exist")
    if missing:
        raise FileNotFoundError("Some files do not exist")

    files: List[Path] = []
    for path in candidates:
        if path.is_dir():
            files.extend(expand_directory(path))
        else:
            files.append(path)
    return files