"""Recording and replaying camera positions."""

from __future__ import annotations

import logging
import math
import os
import struct
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import List, Tuple, Union

__all__ = ["CameraPosition", "CameraTrace"]

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]
Vector = Tuple[float, float, float]


@dataclass(frozen=True)
class CameraPosition:
    """Camera position with pitch and yaw in radians."""

    position: Vector = (0.0, 0.0, 0.0)
    pitch: float = 0.0
    yaw: float = 0.0
    up: Vector = (0.0, 0.0, 0.0)


def _f32(value: float) -> float:
    return struct.unpack("=f", struct.pack("=f", value))[0]


def _format_f32(value: float) -> str:
    """Shortest single-precision decimal, without exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    single = _f32(value)
    if single.is_integer():
        text = str(int(single))
        return "-0" if text == "0" and math.copysign(1.0, single) < 0 else text
    text = repr(single)
    for precision in range(1, 10):
        candidate = f"{single:.{precision}g}"
        if _f32(float(candidate)) == single:
            text = candidate
            break
    return format(Decimal(text), "f")


def _parse_line(line: str) -> CameraPosition:
    parts = line.strip().split(",")[:5]
    if len(parts) < 5:
        raise ValueError(f"camera trace line needs 5 values: {line!r}")
    x, y, z, pitch, yaw = (float(part) for part in parts)
    return CameraPosition(
        position=(x, y, z),
        pitch=math.radians(pitch),
        yaw=math.radians(yaw),
    )


class CameraTrace:
    """Camera positions read from a trace file, or recorded to be written to one.

    Each line holds ``x,y,z,pitch,yaw,roll`` with angles in degrees.
    """

    def __init__(self, path: PathLike, is_record: bool = False) -> None:
        self.path = Path(path)
        self._data: List[CameraPosition] = []
        self._index = 0
        try:
            handle = open(self.path, encoding="utf-8")
        except OSError:
            if not is_record:
                raise
            return
        with handle:
            if is_record:
                raise FileExistsError(f"Camera trace file already exists: {self.path}")
            self._data = [_parse_line(line) for line in handle]

    def __len__(self) -> int:
        return len(self._data)

    def next(self) -> CameraPosition:
        """Return the next position, wrapping around at the end of the trace."""
        if not self._data:
            raise IndexError("camera trace is empty")
        position = self._data[self._index]
        self._index = (self._index + 1) % len(self._data)
        return position

    def add(self, pos: CameraPosition) -> None:
        """Append a position to the trace."""
        self._data.append(pos)

    def save(self) -> None:
        """Write the trace to its path unless a file is already there."""
        try:
            handle = open(self.path, "x", encoding="utf-8")
        except FileExistsError:
            logger.warning("Camera trace file already exists, not writing")
            return
        with handle:
            for pos in self._data:
                x, y, z = pos.position
                fields = (
                    _format_f32(x),
                    _format_f32(y),
                    _format_f32(z),
                    _format_f32(math.degrees(pos.pitch)),
                    _format_f32(math.degrees(pos.yaw)),
                )
                handle.write(",".join(fields) + ",0.0\n")

    def __enter__(self) -> "CameraTrace":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()