"""Reading and writing Velodyne ``.bin`` point files."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Union

__all__ = [
    "VelodyneBinReadError",
    "VelodynePoint",
    "VelodyneBinData",
    "read_velodyne_bin_file",
    "write_velodyne_bin_file",
]

PathLike = Union[str, "os.PathLike[str]"]

_POINT = struct.Struct("=4f")
POINT_SIZE = _POINT.size


class VelodyneBinReadError(Exception):
    """A Velodyne file could not be opened or holds invalid data."""


def _f32(value: float) -> float:
    return struct.unpack("=f", struct.pack("=f", value))[0]


@dataclass
class VelodynePoint:
    """A single Velodyne return: position and intensity."""

    x: float
    y: float
    z: float
    intensity: float

    @classmethod
    def from_bytes(cls, data: bytes) -> "VelodynePoint":
        """Decode 16 native-endian bytes; intensities above 1 are scaled down from 0..255."""
        if len(data) != POINT_SIZE:
            raise ValueError(f"expected {POINT_SIZE} bytes, got {len(data)}")
        x, y, z, intensity = _POINT.unpack(data)
        if not 0.0 <= intensity <= 255.0:
            raise VelodyneBinReadError(f"Invalid data: intensity {intensity} out of range")
        if intensity > 1.0:
            intensity = _f32(intensity / 255.0)
        return cls(x, y, z, intensity)

    def to_bytes(self) -> bytes:
        """Encode the point as 16 native-endian bytes."""
        return _POINT.pack(self.x, self.y, self.z, self.intensity)


@dataclass
class VelodyneBinData:
    """The points of one Velodyne ``.bin`` file."""

    data: List[VelodynePoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[VelodynePoint]:
        return iter(self.data)

    def __str__(self) -> str:
        lines = [f"VelodyneBinData length: {len(self.data)}"]
        lines.extend(repr(point) for point in self.data[:3])
        return "\n".join(lines) + "\n"


def read_velodyne_bin_file(path: PathLike) -> VelodyneBinData:
    """Read a Velodyne ``.bin`` file. A trailing partial record is ignored."""
    try:
        raw = Path(path).read_bytes()
    except OSError as err:
        raise VelodyneBinReadError(str(err)) from err
    usable = len(raw) - len(raw) % POINT_SIZE
    points = [
        VelodynePoint.from_bytes(raw[start:start + POINT_SIZE])
        for start in range(0, usable, POINT_SIZE)
    ]
    return VelodyneBinData(points)


def write_velodyne_bin_file(data: VelodyneBinData, path: PathLike) -> None:
    """Write the points to ``path`` in Velodyne ``.bin`` layout."""
    with open(path, "wb") as handle:
        for point in data:
            handle.write(point.to_bytes())