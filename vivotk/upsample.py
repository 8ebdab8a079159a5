"""Point cloud upsampling by interpolating between nearby points."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

__all__ = ["PointXyzRgba", "PointCloud", "upsample"]


@dataclass
class PointXyzRgba:
    """A coloured point."""

    x: float
    y: float
    z: float
    r: int
    g: int
    b: int
    a: int = 255


@dataclass
class PointCloud:
    """A list of coloured points."""

    points: List[PointXyzRgba] = field(default_factory=list)

    @property
    def number_of_points(self) -> int:
        return len(self.points)


_Cell = Tuple[int, int, int]


def _cell_of(point: PointXyzRgba, size: float) -> _Cell:
    return (
        math.floor(point.x / size),
        math.floor(point.y / size),
        math.floor(point.z / size),
    )


def _squared_distance(a: PointXyzRgba, b: PointXyzRgba) -> float:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2


def _to_u8(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 255.0))


def _blend_channel(own: int, other: int, pi_dist: float, ni_dist: float, dist: float) -> int:
    weighted = own * pi_dist + other * ni_dist
    if dist == 0.0:
        return _to_u8(math.nan)
    return _to_u8(weighted * (1.0 / dist))


def upsample(point_cloud: PointCloud, factor: int) -> PointCloud:
    """Add ``2 * factor`` interpolated points between each pair of close points.

    Points count as close when their squared distance is at most ``18 * factor``.
    A factor of 1 or less returns the cloud unchanged.
    """
    if factor <= 1:
        return point_cloud

    points = point_cloud.points
    radius = factor * 2.0 * 9.0
    cell_size = math.sqrt(radius)
    grid: Dict[_Cell, List[int]] = defaultdict(list)
    for index, point in enumerate(points):
        grid[_cell_of(point, cell_size)].append(index)

    steps = 2 * factor
    new_points: List[PointXyzRgba] = []
    for i, point in enumerate(points):
        cx, cy, cz = _cell_of(point, cell_size)
        neighbours = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                for dz in (-1, 0, 1):
                    for j in grid.get((cx + dx, cy + dy, cz + dz), ()):
                        if j <= i:
                            continue
                        dist = _squared_distance(point, points[j])
                        if dist <= radius:
                            neighbours.append((dist, j))
        neighbours.sort()

        for dist, j in neighbours:
            other = points[j]
            x_diff = other.x - point.x
            y_diff = other.y - point.y
            z_diff = other.z - point.z
            for k in range(1, steps + 1):
                scale = k / (2.0 * factor)
                pi_dist = dist * scale
                ni_dist = dist - pi_dist
                new_points.append(
                    PointXyzRgba(
                        x=point.x + x_diff * scale,
                        y=point.y + y_diff * scale,
                        z=point.z + z_diff * scale,
                        r=_blend_channel(point.r, other.r, pi_dist, ni_dist, dist),
                        g=_blend_channel(point.g, other.g, pi_dist, ni_dist, dist),
                        b=_blend_channel(point.b, other.b, pi_dist, ni_dist, dist),
                        a=_blend_channel(point.a, other.a, pi_dist, ni_dist, dist),
                    )
                )

    new_points.extend(points)
    return PointCloud(new_points)