"""Annular sectors measured by geographic bearing."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from fastgeom3d.aabb import AABB
from fastgeom3d.core import Vec2

_HALF_PI = math.pi / 2.0
_TWO_PI = 2.0 * math.pi
_AXIS_BEARINGS = (0.0, _HALF_PI, math.pi, 3.0 * _HALF_PI)


def _normalize_angle(angle: float) -> float:
    normalized = math.fmod(angle, _TWO_PI)
    if normalized < 0.0:
        normalized += _TWO_PI
    return normalized


def _point_on_bearing(center: Vec2, radius: float, bearing: float) -> tuple[float, float]:
    return center.x + radius * math.sin(bearing), center.y + radius * math.cos(bearing)


def _bearings_in_range(base: float, start: float, end: float) -> Iterator[float]:
    """Every bearing equal to base modulo a full turn that lies in [start, end]."""
    candidate = base
    while candidate < start:
        candidate += _TWO_PI
    while candidate <= end:
        yield candidate
        candidate += _TWO_PI


@dataclass(frozen=True)
class AnnularSector2D:
    """A ring sector between two radii and two bearings.

    Bearings are in radians: 0 points north (+y) and angles grow clockwise,
    so pi/2 is east, pi is south and 3*pi/2 is west.
    """

    center: Vec2
    outer_radius: float
    inner_radius: float
    start_angle: float
    end_angle: float

    def __post_init__(self) -> None:
        if (
            self.outer_radius <= 0.0
            or self.inner_radius < 0.0
            or self.outer_radius <= self.inner_radius
            or self.start_angle >= self.end_angle
        ):
            raise ValueError("Invalid parameters for AnnularSector2D")

    def get_aabb(self) -> AABB:
        """Bounding box of the sector on the plane z = 0."""
        start = _normalize_angle(self.start_angle)
        end = start + (self.end_angle - self.start_angle)

        radii = [self.outer_radius]
        if self.inner_radius > 0:
            radii.append(self.inner_radius)

        # The centre may lie inside the sector, so it always takes part.
        points = [(self.center.x, self.center.y)]
        for radius in radii:
            points.append(_point_on_bearing(self.center, radius, start))
            points.append(_point_on_bearing(self.center, radius, end))
        for radius in radii:
            points.extend(
                _point_on_bearing(self.center, radius, bearing)
                for base in _AXIS_BEARINGS
                for bearing in _bearings_in_range(base, start, end)
            )

        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        return AABB(min(xs), min(ys), 0.0, max(xs), max(ys), 0.0)