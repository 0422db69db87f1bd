"""Axis-aligned bounding boxes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fastgeom3d.core import Vec2, Vec3


@dataclass(frozen=True)
class AABB:
    """An axis-aligned bounding box in 3D space."""

    min_x: float
    min_y: float
    min_z: float
    max_x: float
    max_y: float
    max_z: float

    @classmethod
    def from_center_half_extents(cls, center: Vec3, half_extents: Vec3) -> AABB:
        """Build a box from its centre and half size on each axis."""
        return cls(
            center.x - half_extents.x,
            center.y - half_extents.y,
            center.z - half_extents.z,
            center.x + half_extents.x,
            center.y + half_extents.y,
            center.z + half_extents.z,
        )

    @classmethod
    def from_points(cls, points: Iterable[Vec3]) -> AABB:
        """Smallest box holding every 3D point."""
        points = list(points)
        if not points:
            raise ValueError("points must not be empty")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        zs = [p.z for p in points]
        return cls(min(xs), min(ys), min(zs), max(xs), max(ys), max(zs))

    @classmethod
    def from_points_2d(cls, points: Iterable[Vec2]) -> AABB:
        """Smallest box holding every 2D point, flat on the plane z = 0."""
        points = list(points)
        if not points:
            raise ValueError("points must not be empty")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), 0.0, max(xs), max(ys), 0.0)

    def get_aabb(self) -> AABB:
        """Return the box itself."""
        return self