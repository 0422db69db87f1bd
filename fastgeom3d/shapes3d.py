"""Solid shapes: chains of boxes, 3D polylines and spheres."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fastgeom3d.aabb import AABB
from fastgeom3d.core import UTMCoordinate, Vec3


def _axis_intervals(box: AABB) -> tuple[tuple[float, float], ...]:
    return (
        (box.min_x, box.max_x),
        (box.min_y, box.max_y),
        (box.min_z, box.max_z),
    )


def _adjacent_with_matching_face(a: AABB, b: AABB) -> bool:
    """True when the boxes touch on a face whose two other extents match exactly."""
    intervals_a = _axis_intervals(a)
    intervals_b = _axis_intervals(b)
    for axis, ((min_a, max_a), (min_b, max_b)) in enumerate(zip(intervals_a, intervals_b)):
        touching = max_a == min_b or min_a == max_b
        others_match = all(
            intervals_a[other] == intervals_b[other] for other in range(3) if other != axis
        )
        if touching and others_match:
            return True
    return False


@dataclass(frozen=True)
class ContinuousRectangularPrism:
    """A chain of boxes, each joined to the next by a face of the same size."""

    prisms: tuple[AABB, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "prisms", tuple(self.prisms))
        if len(self.prisms) < 2:
            raise ValueError("ContinuousRectangularPrism requires at least 2 prisms")
        for previous, current in zip(self.prisms, self.prisms[1:]):
            if not _adjacent_with_matching_face(previous, current):
                raise ValueError(
                    "Prisms must be connected by matching faces with the same "
                    "dimensions and aligned centers"
                )

    def get_aabb(self) -> AABB:
        """Bounding box of the whole chain."""
        return AABB(
            min(p.min_x for p in self.prisms),
            min(p.min_y for p in self.prisms),
            min(p.min_z for p in self.prisms),
            max(p.max_x for p in self.prisms),
            max(p.max_y for p in self.prisms),
            max(p.max_z for p in self.prisms),
        )


@dataclass(frozen=True)
class Polyline:
    """An open chain of segments through at least two 3D points."""

    points: tuple[Vec3, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        if len(self.points) < 2:
            raise ValueError("Polyline requires at least 2 points")

    @classmethod
    def from_utm(cls, utm_points: Iterable[UTMCoordinate]) -> Polyline:
        """Build a polyline from UTM coordinates, keeping their order."""
        return cls(tuple(utm.to_vec3() for utm in utm_points))

    def get_aabb(self) -> AABB:
        """Bounding box of the points."""
        return AABB.from_points(self.points)


@dataclass(frozen=True)
class Sphere:
    """A sphere given by its centre and radius."""

    center: Vec3
    radius: float

    def get_aabb(self) -> AABB:
        """Bounding box of the sphere."""
        r = self.radius
        c = self.center
        return AABB(c.x - r, c.y - r, c.z - r, c.x + r, c.y + r, c.z + r)