"""Planar shapes: circles, ellipses, polygons, polylines, triangles and quadrilaterals."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from fastgeom3d.aabb import AABB
from fastgeom3d.core import Vec2


@dataclass(frozen=True)
class Circle2D:
    """A circle given by its centre and a positive radius."""

    center: Vec2
    radius: float

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError("radius must be positive")

    def get_aabb(self) -> AABB:
        """Bounding box of the circle on the plane z = 0."""
        return AABB(
            self.center.x - self.radius,
            self.center.y - self.radius,
            0.0,
            self.center.x + self.radius,
            self.center.y + self.radius,
            0.0,
        )


@dataclass(frozen=True)
class Ellipse2D:
    """An axis-aligned ellipse given by its centre and its x and y radii."""

    center: Vec2
    radius_x: float
    radius_y: float

    def __post_init__(self) -> None:
        if self.radius_x <= 0.0 or self.radius_y <= 0.0:
            raise ValueError("radius_x and radius_y must be positive")

    def get_aabb(self) -> AABB:
        """Bounding box of the ellipse on the plane z = 0."""
        return AABB(
            self.center.x - self.radius_x,
            self.center.y - self.radius_y,
            0.0,
            self.center.x + self.radius_x,
            self.center.y + self.radius_y,
            0.0,
        )


@dataclass(frozen=True)
class Polygon2D:
    """A polygon given by its ordered vertices, at least three of them."""

    vertices: tuple[Vec2, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        if len(self.vertices) < 3:
            raise ValueError("Polygon2D requires at least 3 vertices")

    def get_aabb(self) -> AABB:
        """Bounding box of the vertices on the plane z = 0."""
        return AABB.from_points_2d(self.vertices)


@dataclass(frozen=True)
class Polyline2D:
    """An open chain of segments through at least two ordered points."""

    points: tuple[Vec2, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        if len(self.points) < 2:
            raise ValueError("Polyline2D requires at least 2 points")

    def get_aabb(self) -> AABB:
        """Bounding box of the points on the plane z = 0."""
        return AABB.from_points_2d(self.points)


class _FixedPolygon:
    """A polygon with a fixed number of vertices, backed by a Polygon2D."""

    VERTEX_COUNT: ClassVar[int]
    __slots__ = ("_polygon",)

    def __init__(self, vertices: Iterable[Vec2]) -> None:
        polygon = Polygon2D(tuple(vertices))
        if len(polygon.vertices) != self.VERTEX_COUNT:
            raise ValueError(
                f"{type(self).__name__} requires exactly {self.VERTEX_COUNT} vertices"
            )
        self._polygon = polygon

    @property
    def vertices(self) -> tuple[Vec2, ...]:
        """The ordered vertices."""
        return self._polygon.vertices

    def get_aabb(self) -> AABB:
        """Bounding box of the vertices on the plane z = 0."""
        return self._polygon.get_aabb()

    def as_polygon(self) -> Polygon2D:
        """The shape as a general polygon."""
        return self._polygon

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._polygon == other._polygon

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._polygon))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertices!r})"


class Triangle2D(_FixedPolygon):
    """A triangle: a polygon with exactly three vertices."""

    VERTEX_COUNT = 3
    __slots__ = ()

    def get_aabb(self) -> AABB:
        """Bounding box of the triangle on the plane z = 0."""
        return super().get_aabb()

    def as_polygon(self) -> Polygon2D:
        """The triangle as a general polygon."""
        return super().as_polygon()


class Quadrilateral2D(_FixedPolygon):
    """A quadrilateral: a polygon with exactly four vertices."""

    VERTEX_COUNT = 4
    __slots__ = ()

    def get_aabb(self) -> AABB:
        """Bounding box of the quadrilateral on the plane z = 0."""
        return super().get_aabb()

    def as_polygon(self) -> Polygon2D:
        """The quadrilateral as a general polygon."""
        return super().as_polygon()


def make_triangle_2d(vertices: Iterable[Vec2]) -> Triangle2D:
    """Build a triangle from exactly three vertices."""
    vertices = tuple(vertices)
    if len(vertices) != 3:
        raise ValueError("Triangle2D requires exactly 3 vertices")
    return Triangle2D(vertices)


def make_quadrilateral_2d(vertices: Iterable[Vec2]) -> Quadrilateral2D:
    """Build a quadrilateral from exactly four vertices."""
    vertices = tuple(vertices)
    if len(vertices) != 4:
        raise ValueError("Quadrilateral2D requires exactly 4 vertices")
    return Quadrilateral2D(vertices)