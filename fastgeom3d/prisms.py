"""Prisms made by extruding planar shapes along the z axis."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from fastgeom3d.aabb import AABB
from fastgeom3d.core import Vec2
from fastgeom3d.shapes2d import Circle2D, Ellipse2D, Polygon2D


def make_prism_aabb(base_aabb: AABB, height: float) -> AABB:
    """Extrude a flat base box upwards by ``height``."""
    if height <= 0.0:
        raise ValueError("height must be positive")
    if base_aabb.min_z != base_aabb.max_z:
        raise ValueError("base shape must be flat in the Z axis")
    return AABB(
        base_aabb.min_x,
        base_aabb.min_y,
        base_aabb.min_z,
        base_aabb.max_x,
        base_aabb.max_y,
        base_aabb.min_z + height,
    )


class PolygonalPrism:
    """A prism with a polygonal base extruded by a positive height."""

    __slots__ = ("_base", "_height", "_aabb")

    def __init__(self, vertices: Iterable[Vec2], height: float) -> None:
        self._base = Polygon2D(tuple(vertices))
        self._height = height
        self._aabb = make_prism_aabb(self._base.get_aabb(), height)

    @property
    def base(self) -> Polygon2D:
        """The base polygon."""
        return self._base

    @property
    def height(self) -> float:
        """The extrusion height."""
        return self._height

    @property
    def bottom_z(self) -> float:
        """The z coordinate of the base."""
        return self._aabb.min_z

    @property
    def top_z(self) -> float:
        """The z coordinate of the top face."""
        return self._aabb.max_z

    def get_aabb(self) -> AABB:
        """Bounding box of the prism."""
        return self._aabb

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._base == other._base and self._height == other._height

    def __hash__(self) -> int:
        return hash((self._base, self._height))

    def __repr__(self) -> str:
        return f"PolygonalPrism(vertices={self._base.vertices!r}, height={self._height!r})"


class _FixedPrism:
    """A prism whose base has a fixed number of vertices."""

    VERTEX_COUNT: ClassVar[int]
    BASE_NAME: ClassVar[str]
    __slots__ = ("_prism",)

    def __init__(self, vertices: Iterable[Vec2], height: float) -> None:
        prism = PolygonalPrism(vertices, height)
        if len(prism.base.vertices) != self.VERTEX_COUNT:
            raise ValueError(f"{self.BASE_NAME} requires exactly {self.VERTEX_COUNT} vertices")
        self._prism = prism

    @property
    def base(self) -> Polygon2D:
        """The base polygon."""
        return self._prism.base

    @property
    def height(self) -> float:
        """The extrusion height."""
        return self._prism.height

    @property
    def bottom_z(self) -> float:
        """The z coordinate of the base."""
        return self._prism.bottom_z

    @property
    def top_z(self) -> float:
        """The z coordinate of the top face."""
        return self._prism.top_z

    def get_aabb(self) -> AABB:
        """Bounding box of the prism."""
        return self._prism.get_aabb()

    def as_polygonal_prism(self) -> PolygonalPrism:
        """The prism as a general polygonal prism."""
        return self._prism

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._prism == other._prism

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._prism))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.base.vertices!r}, height={self.height!r})"
        )


class TriangularPrism(_FixedPrism):
    """A prism with a triangular base."""

    VERTEX_COUNT = 3
    BASE_NAME = "Triangle2D"
    __slots__ = ()

    def get_aabb(self) -> AABB:
        """Bounding box of the triangular prism."""
        return super().get_aabb()

    def as_polygonal_prism(self) -> PolygonalPrism:
        """The triangular prism as a general polygonal prism."""
        return super().as_polygonal_prism()


class QuadrilateralPrism(_FixedPrism):
    """A prism with a quadrilateral base."""

    VERTEX_COUNT = 4
    BASE_NAME = "Quadrilateral2D"
    __slots__ = ()

    def get_aabb(self) -> AABB:
        """Bounding box of the quadrilateral prism."""
        return super().get_aabb()

    def as_polygonal_prism(self) -> PolygonalPrism:
        """The quadrilateral prism as a general polygonal prism."""
        return super().as_polygonal_prism()


@dataclass(frozen=True)
class Cylinder:
    """A circular cylinder standing on the plane z = 0."""

    center: Vec2
    radius: float
    height: float
    aabb: AABB = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        base = Circle2D(self.center, self.radius)
        object.__setattr__(self, "aabb", make_prism_aabb(base.get_aabb(), self.height))

    @property
    def bottom_z(self) -> float:
        """The z coordinate of the base."""
        return self.aabb.min_z

    @property
    def top_z(self) -> float:
        """The z coordinate of the top face."""
        return self.aabb.max_z

    def get_aabb(self) -> AABB:
        """Bounding box of the cylinder."""
        return self.aabb


@dataclass(frozen=True)
class EllipticalCylinder:
    """A cylinder with an axis-aligned elliptical base on the plane z = 0."""

    center: Vec2
    radius_x: float
    radius_y: float
    height: float
    aabb: AABB = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        base = Ellipse2D(self.center, self.radius_x, self.radius_y)
        object.__setattr__(self, "aabb", make_prism_aabb(base.get_aabb(), self.height))

    @property
    def bottom_z(self) -> float:
        """The z coordinate of the base."""
        return self.aabb.min_z

    @property
    def top_z(self) -> float:
        """The z coordinate of the top face."""
        return self.aabb.max_z

    def get_aabb(self) -> AABB:
        """Bounding box of the elliptical cylinder."""
        return self.aabb


def make_triangular_prism(vertices: Iterable[Vec2], height: float) -> TriangularPrism:
    """Build a triangular prism from exactly three base vertices."""
    vertices = tuple(vertices)
    if len(vertices) != 3:
        raise ValueError("Triangle2D requires exactly 3 vertices")
    return TriangularPrism(vertices, height)


def make_quadrilateral_prism(vertices: Iterable[Vec2], height: float) -> QuadrilateralPrism:
    """Build a quadrilateral prism from exactly four base vertices."""
    vertices = tuple(vertices)
    if len(vertices) != 4:
        raise ValueError("Quadrilateral2D requires exactly 4 vertices")
    return QuadrilateralPrism(vertices, height)