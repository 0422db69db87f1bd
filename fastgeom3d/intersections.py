"""Intersection tests and classification between shapes of the package."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from typing import Any

from fastgeom3d.aabb import AABB
from fastgeom3d.planar import (
    circle_intersects_ellipse,
    circles_intersect,
    polygon_intersects_circle,
    polygon_intersects_ellipse,
    polygons_intersect,
    polyline_intersects_circle,
    polyline_intersects_ellipse,
    polyline_intersects_polygon,
    polylines_intersect,
)
from fastgeom3d.shapes2d import (
    Circle2D,
    Ellipse2D,
    Polygon2D,
    Polyline2D,
    Quadrilateral2D,
    Triangle2D,
)
from fastgeom3d.shapes3d import Polyline, Sphere


class IntersectionType(enum.Enum):
    """How two shapes relate: apart, overlapping, or touching on the boundary."""

    NONE = enum.auto()
    OVERLAP = enum.auto()
    TOUCH = enum.auto()


_POLYGON_TYPES = (Polygon2D, Triangle2D, Quadrilateral2D)


def _planar_kind(shape: Any) -> str | None:
    if isinstance(shape, Polyline2D):
        return "polyline"
    if isinstance(shape, Circle2D):
        return "circle"
    if isinstance(shape, Ellipse2D):
        return "ellipse"
    if isinstance(shape, _POLYGON_TYPES):
        return "polygon"
    return None


_PLANAR_TESTS: dict[tuple[str, str], Callable[[Any, Any], bool]] = {
    ("polyline", "polyline"): polylines_intersect,
    ("polyline", "circle"): polyline_intersects_circle,
    ("circle", "polyline"): lambda a, b: polyline_intersects_circle(b, a),
    ("polyline", "polygon"): lambda a, b: polyline_intersects_polygon(a, b.vertices),
    ("polygon", "polyline"): lambda a, b: polyline_intersects_polygon(b, a.vertices),
    ("circle", "circle"): circles_intersect,
    ("polygon", "circle"): lambda a, b: polygon_intersects_circle(a.vertices, b),
    ("circle", "polygon"): lambda a, b: polygon_intersects_circle(b.vertices, a),
    ("polygon", "polygon"): lambda a, b: polygons_intersect(a.vertices, b.vertices),
    ("polyline", "ellipse"): polyline_intersects_ellipse,
    ("ellipse", "polyline"): lambda a, b: polyline_intersects_ellipse(b, a),
    ("circle", "ellipse"): circle_intersects_ellipse,
    ("ellipse", "circle"): lambda a, b: circle_intersects_ellipse(b, a),
    ("polygon", "ellipse"): lambda a, b: polygon_intersects_ellipse(a.vertices, b),
    ("ellipse", "polygon"): lambda a, b: polygon_intersects_ellipse(b.vertices, a),
}


def _bounding_box(shape: Any) -> AABB:
    get_aabb = getattr(shape, "get_aabb", None)
    if get_aabb is None:
        raise TypeError(f"{type(shape).__name__} has no bounding box")
    box = get_aabb()
    if not isinstance(box, AABB):
        raise TypeError(f"{type(shape).__name__}.get_aabb() did not return an AABB")
    return box


def _boxes_type(a: AABB, b: AABB) -> IntersectionType:
    pairs = (
        (a.min_x, a.max_x, b.min_x, b.max_x),
        (a.min_y, a.max_y, b.min_y, b.max_y),
        (a.min_z, a.max_z, b.min_z, b.max_z),
    )
    if not all(min_a <= max_b and max_a >= min_b for min_a, max_a, min_b, max_b in pairs):
        return IntersectionType.NONE
    # Open overlap on every axis is OVERLAP; a shared boundary on any axis is TOUCH.
    if all(min_a < max_b and max_a > min_b for min_a, max_a, min_b, max_b in pairs):
        return IntersectionType.OVERLAP
    return IntersectionType.TOUCH


def _classify(distance_squared: float, limit_squared: float) -> IntersectionType:
    if distance_squared > limit_squared:
        return IntersectionType.NONE
    if distance_squared < limit_squared:
        return IntersectionType.OVERLAP
    return IntersectionType.TOUCH


def _spheres_type(a: Sphere, b: Sphere) -> IntersectionType:
    dx = a.center.x - b.center.x
    dy = a.center.y - b.center.y
    dz = a.center.z - b.center.z
    r = a.radius + b.radius
    return _classify(dx * dx + dy * dy + dz * dz, r * r)


def _box_sphere_type(box: AABB, sphere: Sphere) -> IntersectionType:
    # Distance from the sphere's centre to the nearest point of the box.
    c = sphere.center
    cx = min(max(c.x, box.min_x), box.max_x)
    cy = min(max(c.y, box.min_y), box.max_y)
    cz = min(max(c.z, box.min_z), box.max_z)
    dx = c.x - cx
    dy = c.y - cy
    dz = c.z - cz
    return _classify(dx * dx + dy * dy + dz * dz, sphere.radius * sphere.radius)


def intersection_type(a: Any, b: Any) -> IntersectionType:
    """Classify two shapes as NONE, TOUCH or OVERLAP.

    Boxes, spheres, and a box against a sphere are classified exactly;
    every other pair is classified by its bounding boxes.
    """
    if isinstance(a, AABB) and isinstance(b, AABB):
        return _boxes_type(a, b)
    if isinstance(a, Sphere) and isinstance(b, Sphere):
        return _spheres_type(a, b)
    if isinstance(a, AABB) and isinstance(b, Sphere):
        return _box_sphere_type(a, b)
    return _boxes_type(_bounding_box(a), _bounding_box(b))


def intersect(a: Any, b: Any) -> bool:
    """True when two shapes cross or touch.

    Pairs of planar shapes use exact (or, for a circle and an ellipse, sampled)
    tests; boxes and spheres are tested exactly; anything else falls back to
    its bounding boxes.
    """
    if isinstance(a, (AABB, Sphere)) and isinstance(b, (AABB, Sphere)):
        if not (isinstance(a, Sphere) and isinstance(b, AABB)):
            return intersection_type(a, b) is not IntersectionType.NONE
    kinds = (_planar_kind(a), _planar_kind(b))
    test = _PLANAR_TESTS.get(kinds) if None not in kinds else None
    if test is not None:
        return test(a, b)
    return _boxes_type(_bounding_box(a), _bounding_box(b)) is not IntersectionType.NONE


def _as_lines(lines: Polyline | Iterable[Polyline]) -> tuple[Polyline, ...]:
    if isinstance(lines, Polyline):
        return (lines,)
    return tuple(lines)


def intersects_any(lines: Polyline | Iterable[Polyline], shapes: Iterable[Any]) -> bool:
    """True when any of the polylines meets any shape; ``None`` shapes are skipped."""
    lines = _as_lines(lines)
    return any(
        intersect(line, shape) for shape in shapes if shape is not None for line in lines
    )


def intersecting_shapes(
    lines: Polyline | Iterable[Polyline], shapes: Iterable[Any]
) -> list[Any]:
    """Shapes met by at least one of the polylines, in their original order."""
    lines = _as_lines(lines)
    return [
        shape
        for shape in shapes
        if shape is not None and any(intersect(line, shape) for line in lines)
    ]