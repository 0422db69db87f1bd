"""Exact and sampled intersection tests between planar shapes."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence

from fastgeom3d.core import Vec2
from fastgeom3d.shapes2d import Circle2D, Ellipse2D, Polygon2D, Polyline2D

_COLLINEAR_TOLERANCE = 1e-9
_CIRCLE_SAMPLE_COUNT = 32
_UNIT_CIRCLE_SAMPLES = tuple(
    (math.cos(angle), math.sin(angle))
    for angle in (
        2.0 * math.pi * index / _CIRCLE_SAMPLE_COUNT for index in range(_CIRCLE_SAMPLE_COUNT)
    )
)

Segment = tuple[Vec2, Vec2]


def _squared_distance(a: Vec2, b: Vec2) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def _orientation(a: Vec2, b: Vec2, c: Vec2) -> int:
    """1 for counter-clockwise, -1 for clockwise, 0 for collinear."""
    value = (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)
    return (value > 0) - (value < 0)


def _point_on_segment(point: Vec2, a: Vec2, b: Vec2) -> bool:
    cross = (point.y - a.y) * (b.x - a.x) - (point.x - a.x) * (b.y - a.y)
    if abs(cross) > _COLLINEAR_TOLERANCE:
        return False
    dot = (point.x - a.x) * (b.x - a.x) + (point.y - a.y) * (b.y - a.y)
    if dot < 0.0:
        return False
    return dot <= _squared_distance(a, b)


def _segments_intersect(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> bool:
    # Endpoints lying on the other segment are contacts.
    if (
        _point_on_segment(a1, b1, b2)
        or _point_on_segment(a2, b1, b2)
        or _point_on_segment(b1, a1, a2)
        or _point_on_segment(b2, a1, a2)
    ):
        return True
    return _orientation(a1, a2, b1) != _orientation(a1, a2, b2) and _orientation(
        b1, b2, a1
    ) != _orientation(b1, b2, a2)


def _open_segments(points: Sequence[Vec2]) -> Iterator[Segment]:
    return zip(points, points[1:])


def _closed_edges(vertices: Sequence[Vec2]) -> Iterator[Segment]:
    return zip(vertices, (*vertices[1:], vertices[0]))


def _polygon_vertices(vertices: Iterable[Vec2]) -> tuple[Vec2, ...]:
    return Polygon2D(tuple(vertices)).vertices


def _point_in_polygon(point: Vec2, vertices: Sequence[Vec2]) -> bool:
    """True when the point is inside the polygon or on its boundary."""
    inside = False
    for pj, pi in zip((vertices[-1], *vertices[:-1]), vertices):
        if _point_on_segment(point, pj, pi):
            return True
        if (pi.y > point.y) != (pj.y > point.y) and point.x < (pj.x - pi.x) * (
            point.y - pi.y
        ) / (pj.y - pi.y) + pi.x:
            inside = not inside
    return inside


def _point_in_ellipse(point: Vec2, ellipse: Ellipse2D) -> bool:
    dx = (point.x - ellipse.center.x) / ellipse.radius_x
    dy = (point.y - ellipse.center.y) / ellipse.radius_y
    return dx * dx + dy * dy <= 1.0


def _segment_intersects_circle(a: Vec2, b: Vec2, center: Vec2, radius: float) -> bool:
    dx = b.x - a.x
    dy = b.y - a.y
    r2 = radius * radius
    length2 = dx * dx + dy * dy
    if length2 == 0.0:
        return _squared_distance(a, center) <= r2
    t = -((a.x - center.x) * dx + (a.y - center.y) * dy) / length2
    t = max(0.0, min(1.0, t))
    closest = Vec2(a.x + t * dx, a.y + t * dy)
    return _squared_distance(closest, center) <= r2


def _segment_intersects_ellipse(a: Vec2, b: Vec2, ellipse: Ellipse2D) -> bool:
    if _point_in_ellipse(a, ellipse) or _point_in_ellipse(b, ellipse):
        return True
    dx = b.x - a.x
    dy = b.y - a.y
    cx = a.x - ellipse.center.x
    cy = a.y - ellipse.center.y
    rx2 = ellipse.radius_x * ellipse.radius_x
    ry2 = ellipse.radius_y * ellipse.radius_y
    qa = dx * dx / rx2 + dy * dy / ry2
    qb = 2.0 * (cx * dx / rx2 + cy * dy / ry2)
    qc = cx * cx / rx2 + cy * cy / ry2 - 1.0
    if qa == 0.0:
        return _point_in_ellipse(a, ellipse)

    # Solve for the segment parameter; a root in [0, 1] is a crossing.
    discriminant = qb * qb - 4.0 * qa * qc
    if discriminant < 0.0:
        return False
    root = math.sqrt(discriminant)
    t1 = (-qb - root) / (2.0 * qa)
    t2 = (-qb + root) / (2.0 * qa)
    return 0.0 <= t1 <= 1.0 or 0.0 <= t2 <= 1.0


def polylines_intersect(line: Polyline2D, other: Polyline2D) -> bool:
    """True when two polylines cross or touch."""
    return any(
        _segments_intersect(a1, a2, b1, b2)
        for a1, a2 in _open_segments(line.points)
        for b1, b2 in _open_segments(other.points)
    )


def polyline_intersects_circle(line: Polyline2D, circle: Circle2D) -> bool:
    """True when any segment of the polyline reaches the closed disc."""
    return any(
        _segment_intersects_circle(a, b, circle.center, circle.radius)
        for a, b in _open_segments(line.points)
    )


def polyline_intersects_polygon(line: Polyline2D, vertices: Iterable[Vec2]) -> bool:
    """True when the polyline crosses the polygon's boundary or has a point inside it."""
    vertices = _polygon_vertices(vertices)
    if any(
        _segments_intersect(a, b, v1, v2)
        for a, b in _open_segments(line.points)
        for v1, v2 in _closed_edges(vertices)
    ):
        return True
    return any(_point_in_polygon(point, vertices) for point in line.points)


def circles_intersect(a: Circle2D, b: Circle2D) -> bool:
    """True when two closed discs overlap or touch."""
    radius_sum = a.radius + b.radius
    return _squared_distance(a.center, b.center) <= radius_sum * radius_sum


def polygon_intersects_circle(vertices: Iterable[Vec2], circle: Circle2D) -> bool:
    """True when the circle's centre is in the polygon or an edge reaches the disc."""
    vertices = _polygon_vertices(vertices)
    if _point_in_polygon(circle.center, vertices):
        return True
    return any(
        _segment_intersects_circle(a, b, circle.center, circle.radius)
        for a, b in _closed_edges(vertices)
    )


def polygons_intersect(vertices_a: Iterable[Vec2], vertices_b: Iterable[Vec2]) -> bool:
    """True when two polygons have crossing edges or one contains the other."""
    vertices_a = _polygon_vertices(vertices_a)
    vertices_b = _polygon_vertices(vertices_b)
    if any(
        _segments_intersect(a1, a2, b1, b2)
        for a1, a2 in _open_segments(vertices_a)
        for b1, b2 in _closed_edges(vertices_b)
    ):
        return True
    if any(_segments_intersect(vertices_a[-1], vertices_a[0], b1, b2) for b1, b2 in _closed_edges(vertices_b)):
        return True
    return _point_in_polygon(vertices_a[0], vertices_b) or _point_in_polygon(
        vertices_b[0], vertices_a
    )


def polyline_intersects_ellipse(line: Polyline2D, ellipse: Ellipse2D) -> bool:
    """True when the polyline crosses the ellipse or has a point inside it."""
    if any(_segment_intersects_ellipse(a, b, ellipse) for a, b in _open_segments(line.points)):
        return True
    return any(_point_in_ellipse(point, ellipse) for point in line.points)


def circle_intersects_ellipse(circle: Circle2D, ellipse: Ellipse2D) -> bool:
    """Approximate test: the circle's centre or one of 32 points on its rim lies in the ellipse."""
    if _point_in_ellipse(circle.center, ellipse):
        return True
    inverse_rx = 1.0 / ellipse.radius_x
    inverse_ry = 1.0 / ellipse.radius_y
    for cos_a, sin_a in _UNIT_CIRCLE_SAMPLES:
        dx = (circle.center.x + circle.radius * cos_a - ellipse.center.x) * inverse_rx
        dy = (circle.center.y + circle.radius * sin_a - ellipse.center.y) * inverse_ry
        if dx * dx + dy * dy <= 1.0:
            return True
    return False


def polygon_intersects_ellipse(vertices: Iterable[Vec2], ellipse: Ellipse2D) -> bool:
    """True when a polygon edge crosses the ellipse or the first vertex lies inside it."""
    vertices = _polygon_vertices(vertices)
    if any(_segment_intersects_ellipse(a, b, ellipse) for a, b in _closed_edges(vertices)):
        return True
    return _point_in_ellipse(vertices[0], ellipse)