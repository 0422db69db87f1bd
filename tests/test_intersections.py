import math

import pytest

from fastgeom3d.aabb import AABB
from fastgeom3d.annular_sector import AnnularSector2D
from fastgeom3d.core import Vec2, Vec3
from fastgeom3d.intersections import (
    IntersectionType,
    intersect,
    intersecting_shapes,
    intersection_type,
    intersects_any,
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


def _square(x0, y0, size):
    return [Vec2(x0, y0), Vec2(x0 + size, y0), Vec2(x0 + size, y0 + size), Vec2(x0, y0 + size)]


def test_sphere_intersection_type():
    a = Sphere(Vec3(0.0, 0.0, 0.0), 1.0)
    assert intersection_type(a, Sphere(Vec3(1.5, 0.0, 0.0), 1.0)) is IntersectionType.OVERLAP
    assert intersection_type(a, Sphere(Vec3(2.0, 0.0, 0.0), 1.0)) is IntersectionType.TOUCH
    assert intersection_type(a, Sphere(Vec3(3.0, 0.0, 0.0), 1.0)) is IntersectionType.NONE


def test_aabb_intersection():
    a = AABB(0.0, 0.0, 0.0, 2.0, 2.0, 2.0)
    assert intersect(a, AABB(1.0, 1.0, 1.0, 3.0, 3.0, 3.0)) is True
    assert intersect(a, AABB(3.0, 3.0, 3.0, 4.0, 4.0, 4.0)) is False


def test_aabb_intersection_types():
    a = AABB(0.0, 0.0, 0.0, 2.0, 2.0, 2.0)
    assert intersection_type(a, AABB(1.0, 1.0, 1.0, 3.0, 3.0, 3.0)) is IntersectionType.OVERLAP
    assert intersection_type(a, AABB(2.0, 0.0, 0.0, 3.0, 2.0, 2.0)) is IntersectionType.TOUCH
    assert intersection_type(a, AABB(2.5, 0.0, 0.0, 3.0, 2.0, 2.0)) is IntersectionType.NONE


def test_aabb_sphere_intersection_type():
    box = AABB(0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
    assert intersection_type(box, Sphere(Vec3(0.5, 0.5, 0.5), 0.1)) is IntersectionType.OVERLAP
    assert intersection_type(box, Sphere(Vec3(2.0, 0.5, 0.5), 1.0)) is IntersectionType.TOUCH
    assert intersection_type(box, Sphere(Vec3(3.0, 0.5, 0.5), 1.0)) is IntersectionType.NONE
    assert intersect(box, Sphere(Vec3(2.0, 2.0, 2.0), 1.0)) is False


def test_sphere_then_box_uses_bounding_boxes():
    box = AABB(0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
    sphere = Sphere(Vec3(2.0, 2.0, 2.0), 1.0)
    # Corner of the sphere's box touches the box, though the sphere itself does not.
    assert intersect(sphere, box) is True
    assert intersection_type(sphere, box) is IntersectionType.TOUCH


def test_polygon_circle_intersection():
    polygon = Polygon2D(_square(0.0, 0.0, 4.0))
    assert intersect(polygon, Circle2D(Vec2(2.0, 2.0), 0.5)) is True
    assert intersect(polygon, Circle2D(Vec2(10.0, 10.0), 1.0)) is False


def test_circle_polygon_argument_order():
    polygon = Polygon2D(_square(0.0, 0.0, 4.0))
    assert intersect(Circle2D(Vec2(2.0, 2.0), 0.5), polygon) is True
    assert intersect(Circle2D(Vec2(10.0, 10.0), 1.0), polygon) is False


def test_polyline2d_polygon_intersection():
    polygon = Polygon2D(_square(0.0, 0.0, 4.0))
    assert intersect(Polyline2D([Vec2(-1.0, 2.0), Vec2(5.0, 2.0)]), polygon) is True
    assert intersect(Polyline2D([Vec2(10.0, 10.0), Vec2(11.0, 11.0)]), polygon) is False
    assert intersect(polygon, Polyline2D([Vec2(10.0, 10.0), Vec2(11.0, 11.0)])) is False


def test_circle_intersection():
    a = Circle2D(Vec2(0.0, 0.0), 1.0)
    assert intersect(a, Circle2D(Vec2(1.5, 0.0), 1.0)) is True
    assert intersect(a, Circle2D(Vec2(3.0, 0.0), 1.0)) is False


def test_circle_intersection_differs_from_aabb_intersection():
    a = Circle2D(Vec2(0.0, 0.0), 1.0)
    b = Circle2D(Vec2(1.5, 1.5), 1.0)
    assert intersect(a, b) is False
    assert intersect(a.get_aabb(), b.get_aabb()) is True


def test_circle_intersection_can_change_with_floating_point_precision():
    base_x = 1e16
    a = Circle2D(Vec2(base_x, 0.0), 1.0)
    b = Circle2D(Vec2(base_x + 2.25, 0.0), 1.0)
    assert b.center.x - a.center.x == 2.0
    assert intersect(a, b) is True
    assert intersection_type(a, b) is IntersectionType.TOUCH


def test_circle_ellipse_intersection():
    circle = Circle2D(Vec2(0.0, 0.0), 1.0)
    assert intersect(circle, Ellipse2D(Vec2(1.6, 0.0), 1.0, 0.75)) is True


def test_circle_ellipse_no_intersection():
    circle = Circle2D(Vec2(0.0, 0.0), 1.0)
    assert intersect(circle, Ellipse2D(Vec2(4.0, 0.0), 1.0, 0.75)) is False
    assert intersect(Ellipse2D(Vec2(4.0, 0.0), 1.0, 0.75), circle) is False


def test_quadrilateral_corner_touch_intersection():
    a = Quadrilateral2D(_square(0.0, 0.0, 1.0))
    b = Quadrilateral2D(_square(1.0, 1.0, 1.0))
    assert intersect(a, b) is True
    assert intersection_type(a, b) is IntersectionType.TOUCH


def test_annular_sector_quadrilateral_touch_intersection():
    sector = AnnularSector2D(Vec2(1.0, 1.0), 1.0, 0.0, 0.0, math.pi)
    rectangle = Quadrilateral2D(
        [Vec2(2.0, 0.0), Vec2(3.0, 0.0), Vec2(3.0, 2.0), Vec2(2.0, 2.0)]
    )
    assert intersect(sector, rectangle) is True
    assert intersection_type(sector, rectangle) is IntersectionType.TOUCH


def test_quadrilateral_annular_sector_touch_intersection():
    rectangle = Quadrilateral2D(
        [Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(1.0, 2.0), Vec2(0.0, 2.0)]
    )
    sector = AnnularSector2D(Vec2(1.0, 1.0), 1.0, 0.0, 0.0, math.pi)
    assert intersect(rectangle, sector) is True
    assert intersection_type(rectangle, sector) is IntersectionType.TOUCH


def test_triangle_inside_quadrilateral():
    triangle = Triangle2D([Vec2(1.0, 1.0), Vec2(2.0, 1.0), Vec2(1.0, 2.0)])
    quad = Quadrilateral2D(_square(0.0, 0.0, 4.0))
    assert intersect(triangle, quad) is True
    assert intersect(quad, triangle) is True
    far = Triangle2D([Vec2(10.0, 10.0), Vec2(11.0, 10.0), Vec2(10.0, 11.0)])
    assert intersect(far, quad) is False


def test_polylines_crossing_and_apart():
    a = Polyline2D([Vec2(0.0, 0.0), Vec2(2.0, 2.0)])
    b = Polyline2D([Vec2(0.0, 2.0), Vec2(2.0, 0.0)])
    c = Polyline2D([Vec2(5.0, 5.0), Vec2(6.0, 6.0)])
    assert intersect(a, b) is True
    assert intersect(a, c) is False


def test_polyline_circle_both_orders():
    line = Polyline2D([Vec2(-2.0, 0.0), Vec2(2.0, 0.0)])
    assert intersect(line, Circle2D(Vec2(0.0, 0.5), 1.0)) is True
    assert intersect(Circle2D(Vec2(0.0, 3.0), 1.0), line) is False


def test_polyline_ellipse_both_orders():
    line = Polyline2D([Vec2(-5.0, 0.0), Vec2(5.0, 0.0)])
    ellipse = Ellipse2D(Vec2(0.0, 0.0), 2.0, 1.0)
    assert intersect(line, ellipse) is True
    assert intersect(ellipse, Polyline2D([Vec2(-5.0, 3.0), Vec2(5.0, 3.0)])) is False


def test_polygon_ellipse_both_orders():
    polygon = Polygon2D(_square(0.0, 0.0, 1.0))
    assert intersect(polygon, Ellipse2D(Vec2(1.5, 0.5), 1.0, 1.0)) is True
    assert intersect(Ellipse2D(Vec2(5.0, 5.0), 1.0, 1.0), polygon) is False


def test_ellipses_fall_back_to_bounding_boxes():
    a = Ellipse2D(Vec2(0.0, 0.0), 1.0, 1.0)
    b = Ellipse2D(Vec2(1.9, 1.9), 1.0, 1.0)
    assert intersect(a, b) is True
    assert intersect(a, Ellipse2D(Vec2(3.0, 0.0), 1.0, 1.0)) is False


def test_shape_without_bounding_box_is_rejected():
    with pytest.raises(TypeError):
        intersect(object(), AABB(0.0, 0.0, 0.0, 1.0, 1.0, 1.0))


def test_intersects_any_single_and_many_lines():
    line = Polyline([Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0)])
    other = Polyline([Vec3(10.0, 10.0, 10.0), Vec3(11.0, 11.0, 11.0)])
    near = Sphere(Vec3(1.5, 1.5, 1.5), 1.0)
    far = Sphere(Vec3(5.0, 5.0, 5.0), 1.0)
    assert intersects_any(line, [None, far, near]) is True
    assert intersects_any(line, [None, far]) is False
    assert intersects_any([other, line], [near]) is True
    assert intersects_any([other], [near, far]) is False
    assert intersects_any([], [near]) is False


def test_intersecting_shapes_keeps_order_and_skips_none():
    line = Polyline([Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0)])
    other = Polyline([Vec3(5.0, 5.0, 5.0), Vec3(6.0, 6.0, 6.0)])
    near = Sphere(Vec3(1.5, 1.5, 1.5), 1.0)
    far = Sphere(Vec3(20.0, 20.0, 20.0), 1.0)
    box = AABB(5.5, 5.5, 5.5, 7.0, 7.0, 7.0)
    assert intersecting_shapes(line, [box, None, far, near]) == [near]
    assert intersecting_shapes([line, other], [box, None, far, near]) == [box, near]
    assert intersecting_shapes([line], []) == []