import pytest

from fastgeom3d.aabb import AABB
from fastgeom3d.core import Vec2
from fastgeom3d.prisms import (
    Cylinder,
    EllipticalCylinder,
    PolygonalPrism,
    QuadrilateralPrism,
    TriangularPrism,
    make_prism_aabb,
    make_quadrilateral_prism,
    make_triangular_prism,
)

TRIANGLE = [Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(0.0, 1.0)]
RECTANGLE = [Vec2(0.0, 0.0), Vec2(2.0, 0.0), Vec2(2.0, 1.0), Vec2(0.0, 1.0)]


def test_triangular_prism_factory():
    prism = make_triangular_prism(TRIANGLE, 2.0)
    assert len(prism.base.vertices) == 3
    assert prism.height == 2.0


def test_quadrilateral_prism_factory():
    prism = make_quadrilateral_prism(RECTANGLE, 3.0)
    assert len(prism.base.vertices) == 4
    assert prism.height == 3.0


def test_make_prism_aabb_extrudes_flat_base():
    box = make_prism_aabb(AABB(0.0, 1.0, 2.0, 3.0, 4.0, 2.0), 5.0)
    assert box == AABB(0.0, 1.0, 2.0, 3.0, 4.0, 7.0)


@pytest.mark.parametrize("height", [0.0, -1.0])
def test_make_prism_aabb_rejects_non_positive_height(height):
    with pytest.raises(ValueError, match="height must be positive"):
        make_prism_aabb(AABB(0.0, 0.0, 0.0, 1.0, 1.0, 0.0), height)


def test_make_prism_aabb_rejects_non_flat_base():
    with pytest.raises(ValueError, match="flat"):
        make_prism_aabb(AABB(0.0, 0.0, 0.0, 1.0, 1.0, 1.0), 1.0)


def test_polygonal_prism_bounds():
    prism = PolygonalPrism(RECTANGLE, 3.0)
    assert prism.get_aabb() == AABB(0.0, 0.0, 0.0, 2.0, 1.0, 3.0)
    assert prism.bottom_z == 0.0
    assert prism.top_z == 3.0
    assert prism.base.vertices == tuple(RECTANGLE)


def test_polygonal_prism_rejects_too_few_vertices():
    with pytest.raises(ValueError):
        PolygonalPrism([Vec2(0.0, 0.0), Vec2(1.0, 1.0)], 1.0)


def test_polygonal_prism_rejects_zero_height():
    with pytest.raises(ValueError):
        PolygonalPrism(RECTANGLE, 0.0)


def test_triangular_prism_rejects_four_vertices():
    with pytest.raises(ValueError, match="exactly 3"):
        TriangularPrism(RECTANGLE, 1.0)


def test_quadrilateral_prism_rejects_three_vertices():
    with pytest.raises(ValueError, match="exactly 4"):
        QuadrilateralPrism(TRIANGLE, 1.0)


def test_factories_reject_wrong_counts():
    with pytest.raises(ValueError):
        make_triangular_prism(RECTANGLE, 1.0)
    with pytest.raises(ValueError):
        make_quadrilateral_prism(TRIANGLE, 1.0)


def test_fixed_prism_delegates_to_polygonal_prism():
    prism = make_triangular_prism(TRIANGLE, 2.0)
    general = prism.as_polygonal_prism()
    assert general == PolygonalPrism(TRIANGLE, 2.0)
    assert prism.get_aabb() == general.get_aabb() == AABB(0.0, 0.0, 0.0, 1.0, 1.0, 2.0)
    assert prism.top_z == 2.0
    assert prism.bottom_z == 0.0


def test_quadrilateral_prism_equality():
    assert make_quadrilateral_prism(RECTANGLE, 3.0) == QuadrilateralPrism(RECTANGLE, 3.0)
    assert make_quadrilateral_prism(RECTANGLE, 3.0) != QuadrilateralPrism(RECTANGLE, 4.0)


def test_cylinder_bounds():
    cylinder = Cylinder(Vec2(1.0, 2.0), 2.5, 4.0)
    assert cylinder.get_aabb() == AABB(-1.5, -0.5, 0.0, 3.5, 4.5, 4.0)
    assert cylinder.bottom_z == 0.0
    assert cylinder.top_z == 4.0
    assert cylinder.radius == 2.5


def test_cylinder_rejects_invalid_radius_and_height():
    with pytest.raises(ValueError, match="radius"):
        Cylinder(Vec2(0.0, 0.0), 0.0, 1.0)
    with pytest.raises(ValueError, match="height"):
        Cylinder(Vec2(0.0, 0.0), 1.0, -1.0)


def test_elliptical_cylinder_bounds():
    cylinder = EllipticalCylinder(Vec2(0.0, 0.0), 2.0, 1.0, 3.0)
    assert cylinder.get_aabb() == AABB(-2.0, -1.0, 0.0, 2.0, 1.0, 3.0)
    assert cylinder.top_z == 3.0
    assert cylinder.bottom_z == 0.0


def test_elliptical_cylinder_rejects_invalid_radii():
    with pytest.raises(ValueError):
        EllipticalCylinder(Vec2(0.0, 0.0), 1.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        EllipticalCylinder(Vec2(0.0, 0.0), 1.0, 1.0, 0.0)