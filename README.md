# fastgeom3d

This package provides geometry primitives for 2D and 3D work. It has vectors,
axis-aligned bounding boxes, planar shapes, extruded prisms, spheres and 3D
polylines. It also has UTM coordinates and intersection tests between the
shapes. It is pure Python and needs no other packages.

## Installation

```
pip install fastgeom3d
```

## Modules

- `fastgeom3d.core`
  - `Vec2` and `Vec3`. `Vec3` provides `add`, `sub`, `+`, `-`, `dot` and `length_squared`.
  - `UTMCoordinate`. It validates the zone number (1–60) and provides `to_vec3` and `from_lat_lon`.
  - `distance_3d` and `volume_of_unit_cube`.
- `fastgeom3d.aabb`
  - `AABB`. Build it directly, or with `from_center_half_extents`, `from_points` or `from_points_2d`.
- `fastgeom3d.shapes2d`
  - `Circle2D`, `Ellipse2D`, `Polygon2D`, `Polyline2D`, `Triangle2D` and `Quadrilateral2D`.
  - The factories `make_triangle_2d` and `make_quadrilateral_2d`.
- `fastgeom3d.annular_sector`
  - `AnnularSector2D`, a ring sector between two radii and two bearings.
  - Bearings are in radians. 0 points north (+y), and bearings increase clockwise, so π/2 is east.
- `fastgeom3d.prisms`
  - `PolygonalPrism`, `TriangularPrism`, `QuadrilateralPrism`, `Cylinder` and `EllipticalCylinder`.
  - The factories `make_triangular_prism` and `make_quadrilateral_prism`.
  - `make_prism_aabb`, which extrudes a flat bounding box upwards by a height.
- `fastgeom3d.shapes3d`
  - `Sphere`.
  - `Polyline`, which can be built from UTM points with `Polyline.from_utm`.
  - `ContinuousRectangularPrism`, a chain of boxes. Each box joins the next on a face of the same size.
- `fastgeom3d.planar`
  - Tests between pairs of 2D shapes.
- `fastgeom3d.intersections`
  - `intersect`, `intersection_type`, `intersects_any`, `intersecting_shapes` and `IntersectionType`.

Every shape has `get_aabb()`, which returns its bounding box. Planar shapes lie
in the plane z = 0.

## Example

```python
from fastgeom3d.core import Vec2, Vec3, UTMCoordinate
from fastgeom3d.shapes2d import Circle2D, Polygon2D
from fastgeom3d.shapes3d import Sphere
from fastgeom3d.intersections import intersect, intersection_type, IntersectionType

square = Polygon2D([Vec2(0, 0), Vec2(4, 0), Vec2(4, 4), Vec2(0, 4)])
print(intersect(square, Circle2D(Vec2(2, 2), 0.5)))   # True

a = Sphere(Vec3(0, 0, 0), 1.0)
b = Sphere(Vec3(2, 0, 0), 1.0)
print(intersection_type(a, b) is IntersectionType.TOUCH)   # True

utm = UTMCoordinate.from_lat_lon(35.0, 139.0, 100.0)
print(utm.zone_number, utm.to_vec3())
```

## How shapes are tested

`intersect(a, b)` returns True when the shapes cross or touch.

- **Two planar shapes** (circles, ellipses, polygons, triangles, quadrilaterals
  and 2D polylines) use the tests in `fastgeom3d.planar`.
  - Edge-against-edge and point-in-polygon checks are exact.
  - Circle against ellipse is an approximation. It checks the circle's centre and 32 sample points on its rim.
  - Polygon against ellipse reports a hit in two cases: an edge meets the ellipse, or the polygon's first vertex lies inside it.
- **Boxes and spheres** are tested exactly. This covers box with box, sphere
  with sphere, and box with sphere.
- **Any other pair** compares bounding boxes. This includes a sphere given
  before a box, because the exact box-and-sphere test only runs with the box first.

`intersection_type(a, b)` classifies a pair as `NONE`, `TOUCH` or `OVERLAP`.

- Box with box is classified by the boxes.
- Sphere with sphere is classified by the spheres themselves.
- A box followed by a sphere is classified exactly.
- Every other pair is classified by its bounding boxes.

`intersects_any` and `intersecting_shapes` take a single `Polyline` or an
iterable of them, together with a list of shapes. Shapes that are `None` are
skipped. `intersecting_shapes` keeps the shapes in their original order.

Invalid input raises `ValueError`. This covers:

- a non-positive radius or height;
- too few vertices, or the wrong number of vertices;
- inconsistent annular sector parameters;
- a UTM zone outside 1–60;
- a latitude outside −80…84 in `from_lat_lon`;
- an empty point list;
- boxes in a `ContinuousRectangularPrism` that do not join on matching faces.

A shape with no `get_aabb()` passed to `intersect` or `intersection_type`
raises `TypeError`.

## Limits

This is a library only. It has no command-line tool and stores nothing.

UTM conversion runs in one direction only, from latitude and longitude to UTM.

The only shapes that carry a z position other than 0 are boxes, spheres and 3D
polylines. Prisms and cylinders always stand on the plane z = 0.

## Running the tests

```
pip install -e ".[test]"
pytest
```