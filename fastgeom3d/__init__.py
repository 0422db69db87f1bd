"""Geometric primitives, bounding boxes, UTM coordinates and intersection tests in 2D and 3D."""

__version__ = "0.1.0"

__all__ = [
    "core",
    "aabb",
    "shapes2d",
    "annular_sector",
    "prisms",
    "shapes3d",
    "planar",
    "intersections",
]