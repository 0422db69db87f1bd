[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastgeom3d"
version = "0.1.0"
description = "2D and 3D geometric shapes, bounding boxes, UTM coordinates and intersection tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "aabb", "intersection", "utm", "polygon", "prism", "sphere"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fastgeom3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
