[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rastercraft"
version = "0.1.0"
description = "Classic 2D raster graphics algorithms: line and circle rasterisation, clipping, fills, fractals and transforms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "rasterisation",
    "bresenham",
    "dda",
    "cohen-sutherland",
    "flood-fill",
    "bezier",
    "koch",
    "affine",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rastercraft-transform = "rastercraft.transform:main"

[tool.hatch.build.targets.wheel]
packages = ["rastercraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
