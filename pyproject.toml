[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapekit"
version = "0.1.0"
description = "Plane shapes (ellipses, circles, triangles, rectangles, squares) with area, perimeter and an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "shapes", "area", "perimeter", "ellipse", "triangle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.scripts]
shapekit = "shapekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shapekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
