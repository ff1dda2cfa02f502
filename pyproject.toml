[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polycover"
version = "0.1.0"
description = "Graph search, boolean lattices, GTSP tasks, visualization markers and a polygon editor for coverage planning in polygons with holes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "coverage planning",
    "polygon",
    "graph",
    "dijkstra",
    "a-star",
    "boolean lattice",
    "gtsp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polycover"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
