[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resgraph"
version = "0.1.0"
description = "Interactive console for weighted directed acyclic graphs: cycle rejection, shortest paths and path enumeration"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "dag", "cycle-detection", "shortest-path", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.scripts]
resgraph = "resgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["resgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
