[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paxkit"
version = "0.1.0"
description = "Ordered-sample statistics, L- and TL-moments, raster cell indexing and small helpers for point-cloud metrics"
requires-python = ">=3.10"
dependencies = []
keywords = ["lidar", "point cloud", "raster", "statistics", "l-moments", "percentile", "gis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["paxkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
