[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelfortress"
version = "0.1.0"
description = "Chunked voxel storage, quadtree lookup, heightmap terrain generation and a spectator camera"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["voxel", "chunk", "quadtree", "terrain", "camera", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["voxelfortress"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
