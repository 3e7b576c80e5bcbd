[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelplanet"
version = "0.1.0"
description = "Player, camera and terrain simulation for a cube-rounded voxel planet with planet-centred gravity"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["voxel", "planet", "game", "simulation", "camera", "gravity", "noise"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["voxelplanet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
