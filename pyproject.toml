[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vivotk"
version = "0.1.0"
description = "Point cloud utilities for volumetric video streaming: throughput predictors, Velodyne files, upsampling and playback traces"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "point cloud",
    "volumetric video",
    "velodyne",
    "upsampling",
    "throughput prediction",
    "dash",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["vivotk"]

[tool.hatch.build.targets.sdist]
include = ["vivotk", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
