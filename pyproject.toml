[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sc2kit"
version = "0.1.0"
description = "Geometry, distance queries, game data records, map information and tech-tree tables for real-time strategy bots"
requires-python = ">=3.10"
dependencies = []
keywords = ["starcraft", "sc2", "bot", "rts", "geometry", "tech-tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sc2kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
