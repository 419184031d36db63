[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonweave"
version = "0.1.0"
description = "Grid-based dungeon building blocks: room templates, typed doors, placement, room graphs and pathfinding."
requires-python = ">=3.10"
dependencies = []
keywords = ["dungeon", "procedural generation", "roguelike", "level design", "game", "pathfinding"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dungeonweave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
