"""Grid-based dungeon building blocks: room templates, typed doors, placement, room graphs and pathfinding."""

__version__ = "0.1.0"