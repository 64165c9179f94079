"""A tile-based dungeon puzzle game: map checks, levels, movement rules and a pygame front end."""

__version__ = "1.0.0"