"""Core systems for a top-down tile-based adventure game: entity world, console, animations, cameras, AI actions and easings."""

__version__ = "0.1.0"