"""Pygame screens, panels and widgets for a dungeon role-playing game."""

__version__ = "1.0.0"