"""A small terminal role-playing game engine: screen, timer, input, levels, objects and stats."""

__version__ = "0.1.0"