"""Dungeon-crawler game core: ECS, dungeon layout generation, Tiled map reading, input and state handling."""

__version__ = "0.1.0"