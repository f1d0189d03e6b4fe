"""Grid raycasting engine with textured walls, player movement and small text utilities."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "memory",
    "strings",
    "lists",
    "output",
    "linereader",
    "settings",
    "player",
    "raycast",
]