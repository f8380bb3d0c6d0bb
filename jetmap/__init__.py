"""Map, model and texture loading plus player and camera logic for a small street game."""

__version__ = "0.1.0"
__all__ = ["assets", "bmap", "textures", "obj", "game"]