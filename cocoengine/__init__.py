"""Core pieces of a small 2D game engine: matrices, transforms, timers, sprites, an entity world and scenes."""

__version__ = "0.1.0"