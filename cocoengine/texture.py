"""Loaded assets and the textures that sprites draw from."""

from __future__ import annotations

from cocoengine.serialization import Rect


class Asset:
    """Something loaded from a file, remembered by the path it came from."""

    def __init__(self, filepath: str = ""):
        self._filepath = filepath

    @property
    def filepath(self) -> str:
        return self._filepath


class Texture(Asset):
    """An image of a known pixel size that renderers can sample from."""

    def __init__(self, width: int, height: int, filepath: str = ""):
        if width < 0 or height < 0:
            raise ValueError(f"texture size must be non-negative, got {width}x{height}")
        super().__init__(filepath)
        self.width = width
        self.height = height

    def rect(self) -> Rect:
        """The full texture area, anchored at the origin."""
        return Rect(0, 0, self.width, self.height)

    def __repr__(self) -> str:
        return f"Texture({self.width}, {self.height}, {self.filepath!r})"