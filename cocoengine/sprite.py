"""Drawable things and the textured quad sprite."""

from __future__ import annotations

import dataclasses
import json
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

from cocoengine.matrix import Matrix, Vector2
from cocoengine.serialization import Color, Rect, Vertex, rect_from_json, rect_to_json, vector_to_json
from cocoengine.texture import Texture

TextureLoader = Callable[[str], Texture]

_QUAD_INDICES = (0, 1, 2, 1, 3, 2)


class Bounds(NamedTuple):
    """A floating-point rectangle in local space."""

    x: float
    y: float
    w: float
    h: float


class Renderable(ABC):
    """Anything a render system can draw with a transform."""

    @abstractmethod
    def render(self, renderer, transform_matrix: Matrix) -> None:
        """Draw through ``renderer`` using the given 3x3 transform."""

    @abstractmethod
    def bounds(self) -> Bounds:
        """The local-space area covered."""

    @property
    @abstractmethod
    def layer(self) -> int:
        """Draw order; lower layers are drawn first."""

    @abstractmethod
    def serialize(self) -> Dict[str, Any]:
        """A JSON-ready description, tagged with its type."""


def _as_origin(origin) -> Vector2:
    if isinstance(origin, Real):
        return Vector2(float(origin), float(origin))
    x, y = origin
    return Vector2(float(x), float(y))


class Sprite(Renderable):
    """A rectangle of a texture drawn as a quad around an origin point.

    The renderer passed to :meth:`render` must provide
    ``render_geometry(texture, vertices, indices)``.
    """

    def __init__(self, texture: Optional[Texture], rect: Optional[Rect] = None, origin=0.5, layer: int = 0):
        if rect is None:
            if texture is None:
                raise ValueError("a sprite needs a texture or an explicit rect")
            rect = texture.rect()
        self.texture = texture
        self.rect = dataclasses.replace(rect)
        self.width = rect.w
        self.height = rect.h
        self.origin = _as_origin(origin)
        self._layer = layer
        self.texture_path = texture.filepath if texture is not None else ""

    @property
    def layer(self) -> int:
        return self._layer

    @layer.setter
    def layer(self, value: int) -> None:
        self._layer = value

    def _require_texture(self) -> Texture:
        if self.texture is None:
            raise ValueError("sprite has no texture")
        return self.texture

    def geometry(self, transform_matrix: Matrix) -> Tuple[List[Vertex], List[int]]:
        """The four transformed vertices of the quad and its triangle indices."""
        texture_rect = self._require_texture().rect()
        shift_x = self.width * self.origin.x
        shift_y = self.height * self.origin.y
        corners = [
            (-shift_x, -shift_y),
            (self.width - shift_x, -shift_y),
            (-shift_x, self.height - shift_y),
            (self.width - shift_x, self.height - shift_y),
        ]
        positions = [(transform_matrix * Matrix.from_position(corner)).vector2() for corner in corners]

        inv_width = 1.0 / texture_rect.w
        inv_height = 1.0 / texture_rect.h
        left = self.rect.x * inv_width
        right = (self.rect.x + self.rect.w) * inv_width
        top = self.rect.y * inv_height
        bottom = (self.rect.y + self.rect.h) * inv_height
        uvs = [Vector2(left, top), Vector2(right, top), Vector2(left, bottom), Vector2(right, bottom)]

        vertices = [
            Vertex(position, uv, Color(1.0, 1.0, 1.0, 1.0))
            for position, uv in zip(positions, uvs)
        ]
        return vertices, list(_QUAD_INDICES)

    def render(self, renderer, transform_matrix: Matrix) -> None:
        vertices, indices = self.geometry(transform_matrix)
        renderer.render_geometry(self.texture, vertices, indices)

    def bounds(self) -> Bounds:
        return Bounds(
            -self.width * self.origin.x,
            -self.height * self.origin.y,
            float(self.width),
            float(self.height),
        )

    def serialize(self) -> Dict[str, Any]:
        doc = self.to_dict()
        doc["Type"] = "Sprite"
        return doc

    def to_dict(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            "Origin": vector_to_json(self.origin),
            "Rect": rect_to_json(self.rect),
            "Height": self.height,
            "Width": self.width,
        }
        if self.texture is not None and self.texture.filepath:
            doc["Texture"] = self.texture.filepath
        return doc

    @staticmethod
    def from_dict(doc: Dict[str, Any], load_texture: Optional[TextureLoader] = None) -> "Sprite":
        """Build a sprite; ``load_texture`` resolves the stored texture path."""
        texture_path = doc.get("Texture", "")
        texture = load_texture(texture_path) if texture_path and load_texture is not None else None
        sprite = Sprite(texture, rect_from_json(doc["Rect"]))
        sprite.resize(doc["Width"], doc["Height"])
        if texture_path:
            sprite.texture_path = texture_path
        return sprite

    @staticmethod
    def load_from_file(filepath: str, load_texture: Optional[TextureLoader] = None) -> "Sprite":
        with open(filepath, encoding="utf-8") as file:
            doc = json.load(file)
        return Sprite.from_dict(doc, load_texture)

    def resize(self, width: int, height: int) -> None:
        """Set the drawn size; a negative width mirrors the sprite."""
        self.width = width
        self.height = height

    def set_origin(self, origin) -> None:
        """Set the origin from a single number or an (x, y) pair."""
        self.origin = _as_origin(origin)