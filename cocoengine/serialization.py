"""Binary packing helpers and JSON conversions for engine value types."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from cocoengine.matrix import Vector2

_MAX_STRING_LENGTH = 0xFFFF


@dataclass
class Rect:
    """An integer rectangle."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def _channel_to_byte(channel: float) -> int:
    return round(min(max(channel, 0.0), 1.0) * 255)


@dataclass
class Color:
    """A floating-point RGBA colour, channels in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @staticmethod
    def from_rgba8(r: int, g: int, b: int, a: int = 255) -> "Color":
        return Color(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        return tuple(_channel_to_byte(c) for c in (self.r, self.g, self.b, self.a))  # type: ignore[return-value]

    def __str__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"


@dataclass
class Vertex:
    """A textured, coloured 2D vertex."""

    position: Vector2 = field(default_factory=Vector2)
    tex_coord: Vector2 = field(default_factory=Vector2)
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0, 1.0))


def _struct_format(fmt: str) -> str:
    return fmt if fmt[:1] in "<>!=@" else "<" + fmt


def serialize_binary(buffer: bytearray, value, fmt: str) -> None:
    """Append ``value`` packed with struct format ``fmt`` (little-endian by default)."""
    buffer.extend(struct.pack(_struct_format(fmt), value))


def serialize_string(buffer: bytearray, value: str) -> None:
    """Append a UTF-8 string prefixed by its 16-bit byte length."""
    encoded = value.encode("utf-8")
    if len(encoded) > _MAX_STRING_LENGTH:
        raise ValueError(f"string of {len(encoded)} bytes exceeds the 16-bit length prefix")
    serialize_binary(buffer, len(encoded), "H")
    buffer.extend(encoded)


def unserialize_binary(data: bytes, offset: int, fmt: str) -> Tuple[Any, int]:
    """Read one value at ``offset``; return it with the offset just past it."""
    layout = struct.Struct(_struct_format(fmt))
    if offset < 0 or offset + layout.size > len(data):
        raise ValueError(f"not enough data to read {layout.size} bytes at offset {offset}")
    (value,) = layout.unpack_from(data, offset)
    return value, offset + layout.size


def unserialize_string(data: bytes, offset: int) -> Tuple[str, int]:
    """Read a length-prefixed UTF-8 string; return it with the new offset."""
    length, offset = unserialize_binary(data, offset, "H")
    end = offset + length
    if end > len(data):
        raise ValueError(f"string of {length} bytes runs past the end of the data")
    return bytes(data[offset:end]).decode("utf-8"), end


def rect_to_json(rect: Rect) -> Dict[str, int]:
    return {"x": rect.x, "y": rect.y, "w": rect.w, "h": rect.h}


def rect_from_json(doc: Dict[str, Any]) -> Rect:
    return Rect(doc["x"], doc["y"], doc["w"], doc["h"])


def vector_to_json(vector) -> Dict[str, Any]:
    x, y = vector
    return {"x": x, "y": y}


def vector_from_json(doc: Dict[str, Any]) -> Vector2:
    return Vector2(doc["x"], doc["y"])


def color_to_json(color: Color) -> Dict[str, int]:
    r, g, b, _ = color.to_rgba8()
    return {"r": r, "g": g, "b": b}


def color_from_json(doc: Dict[str, Any]) -> Color:
    return Color.from_rgba8(doc["r"], doc["g"], doc["b"], 255)


def vertex_to_json(vertex: Vertex) -> Dict[str, Any]:
    return {
        "pos": vector_to_json(vertex.position),
        "uv": vector_to_json(vertex.tex_coord),
        "color": color_to_json(vertex.color),
    }


def vertex_from_json(doc: Dict[str, Any]) -> Vertex:
    return Vertex(
        vector_from_json(doc["pos"]),
        vector_from_json(doc["uv"]),
        color_from_json(doc["color"]),
    )