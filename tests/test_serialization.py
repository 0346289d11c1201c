import pytest

from cocoengine.matrix import Vector2
from cocoengine.serialization import (
    Color,
    Rect,
    Vertex,
    color_from_json,
    color_to_json,
    rect_from_json,
    rect_to_json,
    serialize_binary,
    serialize_string,
    unserialize_binary,
    unserialize_string,
    vector_from_json,
    vector_to_json,
    vertex_from_json,
    vertex_to_json,
)


def test_uint32_is_little_endian():
    buffer = bytearray()
    serialize_binary(buffer, 1, "I")
    assert bytes(buffer) == b"\x01\x00\x00\x00"


def test_string_has_length_prefix():
    buffer = bytearray()
    serialize_string(buffer, "abc")
    assert bytes(buffer) == b"\x03\x00abc"


def test_sequential_round_trip_advances_offset():
    buffer = bytearray()
    serialize_binary(buffer, 42, "H")
    serialize_binary(buffer, 2.5, "f")
    serialize_string(buffer, "hello")
    serialize_binary(buffer, -7, "i")

    first, offset = unserialize_binary(buffer, 0, "H")
    second, offset = unserialize_binary(buffer, offset, "f")
    text, offset = unserialize_string(buffer, offset)
    last, offset = unserialize_binary(buffer, offset, "i")

    assert (first, second, text, last) == (42, 2.5, "hello", -7)
    assert offset == len(buffer)


def test_unserialize_past_end_raises():
    with pytest.raises(ValueError):
        unserialize_binary(b"\x01\x02", 0, "I")


def test_truncated_string_raises():
    buffer = bytearray()
    serialize_string(buffer, "abcdef")
    with pytest.raises(ValueError):
        unserialize_string(bytes(buffer[:-2]), 0)


def test_oversized_string_raises():
    with pytest.raises(ValueError):
        serialize_string(bytearray(), "x" * 70000)


def test_rect_round_trip():
    rect = Rect(160, 128, 16, 16)
    doc = rect_to_json(rect)
    assert set(doc) == {"x", "y", "w", "h"}
    assert rect_from_json(doc) == rect


def test_vector_round_trip():
    vector = Vector2(1.5, -3.0)
    assert vector_from_json(vector_to_json(vector)) == vector


def test_rect_missing_key_raises():
    with pytest.raises(KeyError):
        rect_from_json({"x": 1, "y": 2, "w": 3})


def test_color_rgba8_round_trip():
    color = Color.from_rgba8(255, 0, 128)
    assert color.to_rgba8() == (255, 0, 128, 255)


def test_color_json_drops_alpha():
    color = Color.from_rgba8(10, 20, 30, 40)
    doc = color_to_json(color)
    assert doc == {"r": 10, "g": 20, "b": 30}
    restored = color_from_json(doc)
    assert restored.to_rgba8() == (10, 20, 30, 255)


def test_vertex_round_trip():
    vertex = Vertex(Vector2(3, 4), Vector2(0.5, 0.25), Color.from_rgba8(1, 2, 3))
    doc = vertex_to_json(vertex)
    assert set(doc) == {"pos", "uv", "color"}
    restored = vertex_from_json(doc)
    assert restored.position == vertex.position
    assert restored.tex_coord == vertex.tex_coord
    assert restored.color.to_rgba8() == vertex.color.to_rgba8()