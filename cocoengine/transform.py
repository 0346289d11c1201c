"""Hierarchical 2D transforms: position, rotation (degrees) and scale."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from cocoengine.matrix import Matrix, Vector2
from cocoengine.serialization import vector_from_json, vector_to_json


def _as_vector(value, default: Vector2) -> Vector2:
    if value is None:
        return default
    if isinstance(value, Vector2):
        return value
    x, y = value
    return Vector2(float(x), float(y))


class Transform:
    """A node in a transform tree; children are expressed in their parent's space."""

    def __init__(self, position=None, rotation: float = 0.0, scale=None):
        self.position: Vector2 = _as_vector(position, Vector2(0.0, 0.0))
        self.rotation: float = float(rotation)
        self.scale: Vector2 = _as_vector(scale, Vector2(1.0, 1.0))
        self._parent: Optional[Transform] = None
        self._children: List[Transform] = []

    # -- hierarchy ----------------------------------------------------------

    @property
    def parent(self) -> Optional["Transform"]:
        return self._parent

    @property
    def children(self) -> Tuple["Transform", ...]:
        return tuple(self._children)

    def set_parent(self, parent: Optional["Transform"]) -> None:
        """Attach to ``parent`` (or detach with ``None``)."""
        if parent is self._parent:
            return
        if self._parent is not None:
            self._parent._children.remove(self)
        self._parent = parent
        if parent is not None:
            parent._children.append(self)

    def detach(self) -> None:
        """Leave the parent and orphan every child."""
        self.set_parent(None)
        for child in self._children:
            child._parent = None
        self._children.clear()

    def copy(self) -> "Transform":
        """A transform with the same values and parent, but no children."""
        duplicate = Transform(self.position, self.rotation, self.scale)
        duplicate.set_parent(self._parent)
        return duplicate

    # -- global values ------------------------------------------------------

    @property
    def global_position(self) -> Vector2:
        if self._parent is None:
            return self.position
        return self._parent.local_to_world_point(self.position)

    @property
    def global_rotation(self) -> float:
        if self._parent is None:
            return self.rotation
        return self._parent.global_rotation + self.rotation

    @property
    def global_scale(self) -> Vector2:
        if self._parent is None:
            return self.scale
        return self._parent.global_scale * self.scale

    # -- mutation -----------------------------------------------------------

    def rotate(self, angle: float) -> None:
        self.rotation += angle

    def scale_by(self, factor) -> None:
        """Multiply the scale by a number or component-wise by a vector."""
        if isinstance(factor, (int, float)):
            self.scale = self.scale * factor
        else:
            self.scale = self.scale * _as_vector(factor, Vector2(1.0, 1.0))

    def translate(self, offset) -> None:
        self.position = self.position + _as_vector(offset, Vector2(0.0, 0.0))

    # -- matrices -----------------------------------------------------------

    def transform_matrix(self) -> Matrix:
        return Matrix.make_transform(self.position, self.rotation, self.scale)

    def local_to_world_matrix(self) -> Matrix:
        if self._parent is None:
            return self.transform_matrix()
        return self._parent.local_to_world_matrix() * self.transform_matrix()

    def local_to_world(self, other: Matrix) -> Matrix:
        return self.local_to_world_matrix() * other

    def local_to_world_point(self, point) -> Vector2:
        return self.local_to_world(Matrix.from_position(point)).vector2()

    def _inverse_matrix(self) -> Matrix:
        return self.transform_matrix().invert_by_row_reduction().split(2)

    def world_to_local_matrix(self) -> Matrix:
        if self._parent is None:
            return self._inverse_matrix()
        return self._parent.world_to_local_matrix() * self._inverse_matrix()

    def world_to_local(self, other: Matrix) -> Matrix:
        return self.world_to_local_matrix() * other

    def world_to_local_point(self, point) -> Vector2:
        return self.world_to_local(Matrix.from_position(point)).vector2()

    # -- serialization ------------------------------------------------------

    def serialize(self) -> Dict[str, Any]:
        return {
            "Position": vector_to_json(self.position),
            "Rotation": self.rotation,
            "Scale": vector_to_json(self.scale),
        }

    @staticmethod
    def from_dict(doc: Dict[str, Any]) -> "Transform":
        position = vector_from_json(doc["Position"]) if "Position" in doc else None
        scale = vector_from_json(doc["Scale"]) if "Scale" in doc else None
        return Transform(position, doc.get("Rotation", 0.0), scale)

    def __str__(self) -> str:
        return (
            f"Position :\n{self.position.x:.6f}, {self.position.y:.6f}"
            f"\nRotation :\n{self.rotation:.6f}"
            f"\nScale :\n{self.scale.x:.6f}, {self.scale.y:.6f}\n"
        )

    def __repr__(self) -> str:
        return f"Transform(position={self.position!r}, rotation={self.rotation!r}, scale={self.scale!r})"