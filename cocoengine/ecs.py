"""A small entity-component store and the engine's plain data components."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple, Type, TypeVar

from cocoengine.matrix import Vector2
from cocoengine.serialization import vector_from_json, vector_to_json
from cocoengine.transform import Transform

Entity = int
C = TypeVar("C")


def _release(component: Any) -> None:
    # A transform that leaves the world must not stay linked into the hierarchy.
    if isinstance(component, Transform):
        component.detach()


class World:
    """Entities are integers; each holds at most one component of each type."""

    def __init__(self):
        self._ids = itertools.count()
        self._entities: Dict[Entity, Dict[type, Any]] = {}

    def _components(self, entity: Entity) -> Dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"invalid entity {entity}") from None

    def create(self) -> Entity:
        entity = next(self._ids)
        self._entities[entity] = {}
        return entity

    def destroy(self, entity: Entity) -> None:
        components = self._components(entity)
        del self._entities[entity]
        for component in components.values():
            _release(component)

    def valid(self, entity: Entity) -> bool:
        return entity in self._entities

    def entities(self) -> Iterator[Entity]:
        """Live entities in creation order."""
        return iter(list(self._entities))

    def add(self, entity: Entity, component: C) -> C:
        components = self._components(entity)
        component_type = type(component)
        if component_type in components:
            raise ValueError(f"entity {entity} already has a {component_type.__name__}")
        components[component_type] = component
        return component

    def get(self, entity: Entity, component_type: Type[C]) -> C:
        components = self._components(entity)
        try:
            return components[component_type]
        except KeyError:
            raise KeyError(f"entity {entity} has no {component_type.__name__}") from None

    def try_get(self, entity: Entity, component_type: Type[C]) -> Optional[C]:
        return self._components(entity).get(component_type)

    def has(self, entity: Entity, component_type: type) -> bool:
        return component_type in self._components(entity)

    def remove(self, entity: Entity, component_type: type) -> None:
        components = self._components(entity)
        try:
            component = components.pop(component_type)
        except KeyError:
            raise KeyError(f"entity {entity} has no {component_type.__name__}") from None
        _release(component)

    def view(self, *args: type) -> Iterator[Tuple[Any, ...]]:
        """Yield ``(entity, component, ...)`` for entities holding every given type."""
        if not args:
            raise TypeError("view needs at least one component type")
        for entity in list(self._entities):
            components = self._entities.get(entity)
            if components is None or not all(t in components for t in args):
                continue
            yield (entity, *(components[t] for t in args))

    def clear(self) -> None:
        """Destroy every entity."""
        entities, self._entities = self._entities, {}
        for components in entities.values():
            for component in components.values():
                _release(component)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities


@dataclass
class CameraComponent:
    """Marks the entity whose transform is the view."""


@dataclass
class NameComponent:
    """A display name for an entity."""

    name: str = ""

    def serialize(self) -> Dict[str, Any]:
        return {"Name": self.name}

    @staticmethod
    def from_dict(doc: Dict[str, Any]) -> "NameComponent":
        return NameComponent(doc.get("Name", ""))


@dataclass
class VelocityComponent:
    """Linear velocity in units per second and angular velocity in degrees per second."""

    linear_vel: Vector2 = field(default_factory=Vector2)
    angular_vel: float = 0.0

    def serialize(self) -> Dict[str, Any]:
        return {
            "LinearVelocity": vector_to_json(self.linear_vel),
            "AngularVelocity": self.angular_vel,
        }

    @staticmethod
    def from_dict(doc: Dict[str, Any]) -> "VelocityComponent":
        linear = vector_from_json(doc["LinearVelocity"]) if "LinearVelocity" in doc else Vector2()
        return VelocityComponent(linear, doc.get("AngularVelocity", 0.0))


@dataclass
class GraphicsComponent:
    """Holds the renderable drawn at the entity's transform."""

    renderable: Any = None