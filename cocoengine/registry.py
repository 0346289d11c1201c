"""A catalogue of component types that can be added, inspected and (un)serialized."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

from cocoengine.ecs import CameraComponent, NameComponent, VelocityComponent, World
from cocoengine.transform import Transform

Handle = Callable[[World, int], Any]


@dataclass
class ComponentEntry:
    """How to handle one component type, keyed by ``id`` in saved scenes."""

    id: str
    label: str
    add_component: Optional[Callable[[World, int], Any]] = None
    has_component: Optional[Callable[[World, int], bool]] = None
    remove_component: Optional[Callable[[World, int], None]] = None
    inspect: Optional[Callable[[Any, World, int], None]] = None
    serialize: Optional[Callable[[World, int], Dict[str, Any]]] = None
    unserialize: Optional[Callable[[World, int, Dict[str, Any]], None]] = None


class ComponentRegistry:
    """Ordered entries, starting with the engine's own components."""

    def __init__(self):
        self._entries: List[ComponentEntry] = []
        self.register(ComponentRegistry.entry_for(NameComponent, "Name", "Name"))
        self.register(ComponentRegistry.entry_for(Transform, "Transform", "Transform"))
        self.register(ComponentRegistry.entry_for(CameraComponent, "Camera", "Camera"))
        self.register(ComponentRegistry.entry_for(VelocityComponent, "Velocity", "Velocity"))

    def register(self, entry: ComponentEntry) -> None:
        self._entries.append(entry)

    def __iter__(self) -> Iterator[ComponentEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def entry_for(component_type: type, entry_id: str, label: str) -> ComponentEntry:
        """Build an entry whose callbacks work on ``component_type``.

        Types without ``serialize`` save as an empty object; types without
        ``from_dict`` are restored by constructing them with no arguments.
        """

        def add(world: World, entity: int):
            return world.add(entity, component_type())

        def has(world: World, entity: int) -> bool:
            return world.has(entity, component_type)

        def remove(world: World, entity: int) -> None:
            world.remove(entity, component_type)

        def serialize(world: World, entity: int) -> Dict[str, Any]:
            component = world.get(entity, component_type)
            if hasattr(component, "serialize"):
                return component.serialize()
            return {}

        def unserialize(world: World, entity: int, doc: Dict[str, Any]) -> None:
            if hasattr(component_type, "from_dict"):
                world.add(entity, component_type.from_dict(doc))
            else:
                world.add(entity, component_type())

        inspect = None
        if hasattr(component_type, "populate_inspector"):
            def inspect(editor: Any, world: World, entity: int) -> None:
                world.get(entity, component_type).populate_inspector(editor)

        return ComponentEntry(
            id=entry_id,
            label=label,
            add_component=add,
            has_component=has,
            remove_component=remove,
            inspect=inspect,
            serialize=serialize,
            unserialize=unserialize,
        )