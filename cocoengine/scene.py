"""Scene editing: the inspected-entity list, camera helpers and scene files."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from cocoengine.ecs import CameraComponent, Entity, NameComponent, World
from cocoengine.matrix import Vector2
from cocoengine.registry import ComponentRegistry
from cocoengine.transform import Transform

FILE_VERSION = 1


class SceneError(Exception):
    """A scene could not be saved, loaded or acted upon."""


class SceneEditor:
    """Editor state over a world: pausing, inspection, camera focus and scene files."""

    def __init__(self, world: World, registry: ComponentRegistry, window_size=(0, 0)):
        self.world = world
        self.registry = registry
        width, height = window_size
        self.window_size: Tuple[float, float] = (width, height)
        self.paused = False
        self._inspected: List[Entity] = []

    @property
    def inspected(self) -> Tuple[Entity, ...]:
        return tuple(self._inspected)

    def toggle_pause(self) -> bool:
        """Flip the paused state and return the new one."""
        self.paused = not self.paused
        return self.paused

    def create_entity(self) -> Entity:
        """Create an empty entity and open it for inspection."""
        entity = self.world.create()
        self._inspected.append(entity)
        return entity

    def toggle_inspected(self, entity: Entity) -> bool:
        """Open or close the inspector of ``entity``; return whether it is now open."""
        if entity in self._inspected:
            self._inspected.remove(entity)
            return False
        self._inspected.append(entity)
        return True

    def prune_inspected(self) -> Tuple[Entity, ...]:
        """Drop inspected entities that no longer exist; return those that remain."""
        self._inspected = [entity for entity in self._inspected if self.world.valid(entity)]
        return self.inspected

    def root_entities(self) -> List[Entity]:
        """Entities whose transform, if any, has no parent."""
        roots = []
        for entity in self.world.entities():
            transform = self.world.try_get(entity, Transform)
            if transform is not None and transform.parent is not None:
                continue
            roots.append(entity)
        return roots

    def entity_label(self, entity: Entity) -> str:
        label = f"Entity #{entity}"
        name = self.world.try_get(entity, NameComponent)
        if name is not None and name.name:
            label = f"{label} - {name.name}"
        return label

    def camera_entity(self) -> Optional[Entity]:
        """The first entity holding both a transform and a camera, if any."""
        for entity, _, _ in self.world.view(Transform, CameraComponent):
            return entity
        return None

    def entity_of(self, transform: Transform) -> Optional[Entity]:
        """The entity that owns ``transform``, if any."""
        for entity, candidate in self.world.view(Transform):
            if candidate is transform:
                return entity
        return None

    def center_camera_on(self, entity: Entity) -> None:
        """Move the camera so that ``entity`` sits in the middle of the window."""
        target = self.world.try_get(entity, Transform)
        if target is None:
            raise SceneError("entity has no transform")
        camera = self.camera_entity()
        if camera is None:
            raise SceneError("no camera entity")
        width, height = self.window_size
        camera_transform = self.world.get(camera, Transform)
        camera_transform.position = target.global_position - Vector2(width, height) * 0.5

    def save_scene(self, path: str) -> None:
        """Write every entity's registered components and the transform hierarchy."""
        entities: List[Dict[str, Any]] = []
        index_of: Dict[Entity, int] = {}
        links: List[Tuple[Entity, Entity]] = []

        for entity in self.world.entities():
            doc: Dict[str, Any] = {}
            for entry in self.registry:
                if entry.has_component is None or entry.serialize is None:
                    continue
                if entry.has_component(self.world, entity):
                    doc[entry.id] = entry.serialize(self.world, entity)

            transform = self.world.try_get(entity, Transform)
            if transform is not None and transform.parent is not None:
                parent = self.entity_of(transform.parent)
                if parent is not None:
                    links.append((parent, entity))

            index_of[entity] = len(entities)
            entities.append(doc)

        scene = {
            "Version": FILE_VERSION,
            "Entities": entities,
            "Hierarchies": [
                {"Parent": index_of[parent], "Child": index_of[child]} for parent, child in links
            ],
        }
        try:
            with open(path, "w", encoding="utf-8") as file:
                json.dump(scene, file, indent="\t")
        except OSError as error:
            raise SceneError(f"failed to open {path}: {error}") from error

    def load_scene(self, path: str) -> List[Entity]:
        """Replace the world's contents with a saved scene; return the new entities in file order."""
        try:
            with open(path, encoding="utf-8") as file:
                scene = json.load(file)
        except OSError as error:
            raise SceneError(f"failed to open {path}: {error}") from error
        except json.JSONDecodeError as error:
            raise SceneError(f"failed to parse {path}: {error}") from error

        if not isinstance(scene, dict):
            raise SceneError(f"{path} does not hold a scene object")
        version = scene.get("Version")
        if not isinstance(version, int) or isinstance(version, bool) or version < 0:
            raise SceneError(f"{path} has no valid file version")
        if version > FILE_VERSION:
            raise SceneError(f"{path} has an unknown file version {version}")

        self.world.clear()

        created: List[Entity] = []
        for entity_doc in scene.get("Entities") or []:
            entity = self.world.create()
            created.append(entity)
            for entry in self.registry:
                if entry.unserialize is None or entry.id not in entity_doc:
                    continue
                entry.unserialize(self.world, entity, entity_doc[entry.id])

        for link in scene.get("Hierarchies") or []:
            try:
                parent = self.world.get(created[link["Parent"]], Transform)
                child = self.world.get(created[link["Child"]], Transform)
            except (IndexError, KeyError, TypeError) as error:
                raise SceneError(f"invalid hierarchy entry {link!r} in {path}") from error
            child.set_parent(parent)

        return created