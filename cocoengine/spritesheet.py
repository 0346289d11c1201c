"""Named frame animations laid out on a sprite sheet."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from cocoengine.matrix import Vector2
from cocoengine.serialization import vector_from_json, vector_to_json
from cocoengine.texture import Asset


@dataclass(frozen=True)
class Animation:
    """A run of ``frame_count`` frames of ``size`` starting at ``start``."""

    name: str
    frame_count: int
    frame_duration: float
    start: Vector2 = Vector2()
    size: Vector2 = Vector2()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "Size": vector_to_json(self.size),
            "Start": vector_to_json(self.start),
            "FrameCount": self.frame_count,
            "FrameDuration": self.frame_duration,
        }

    @staticmethod
    def from_dict(doc: Dict[str, Any]) -> "Animation":
        return Animation(
            doc["Name"],
            doc["FrameCount"],
            doc["FrameDuration"],
            vector_from_json(doc["Start"]),
            vector_from_json(doc["Size"]),
        )


class Spritesheet(Asset):
    """An ordered set of animations, also reachable by name."""

    def __init__(self, filepath: str = ""):
        super().__init__(filepath)
        self._animations: List[Animation] = []
        self._index_by_name: Dict[str, int] = {}

    def add_animation(self, animation: Animation) -> None:
        if animation.name in self._index_by_name:
            raise ValueError(f"animation {animation.name!r} already exists")
        self._index_by_name[animation.name] = len(self._animations)
        self._animations.append(animation)

    def save_to_file(self, filepath: str) -> None:
        doc = {"Animations": [animation.to_dict() for animation in self._animations]}
        with open(filepath, "w", encoding="utf-8") as file:
            json.dump(doc, file, indent="\t")

    @staticmethod
    def load_from_file(filepath: str) -> "Spritesheet":
        with open(filepath, encoding="utf-8") as file:
            doc = json.load(file)
        sheet = Spritesheet(filepath)
        for entry in doc["Animations"]:
            sheet.add_animation(Animation.from_dict(entry))
        return sheet

    def animation(self, index: int) -> Animation:
        if not 0 <= index < len(self._animations):
            raise IndexError(f"no animation at index {index}")
        return self._animations[index]

    def animation_index(self, name: str) -> Optional[int]:
        """The index of the named animation, or ``None`` if there is none."""
        return self._index_by_name.get(name)

    def __len__(self) -> int:
        return len(self._animations)

    def __iter__(self) -> Iterator[Animation]:
        return iter(list(self._animations))