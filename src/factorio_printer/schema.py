"""In-memory blueprint records and their exchange JSON shape."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

MAX_ICON_VALUE = 9999
ICON_SLOTS = 4


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Entity:
    entity_number: int  # 1-based
    name: str
    position: Position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entity_number": self.entity_number,
            "name": self.name,
            "position": self.position.to_dict(),
        }


@dataclass(frozen=True)
class Tile:
    name: str
    position: Position

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "position": self.position.to_dict()}


@dataclass(frozen=True)
class Signal:
    name: str
    type: str = "virtual"

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "type": self.type}


@dataclass(frozen=True)
class Icon:
    index: int  # 1-based
    signal: Signal

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "signal": self.signal.to_dict()}


def digit_signal(value: int) -> Signal:
    if value < 0 or value > 9:
        raise ValueError("Signal digit must be between 0 and 9")
    return Signal(f"signal-{value}")


def icons_for_number(value: int) -> List[Icon]:
    """Encode ``value`` (0-9999) as four digit icons, most significant first.

    >>> [icon.signal.name for icon in icons_for_number(1234)]
    ['signal-1', 'signal-2', 'signal-3', 'signal-4']
    """

    if value < 0 or value > MAX_ICON_VALUE:
        raise ValueError(f"Icon value must be between 0 and {MAX_ICON_VALUE}")
    digits = [(value // 10 ** power) % 10 for power in range(ICON_SLOTS - 1, -1, -1)]
    return [Icon(index, digit_signal(digit)) for index, digit in enumerate(digits, start=1)]


@dataclass
class Blueprint:
    """One blueprint being assembled.

    Entities are numbered from 1 in the order they are added. Tiles carry no
    number.
    """

    label: str = "Blueprint"
    entities: List[Entity] = field(default_factory=list)
    tiles: List[Tile] = field(default_factory=list)
    icons: List[Icon] = field(default_factory=list)
    entity_counter: int = 1

    def add_entity(self, name: str, x: int, y: int) -> Entity:
        entity = Entity(self.entity_counter, name, Position(x, y))
        self.entities.append(entity)
        self.entity_counter += 1
        return entity

    def add_tile(self, name: str, x: int, y: int) -> Tile:
        tile = Tile(name, Position(x, y))
        self.tiles.append(tile)
        return tile

    def set_icons(self, value: int) -> None:
        self.icons = icons_for_number(value)

    def inner_dict(self) -> Dict[str, Any]:
        return {
            "item": "blueprint",
            "label": self.label,
            "entities": [entity.to_dict() for entity in self.entities],
            "tiles": [tile.to_dict() for tile in self.tiles],
            "icons": [icon.to_dict() for icon in self.icons],
        }

    def to_dict(self) -> Dict[str, Any]:
        return {"blueprint": self.inner_dict()}


@dataclass
class BlueprintBook:
    label: str = "Book"
    blueprints: List[Blueprint] = field(default_factory=list)
    active_index: int = 0
    version: int = 0

    def add_blueprint(self, blueprint: Blueprint) -> None:
        self.blueprints.append(blueprint)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "blueprint_book": {
                "item": "blueprint-book",
                "label": self.label,
                "blueprints": [
                    {"index": index, "blueprint": blueprint.inner_dict()}
                    for index, blueprint in enumerate(self.blueprints)
                ],
                "active_index": self.active_index,
                "version": self.version,
            }
        }
