"""Tile contents modelled as a tagged variant."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union


class TileKind(Enum):
    DIRT = "dirt"
    EMPTY = "empty"
    STONE = "stone"
    MONSTER = "monster"


@dataclass(frozen=True, slots=True)
class Dirt:
    """Unrevealed ground; resolved on the first entry attempt."""

    kind = TileKind.DIRT


@dataclass(frozen=True, slots=True)
class Empty:
    """Passable ground, optionally still holding an uncollected metal deposit."""

    has_metal: bool = False
    kind = TileKind.EMPTY


@dataclass(frozen=True, slots=True)
class Stone:
    kind = TileKind.STONE


@dataclass(frozen=True, slots=True)
class Monster:
    """A monster; ``grace_ticks`` counts the ticks left before it may act."""

    grace_ticks: int = 0
    kind = TileKind.MONSTER

    def __post_init__(self) -> None:
        if self.grace_ticks < 0:
            raise ValueError("grace_ticks cannot be negative.")


TileContent = Union[Dirt, Empty, Stone, Monster]


@dataclass(frozen=True, slots=True)
class Tile:
    """One board cell: its content plus fog-of-war flags."""

    content: TileContent = Dirt()
    explored: bool = False
    visible: bool = False

    @property
    def kind(self) -> TileKind:
        return self.content.kind

    @property
    def has_metal(self) -> bool:
        return isinstance(self.content, Empty) and self.content.has_metal

    @property
    def just_revealed(self) -> bool:
        return isinstance(self.content, Monster) and self.content.grace_ticks > 0

    @property
    def is_obstruction(self) -> bool:
        """Stone and Monster tiles block the player and other monsters."""
        return isinstance(self.content, (Stone, Monster))

    def with_content(self, content: TileContent) -> "Tile":
        return replace(self, content=content)

    def mark_explored(self) -> "Tile":
        return replace(self, explored=True, visible=True)
