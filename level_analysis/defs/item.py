"""Typed grid cell contents.

An ``Item`` is a value object describing what occupies a single level cell:
nothing, a wall, an agent, a box or a goal. Agents, boxes and goals carry an
``id`` (derived from their level glyph) and a ``Color``.

Only ``is_wall`` matters for the structural analyses; ``is_goal`` decides
which connected regions are kept. ``Item.compatible`` is provided for
solvers that pair agents with agents and boxes with goals.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Optional, Tuple

from level_analysis.types import ItemKind


class Color(StrEnum):
    """Item colors supported by the level format."""

    BLUE = auto()
    RED = auto()
    GREEN = auto()
    CYAN = auto()
    MAGENTA = auto()
    ORANGE = auto()
    PINK = auto()
    YELLOW = auto()

    @classmethod
    def from_name(cls, name: str) -> Optional["Color"]:
        """Case-insensitive lookup; ``None`` for unknown names."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return _COLOR_RGB[self]


_COLOR_RGB: Dict[Color, Tuple[int, int, int]] = {
    Color.BLUE: (0, 0, 255),
    Color.RED: (255, 0, 0),
    Color.GREEN: (0, 175, 0),
    Color.CYAN: (0, 215, 215),
    Color.MAGENTA: (95, 0, 175),
    Color.ORANGE: (255, 95, 0),
    Color.PINK: (255, 0, 175),
    Color.YELLOW: (255, 255, 0),
}


@dataclass(frozen=True)
class Item:
    """Content of a single cell.

    Attributes:
        kind: Cell category.
        id: Glyph-derived identifier (``0`` for empty cells and walls).
        color: Owning color (``BLUE`` for empty cells and walls).
    """

    kind: ItemKind
    id: int = 0
    color: Color = Color.BLUE

    @classmethod
    def empty(cls) -> "Item":
        return EMPTY_ITEM

    @classmethod
    def wall(cls) -> "Item":
        return WALL_ITEM

    @classmethod
    def from_char(cls, char: str, color: Color = Color.BLUE) -> "Item":
        """Build an item from its level glyph.

        ``' '`` is empty, ``'+'`` a wall, digits are agents, upper-case
        letters boxes and lower-case letters goals.
        """
        if char == " ":
            return EMPTY_ITEM
        if char == "+":
            return WALL_ITEM
        if "0" <= char <= "9":
            return cls(ItemKind.AGENT, ord(char) - ord("0"), color)
        if "A" <= char <= "Z":
            return cls(ItemKind.BOX, ord(char) - ord("A"), color)
        if "a" <= char <= "z":
            return cls(ItemKind.GOAL, ord(char) - ord("a"), color)
        raise ValueError(f"Invalid item character: {char!r}")

    def is_empty(self) -> bool:
        return self.kind is ItemKind.EMPTY

    def is_wall(self) -> bool:
        return self.kind is ItemKind.WALL

    def is_agent(self) -> bool:
        return self.kind is ItemKind.AGENT

    def is_box(self) -> bool:
        return self.kind is ItemKind.BOX

    def is_goal(self) -> bool:
        return self.kind is ItemKind.GOAL

    @staticmethod
    def compatible(a: "Item", b: "Item") -> bool:
        """Agents of one color, or a box and goal sharing color and id."""
        if a.is_empty() or b.is_empty():
            return False
        if a.is_wall() or b.is_wall():
            return False
        if a.is_agent() or b.is_agent():
            return a.color == b.color
        return a.color == b.color and a.id == b.id

    def __str__(self) -> str:
        if self.kind is ItemKind.AGENT:
            return chr(ord("0") + self.id)
        if self.kind is ItemKind.BOX:
            return chr(ord("A") + self.id)
        if self.kind is ItemKind.GOAL:
            return chr(ord("a") + self.id)
        if self.kind is ItemKind.WALL:
            return "+"
        return " "


EMPTY_ITEM = Item(ItemKind.EMPTY)
WALL_ITEM = Item(ItemKind.WALL)
