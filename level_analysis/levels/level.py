from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from level_analysis.defs import Grid, GridKey, Item, Position


@dataclass
class Level:
    """
    Grid-centric level representation.
    - `grid[pos]` is the `Item` occupying that cell.
    - Loading a level from text or disk is left to callers; they fill a Level
      through `set` / `set_many` or hand over a prepared `Grid[Item]`.
    - Analyses never mutate a Level; see `levels.component` for extraction.
    """

    grid: Grid[Item]

    @classmethod
    def filled(cls, rows: int, cols: int, item: Item = Item.empty()) -> "Level":
        """
        Level of the given size with every cell holding `item`.
        """
        return cls(Grid.filled(rows, cols, item))

    def size(self) -> Tuple[int, int]:
        return self.grid.size()

    def __getitem__(self, key: GridKey) -> Item:
        return self.grid[key]

    # -------- Grid editing API --------

    def set(self, pos: GridKey, item: Item) -> None:
        """
        Place `item` in the cell at pos (row, col).
        """
        self.grid[pos] = item

    def set_many(self, items: Iterable[Tuple[GridKey, Item]]) -> None:
        """
        Place multiple items. Each entry is (pos, item).
        """
        for pos, item in items:
            self.set(pos, item)

    def goals(self) -> List[Position]:
        """
        Positions of all goal cells in row-major order.
        """
        return [pos for pos in self.grid.positions() if self.grid[pos].is_goal()]

    def __str__(self) -> str:
        rows, cols = self.size()
        lines = [f"Level [{rows}x{cols}]."]
        for row in range(rows):
            lines.append("".join(str(self.grid[(row, col)]) for col in range(cols)))
        return "\n".join(lines)
