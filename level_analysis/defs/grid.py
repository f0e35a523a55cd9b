"""Dense fixed-size 2D container.

``Grid`` stores ``rows * cols`` values in row-major order and can be indexed
either by :class:`Position` or by a ``(row, col)`` tuple. The shape never
changes after construction; only cell values may be overwritten.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Tuple, TypeVar, Union

from level_analysis.defs.position import Position

T = TypeVar("T")

GridKey = Union[Position, Tuple[int, int]]


class Grid(Generic[T]):
    """Row-major dense grid.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        data: Flat cell storage, ``len(data) == rows * cols``.
    """

    __slots__ = ("rows", "cols", "data")

    def __init__(self, rows: int, cols: int, data: List[T]) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"Negative grid size: {rows}x{cols}")
        if len(data) != rows * cols:
            raise ValueError(
                f"Grid data has {len(data)} cells, expected {rows * cols}"
            )
        self.rows = rows
        self.cols = cols
        self.data = data

    @classmethod
    def filled(cls, rows: int, cols: int, value: T) -> "Grid[T]":
        """Grid with every cell set to ``value``."""
        return cls(rows, cols, [value] * (rows * cols))

    @classmethod
    def from_fn(cls, rows: int, cols: int, fn: Callable[[], T]) -> "Grid[T]":
        """Grid whose cells are produced by calling ``fn`` once per cell."""
        return cls(rows, cols, [fn() for _ in range(rows * cols)])

    def size(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def contains(self, key: GridKey) -> bool:
        """Return True if ``key`` lies within the grid rectangle."""
        row, col = _split(key)
        return 0 <= row < self.rows and 0 <= col < self.cols

    def offset(self, key: GridKey) -> int:
        """Flat index of ``key`` in ``data``; raises ``IndexError`` when out of bounds."""
        row, col = _split(key)
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Out of bounds: {(row, col)} for grid {self.rows}x{self.cols}"
            )
        return row * self.cols + col

    def __getitem__(self, key: GridKey) -> T:
        return self.data[self.offset(key)]

    def __setitem__(self, key: GridKey, value: T) -> None:
        self.data[self.offset(key)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.rows, self.cols, self.data) == (other.rows, other.cols, other.data)

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Position(row, col)

    def fill(self, value: T) -> None:
        for i in range(len(self.data)):
            self.data[i] = value

    def copy(self) -> "Grid[T]":
        """Shallow copy (cell values are shared, storage is not)."""
        return Grid(self.rows, self.cols, list(self.data))

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols})"

    def __str__(self) -> str:
        width = max((len(str(v)) for v in self.data), default=3)
        lines = [f"Grid({self.rows}x{self.cols})["]
        for row in range(self.rows):
            lines.append(
                "".join(
                    f"{str(self.data[row * self.cols + col]):>{width + 1}}"
                    for col in range(self.cols)
                )
            )
        lines.append("]")
        return "\n".join(lines)


def _split(key: GridKey) -> Tuple[int, int]:
    if isinstance(key, Position):
        return key.row, key.col
    row, col = key
    return row, col
