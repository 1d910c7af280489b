"""Fixed-size board of tiles."""
from __future__ import annotations

from typing import Callable, Iterator, List, Tuple

from themine.core.types import Position
from themine.domain.rules import GRID_SIZE
from themine.domain.tile import Tile, TileKind


class Board:
    """A GRID_SIZE x GRID_SIZE grid of immutable tiles, addressed as board[(x, y)]."""

    size = GRID_SIZE

    def __init__(self, rows: List[List[Tile]] | None = None) -> None:
        if rows is None:
            rows = [[Tile() for _ in range(self.size)] for _ in range(self.size)]
        if len(rows) != self.size or any(len(row) != self.size for row in rows):
            raise ValueError(f"Board must be {self.size}x{self.size}.")
        self._rows = rows

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.size and 0 <= y < self.size

    def __getitem__(self, pos: Position) -> Tile:
        self._check(pos)
        x, y = pos
        return self._rows[y][x]

    def __setitem__(self, pos: Position, tile: Tile) -> None:
        self._check(pos)
        x, y = pos
        self._rows[y][x] = tile

    def __iter__(self) -> Iterator[Tuple[Position, Tile]]:
        """Yield (position, tile) in scan order: rows top to bottom, cells left to right."""
        for y, row in enumerate(self._rows):
            for x, tile in enumerate(row):
                yield (x, y), tile

    def copy(self) -> "Board":
        """Return an independent snapshot; tiles are immutable so rows are enough."""
        return Board([list(row) for row in self._rows])

    def count(self, predicate: Callable[[Tile], bool]) -> int:
        return sum(1 for _, tile in self if predicate(tile))

    def positions(self, kind: TileKind) -> List[Position]:
        return [pos for pos, tile in self if tile.kind is kind]

    def rows(self) -> List[List[Tile]]:
        return [list(row) for row in self._rows]

    def _check(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise IndexError(f"Position {pos} is outside the board.")
