"""Initial board generation."""
from __future__ import annotations

import logging
from typing import List

from themine.core.rng import RNG
from themine.core.types import Position
from themine.domain.board import Board
from themine.domain.rules import METALS, ROCKS, START
from themine.domain.tile import Empty, Stone, Tile

logger = logging.getLogger(__name__)


class BoardGenerator:
    """Scatters the metal deposits and rocks over a fresh board."""

    def __init__(self, rng: RNG, *, metals: int = METALS, rocks: int = ROCKS) -> None:
        self._rng = rng
        self._metals = metals
        self._rocks = rocks

    def generate(self) -> Board:
        board = Board()
        cells: List[Position] = [pos for pos, _ in board if pos != START]
        self._rng.shuffle(cells)

        metal_cells = cells[: self._metals]
        rock_cells = cells[self._metals : self._metals + self._rocks]
        for pos in metal_cells:
            board[pos] = Tile(Empty(has_metal=True), visible=True)
        for pos in rock_cells:
            board[pos] = Tile(Stone(), visible=True)
        board[START] = board[START].mark_explored()

        logger.debug("Generated board: metal=%s rocks=%s", metal_cells, rock_cells)
        return board
