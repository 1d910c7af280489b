"""Greedy monster pursuit over explored ground."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from themine.core.types import Position
from themine.domain.board import Board
from themine.domain.rules import STEP_ORDER, manhattan
from themine.domain.tile import Empty, Monster, Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MonsterMove:
    origin: Position
    destination: Position


@dataclass(slots=True)
class MonsterTickResult:
    moves: List[MonsterMove] = field(default_factory=list)
    caught: bool = False


class MonsterAI:
    """
    Advances every monster one step toward the player.

    All monsters decide from a snapshot taken at tick start, then moves are
    applied to the live board in scan order. Two monsters may pick the same
    destination; the later one in scan order overwrites the earlier.
    """

    def tick(self, board: Board, player: Position) -> MonsterTickResult:
        """Mutate ``board`` in place and report the moves and whether the player was caught."""
        result = MonsterTickResult()
        snapshot = board.copy()
        for pos, tile in snapshot:
            content = tile.content
            if not isinstance(content, Monster):
                continue
            if content.grace_ticks > 0:
                board[pos] = board[pos].with_content(Monster(grace_ticks=content.grace_ticks - 1))
                continue

            destination = self.choose_step(snapshot, pos, player)
            if destination is None:
                continue
            board[pos] = board[pos].with_content(Empty(has_metal=False))
            board[destination] = Tile(Monster(), explored=True, visible=board[destination].visible)
            result.moves.append(MonsterMove(pos, destination))
            if destination == player:
                result.caught = True

        if result.moves:
            logger.debug("Monster moves: %s", result.moves)
        return result

    def choose_step(self, snapshot: Board, pos: Position, player: Position) -> Position | None:
        """Return the first strictly-closest eligible neighbour, or None to stay put."""
        best: Position | None = None
        best_distance = manhattan(pos, player)
        for dx, dy in STEP_ORDER:
            candidate = (pos[0] + dx, pos[1] + dy)
            if not snapshot.in_bounds(candidate):
                continue
            target = snapshot[candidate]
            if not target.explored or target.is_obstruction:
                continue
            distance = manhattan(candidate, player)
            if distance < best_distance:
                best = candidate
                best_distance = distance
        return best
