"""Resolves what an unexplored dirt tile actually holds."""
from __future__ import annotations

from themine.core.rng import RNG
from themine.domain.rules import MONSTER_CHANCE, MONSTER_GRACE_TICKS
from themine.domain.tile import Empty, Monster, TileContent


class RevealEngine:
    def __init__(self, rng: RNG, *, monster_chance: float = MONSTER_CHANCE) -> None:
        self._rng = rng
        self._monster_chance = monster_chance

    def reveal(self) -> TileContent:
        """Draw once: a fresh monster (with its grace tick) or plain empty ground."""
        if self._rng.random() < self._monster_chance:
            return Monster(grace_ticks=MONSTER_GRACE_TICKS)
        return Empty(has_metal=False)
