"""Fixed gameplay constants."""
from __future__ import annotations

import math
from typing import Tuple

from themine.core.types import Position, Vector

GRID_SIZE = 10
START: Position = (0, 0)
METALS = 12
ROCK_RATIO = 0.05
ROCKS = math.floor(ROCK_RATIO * (GRID_SIZE * GRID_SIZE - 1 - METALS))
MONSTER_CHANCE = 0.15
MONSTER_GRACE_TICKS = 1

TICK_SECONDS = 1.0
CAUGHT_RESET_SECONDS = 5.0

MAX_SCORES = 1000
TOP_SCORES = 10
MAX_NAME_LENGTH = 20

UP: Vector = (0, -1)
DOWN: Vector = (0, 1)
LEFT: Vector = (-1, 0)
RIGHT: Vector = (1, 0)
# Monster pursuit evaluates steps in exactly this order; earlier wins ties.
STEP_ORDER: Tuple[Vector, ...] = (UP, DOWN, LEFT, RIGHT)


def manhattan(a: Position, b: Position) -> int:
    """Return |dx| + |dy| between two cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
