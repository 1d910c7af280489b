"""Score records and leaderboard ranking."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from themine.domain.rules import MAX_SCORES, TOP_SCORES


@dataclass(frozen=True, slots=True)
class PendingScore:
    """Finish time of a won round, waiting for the player's name."""

    time: float
    date: str


@dataclass(frozen=True, slots=True)
class ScoreRecord:
    name: str
    time: float
    date: str


def rank_scores(
    records: Sequence[ScoreRecord], new_record: ScoreRecord, *, limit: int = MAX_SCORES
) -> List[ScoreRecord]:
    """Insert a record, sort ascending by time and keep the best ``limit`` entries.

    The sort is stable, so a new record tying an existing time ranks after it.
    """
    ranked = sorted([*records, new_record], key=lambda record: record.time)
    return ranked[:limit]


def top_scores(records: Sequence[ScoreRecord], count: int = TOP_SCORES) -> List[ScoreRecord]:
    return sorted(records, key=lambda record: record.time)[:count]
