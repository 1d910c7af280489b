"""Turns a won round into a ranked, persisted score entry."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from themine.data.errors import ScoreStoreError
from themine.data.score_store import ScoreStore
from themine.domain.rules import TOP_SCORES
from themine.domain.score import PendingScore, ScoreRecord, rank_scores, top_scores

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScoreSubmission:
    """Outcome of recording a score."""

    record: ScoreRecord
    scores: List[ScoreRecord]
    rank: int | None
    persisted: bool


class ScoreRecorder:
    """Keeps the loaded leaderboard in memory and writes it back after each submission."""

    def __init__(self, store: ScoreStore) -> None:
        self._store = store
        self._scores: List[ScoreRecord] = []

    @property
    def scores(self) -> List[ScoreRecord]:
        return list(self._scores)

    def load(self) -> List[ScoreRecord]:
        """Pull the current list from the store; a failed read starts from an empty board."""
        try:
            records = self._store.load()
        except ScoreStoreError as exc:
            logger.warning("Could not load high scores: %s", exc)
            records = []
        self._scores = sorted(records, key=lambda record: record.time)
        return self.scores

    def record(self, pending: PendingScore, name: str) -> ScoreSubmission:
        record = ScoreRecord(name=name, time=round(pending.time, 2), date=pending.date)
        self._scores = rank_scores(self._scores, record)
        rank = next((index + 1 for index, entry in enumerate(self._scores) if entry is record), None)

        persisted = True
        try:
            self._store.save(self._scores)
        except ScoreStoreError as exc:
            logger.warning("High score for %s was not saved: %s", name, exc)
            persisted = False

        logger.info("Recorded score %.2fs for %s (rank=%s)", record.time, name, rank)
        return ScoreSubmission(record=record, scores=self.scores, rank=rank, persisted=persisted)

    def top(self, count: int = TOP_SCORES) -> List[ScoreRecord]:
        return top_scores(self._scores, count)
