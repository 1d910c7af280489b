"""Persistence exports."""

from .errors import DataError, ScoreStoreError
from .score_store import InMemoryScoreStore, JsonScoreStore, ScoreStore

__all__ = [
    "DataError",
    "InMemoryScoreStore",
    "JsonScoreStore",
    "ScoreStore",
    "ScoreStoreError",
]
