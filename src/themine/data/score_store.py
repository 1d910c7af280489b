"""Durable storage for the high-score list."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, List, Mapping, Protocol, Sequence

from themine.domain.score import ScoreRecord

from .errors import ScoreStoreError

SCORES_VERSION = 1


class ScoreStore(Protocol):
    """Key-value style store holding one ordered score list."""

    def load(self) -> List[ScoreRecord]: ...

    def save(self, records: Sequence[ScoreRecord]) -> None: ...


class InMemoryScoreStore:
    """Non-durable store, used for tests and throwaway sessions."""

    def __init__(self, records: Sequence[ScoreRecord] = ()) -> None:
        self._records = list(records)
        self.save_count = 0

    def load(self) -> List[ScoreRecord]:
        return list(self._records)

    def save(self, records: Sequence[ScoreRecord]) -> None:
        self._records = list(records)
        self.save_count += 1


class JsonScoreStore:
    """Stores the score list as a single JSON document on disk."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[ScoreRecord]:
        """Return the stored records; a missing file is an empty list."""
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise ScoreStoreError(f"Unable to read score file: {self._path}") from exc

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ScoreStoreError(f"Invalid JSON in {self._path}: {exc}") from exc
        if not isinstance(payload, Mapping) or payload.get("version") != SCORES_VERSION:
            raise ScoreStoreError(f"Unsupported score file format: {self._path}")
        raw_scores = payload.get("scores")
        if not isinstance(raw_scores, list):
            raise ScoreStoreError("Score file is missing the 'scores' list.")
        return [self._coerce_record(entry, index) for index, entry in enumerate(raw_scores)]

    def save(self, records: Sequence[ScoreRecord]) -> None:
        """Write the list atomically so a crash never leaves a half-written file."""
        payload = {
            "version": SCORES_VERSION,
            "scores": [
                {"name": record.name, "time": record.time, "date": record.date}
                for record in records
            ],
        }
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise ScoreStoreError(f"Unable to write score file: {self._path}") from exc

    @staticmethod
    def _coerce_record(entry: Any, index: int) -> ScoreRecord:
        if not isinstance(entry, Mapping):
            raise ScoreStoreError(f"scores[{index}] must be an object.")
        name = entry.get("name")
        time = entry.get("time")
        date = entry.get("date")
        if not isinstance(name, str) or not name:
            raise ScoreStoreError(f"scores[{index}].name must be a non-empty string.")
        if isinstance(time, bool) or not isinstance(time, (int, float)):
            raise ScoreStoreError(f"scores[{index}].time must be a number.")
        if not isinstance(date, str):
            raise ScoreStoreError(f"scores[{index}].date must be a string.")
        return ScoreRecord(name=name, time=float(time), date=date)
