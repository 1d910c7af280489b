from __future__ import annotations

import json
from pathlib import Path

import pytest

from themine.data.errors import ScoreStoreError
from themine.data.score_store import JsonScoreStore
from themine.domain.score import ScoreRecord


def test_missing_file_loads_as_empty(tmp_path: Path) -> None:
    assert JsonScoreStore(tmp_path / "scores.json").load() == []


def test_save_then_load_preserves_order(tmp_path: Path) -> None:
    store = JsonScoreStore(tmp_path / "nested" / "scores.json")
    records = [
        ScoreRecord(name="ada", time=9.01, date="2026-01-01T00:00:00+00:00"),
        ScoreRecord(name="bob", time=12.34, date="2026-01-02T00:00:00+00:00"),
    ]

    store.save(records)

    assert store.load() == records
    assert not (tmp_path / "nested" / "scores.json.tmp").exists()


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    path.write_text("{nope", encoding="utf-8")

    with pytest.raises(ScoreStoreError):
        JsonScoreStore(path).load()


def test_unknown_version_raises(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"version": 99, "scores": []}), encoding="utf-8")

    with pytest.raises(ScoreStoreError):
        JsonScoreStore(path).load()


@pytest.mark.parametrize(
    "entry",
    [
        "not-an-object",
        {"name": "", "time": 1.0, "date": "d"},
        {"name": "ada", "time": "fast", "date": "d"},
        {"name": "ada", "time": True, "date": "d"},
        {"name": "ada", "time": 1.0},
    ],
)
def test_malformed_entries_raise(tmp_path: Path, entry: object) -> None:
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"version": 1, "scores": [entry]}), encoding="utf-8")

    with pytest.raises(ScoreStoreError):
        JsonScoreStore(path).load()


def test_unwritable_location_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(ScoreStoreError):
        JsonScoreStore(blocker / "scores.json").save([])
