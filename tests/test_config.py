from __future__ import annotations

from pathlib import Path

from themine.presentation.cli import config


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    assert config.load_config(tmp_path / "config.json") == {"glyphs": "emoji"}


def test_corrupt_config_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2", encoding="utf-8")

    assert config.load_config(path) == {"glyphs": "emoji"}


def test_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"

    config.save_config({"glyphs": "ascii"}, path)

    assert config.load_config(path) == {"glyphs": "ascii"}


def test_unknown_glyph_mode_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    config.save_config({"glyphs": "sparkles"}, path)

    assert config.load_config(path) == {"glyphs": "emoji"}


def test_themine_home_overrides_data_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("THEMINE_HOME", str(tmp_path))

    assert config.get_user_data_dir() == tmp_path
    assert config.get_scores_path() == tmp_path / "scores.json"
    assert config.get_default_config_path() == tmp_path / "config.json"


def test_debug_flag_requires_exact_value(monkeypatch) -> None:
    monkeypatch.setenv("THEMINE_DEBUG", "yes")
    assert not config.debug_enabled()
    monkeypatch.setenv("THEMINE_DEBUG", "1")
    assert config.debug_enabled()
