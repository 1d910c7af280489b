"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

from themine.core.types import GlyphMode

_DEFAULT_GLYPHS: GlyphMode = "emoji"


def get_user_data_dir() -> Path:
    """Return the per-user data directory, honouring THEMINE_HOME."""
    override = os.environ.get("THEMINE_HOME")
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "TheMine"
        return Path.home() / "TheMine"
    return Path.home() / ".config" / "themine"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_scores_path() -> Path:
    """Return the per-user high-score file."""
    return get_user_data_dir() / "scores.json"


def debug_enabled() -> bool:
    """Return True only when THEMINE_DEBUG is explicitly set to '1'."""
    return os.getenv("THEMINE_DEBUG") == "1"


def _normalize_glyphs(value: object) -> GlyphMode:
    return "ascii" if value == "ascii" else _DEFAULT_GLYPHS


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {"glyphs": _DEFAULT_GLYPHS}
    if not isinstance(raw, dict):
        return {"glyphs": _DEFAULT_GLYPHS}
    return {"glyphs": _normalize_glyphs(raw.get("glyphs"))}


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"glyphs": _normalize_glyphs(config.get("glyphs"))}
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
