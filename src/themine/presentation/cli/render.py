"""Text rendering of the board and leaderboard."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from themine.core.types import GlyphMode
from themine.domain.rules import METALS
from themine.domain.score import ScoreRecord
from themine.domain.state import GameStatus
from themine.domain.tile import Tile, TileKind
from themine.services.controllers import SessionView


@dataclass(frozen=True, slots=True)
class GlyphSet:
    player: str
    stone: str
    monster: str
    metal: str
    revealed: str
    fog: str


GLYPHS = {
    "emoji": GlyphSet(player="🙂", stone="🪨", monster="👾", metal="💰", revealed="  ", fog="░░"),
    "ascii": GlyphSet(player="@", stone="#", monster="M", metal="$", revealed=" ", fog="."),
}


def tile_glyph(tile: Tile, *, is_player: bool, glyphs: GlyphSet) -> str:
    """
    Pick the glyph for a cell.

    Stone, monster and metal show only once visible or explored. The player
    overrides everything. Anything else is blank ground on a revealed
    background, or fog when unexplored.
    """
    if is_player:
        return glyphs.player
    if tile.visible or tile.explored:
        if tile.kind is TileKind.STONE:
            return glyphs.stone
        if tile.kind is TileKind.MONSTER:
            return glyphs.monster
        if tile.has_metal:
            return glyphs.metal
    return glyphs.revealed if tile.explored else glyphs.fog


def render_board(view: SessionView, mode: GlyphMode = "emoji") -> List[str]:
    glyphs = GLYPHS[mode]
    lines: List[str] = []
    for y in range(view.board.size):
        cells = [
            tile_glyph(view.board[(x, y)], is_player=(x, y) == view.player, glyphs=glyphs)
            for x in range(view.board.size)
        ]
        lines.append("".join(cells))
    return lines


def render_status(view: SessionView) -> str:
    progress = f"Metal {view.metal_count}/{METALS}  Time {view.elapsed:.1f}s"
    if view.status is GameStatus.CAUGHT:
        return f"{progress}  -- Caught! Press Enter to restart."
    if view.status is GameStatus.WON:
        return f"{progress}  -- You found every deposit! Enter your name."
    return progress


def render_scores(scores: Sequence[ScoreRecord]) -> List[str]:
    if not scores:
        return ["No high scores yet."]
    lines = ["=== High Scores ==="]
    for index, record in enumerate(scores, start=1):
        lines.append(f"{index:>2}. {record.name:<20} {record.time:>8.2f}s  {record.date[:10]}")
    return lines


def render_screen(view: SessionView, mode: GlyphMode = "emoji") -> str:
    return "\n".join([*render_board(view, mode), render_status(view)])
