"""Domain exports."""

from .board import Board
from .score import PendingScore, ScoreRecord, rank_scores, top_scores
from .state import GameState, GameStatus
from .tile import Dirt, Empty, Monster, Stone, Tile, TileContent, TileKind

__all__ = [
    "Board",
    "Dirt",
    "Empty",
    "GameState",
    "GameStatus",
    "Monster",
    "PendingScore",
    "ScoreRecord",
    "Stone",
    "Tile",
    "TileContent",
    "TileKind",
    "rank_scores",
    "top_scores",
]
