"""Shared type aliases for the core and domain layers."""
from typing import Literal, Tuple

Position = Tuple[int, int]
Vector = Tuple[int, int]
GlyphMode = Literal["emoji", "ascii"]

__all__ = ["Position", "Vector", "GlyphMode"]
