"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class InteractionState(StrEnum):
    """Presentation only. The renderer picks the highlight color from this, the rules never look at it."""

    RESTING = "resting"
    HOVERED = "hovered"
    SELECTED = "selected"
