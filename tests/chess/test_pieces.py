"""Unit tests for /src/chess/pieces.py"""

import pytest

from src.chess.pieces import Piece
from src.core.shared_types import Color, InteractionState, PieceType


@pytest.mark.parametrize("piece_type", [piece_type for piece_type in PieceType])
def test_new_piece_is_resting_and_unmoved(piece_type: PieceType) -> None:
    piece = Piece(Color.WHITE, piece_type)
    assert piece.moved is False
    assert piece.state == InteractionState.RESTING


def test_interaction_states() -> None:
    """Changing the state should not touch the identity of the piece"""
    piece = Piece(Color.BLACK, PieceType.QUEEN)

    piece.select()
    assert piece.state == InteractionState.SELECTED

    piece.hover()
    assert piece.state == InteractionState.HOVERED

    piece.rest()
    assert piece.state == InteractionState.RESTING
    assert piece.team == Color.BLACK
    assert piece.variant == PieceType.QUEEN


def test_mark_moved_is_permanent() -> None:
    piece = Piece(Color.WHITE, PieceType.PAWN)
    piece.mark_moved()
    piece.rest()
    piece.mark_moved()
    assert piece.moved is True
