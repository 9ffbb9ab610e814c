"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the movement shape for each piece type.

Only the shape of a move is checked: the offset between the two squares.
Nothing here looks at the board, so there is no blocking, no capturing and no check.
"""

from typing import Callable

from src.chess.square import Square, Vector
from src.core.shared_types import Color, PieceType

# White moves UP the board, black moves DOWN
FORWARD: dict[Color, int] = {
    Color.WHITE: 1,
    Color.BLACK: -1,
}


# --- MOVEMENT RULES ---
def pawn_shape(offset: Vector, team: Color, moved: bool) -> bool:
    """
    A pawn:
    - moves by a single square forward.
    - It can move by two in their first move

    NOTE: no diagonal takes, no en passant.
    """
    df, dr = offset
    if df != 0:
        return False
    forward = FORWARD[team]
    if dr == forward:
        return True
    return dr == 2 * forward and not moved


def knight_shape(offset: Vector, team: Color, moved: bool) -> bool:
    """Knights always move such that one delta is 1 and the other is 2"""
    df, dr = offset
    return {abs(df), abs(dr)} == {1, 2}


def bishop_shape(offset: Vector, team: Color, moved: bool) -> bool:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    df, dr = offset
    return abs(df) == abs(dr)


def rook_shape(offset: Vector, team: Color, moved: bool) -> bool:
    """Rooks move either horizontally or vertically"""
    df, dr = offset
    return df == 0 or dr == 0


def queen_shape(offset: Vector, team: Color, moved: bool) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return rook_shape(offset, team, moved) or bishop_shape(offset, team, moved)


def king_shape(offset: Vector, team: Color, moved: bool) -> bool:
    """
    The king can move by a single square at the time.

    NOTE: (0, 0) passes as well. The selection controller never asks for it under default settings.
    """
    df, dr = offset
    return abs(df) <= 1 and abs(dr) <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
ShapeRuleFn = Callable[[Vector, Color, bool], bool]
MOVEMENT_RULES: dict[PieceType, ShapeRuleFn] = {
    PieceType.PAWN: pawn_shape,
    PieceType.KNIGHT: knight_shape,
    PieceType.BISHOP: bishop_shape,
    PieceType.ROOK: rook_shape,
    PieceType.QUEEN: queen_shape,
    PieceType.KING: king_shape,
}


def can_move(
    variant: PieceType, team: Color, moved: bool, src: Square, dst: Square
) -> bool:
    """Is going from src to dst a legal move shape for this piece? Unknown piece types can never move."""
    rule = MOVEMENT_RULES.get(variant)
    if rule is None:
        return False
    return rule(src.offset_to(dst), team, moved)
