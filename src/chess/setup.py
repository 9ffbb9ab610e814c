"""
Starting layout of the pieces.

A piece definition only says "white knight". The definition gets expanded into one placement per
starting square of that piece type (so a single white knight definition puts knights on b1 and g1).
"""

from dataclasses import dataclass

from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.shared_types import Color, PieceType


@dataclass(frozen=True)
class Placement:
    team: Color
    variant: PieceType
    square: Square


# files (0 = a-file) where each piece type starts
STARTING_FILES: dict[PieceType, tuple[int, ...]] = {
    PieceType.PAWN: tuple(range(BOARD_DIMENSIONS[0])),
    PieceType.ROOK: (0, 7),
    PieceType.KNIGHT: (1, 6),
    PieceType.BISHOP: (2, 5),
    PieceType.QUEEN: (3,),
    PieceType.KING: (4,),
}

BACK_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}
PAWN_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


def starting_rank(team: Color, variant: PieceType) -> int:
    return PAWN_RANK[team] if variant == PieceType.PAWN else BACK_RANK[team]


def expand_definition(team: Color, variant: PieceType) -> list[Placement]:
    """All starting squares for this team's pieces of the given type"""
    rank = starting_rank(team, variant)
    return [
        Placement(team, variant, Square(file, rank))
        for file in STARTING_FILES[variant]
    ]


def standard_placements() -> list[Placement]:
    """The classical 32 piece starting position"""
    return [
        placement
        for team in Color
        for variant in PieceType
        for placement in expand_definition(team, variant)
    ]

