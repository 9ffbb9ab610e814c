"""Unit tests for /src/chess/board.py"""

from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.setup import Placement
from src.chess.square import Square
from src.core.shared_types import Color, InteractionState, PieceType


def test_empty_board() -> None:
    board = Board()
    assert len(board) == 0
    assert board.get(Square(0, 0)) is None
    assert list(board.iterate()) == []


def test_put_and_get() -> None:
    board = Board()
    rook = Piece(Color.WHITE, PieceType.ROOK)
    board.put(Square(0, 0), rook)

    assert board.get(Square(0, 0)) is rook
    assert board.is_occupied(Square(0, 0))
    assert not board.is_occupied(Square(0, 1))


def test_get_has_no_side_effect() -> None:
    board = Board()
    board.put(Square(3, 3), Piece(Color.BLACK, PieceType.KING))
    _ = board.get(Square(3, 3))
    _ = board.get(Square(4, 4))
    assert len(board) == 1
    assert not board.is_occupied(Square(4, 4))


def test_remove_returns_occupant_and_empties_square() -> None:
    board = Board()
    knight = Piece(Color.WHITE, PieceType.KNIGHT)
    board.put(Square(1, 0), knight)

    removed = board.remove(Square(1, 0))
    assert removed is knight
    assert board.get(Square(1, 0)) is None
    assert len(board) == 0


def test_remove_from_empty_square() -> None:
    board = Board()
    assert board.remove(Square(5, 5)) is None


def test_put_overwrites_previous_occupant() -> None:
    """At most one piece per square: the previous occupant silently disappears"""
    board = Board()
    pawn = Piece(Color.BLACK, PieceType.PAWN)
    queen = Piece(Color.WHITE, PieceType.QUEEN)
    board.put(Square(4, 4), pawn)
    board.put(Square(4, 4), queen)

    assert board.get(Square(4, 4)) is queen
    assert len(board) == 1
    assert pawn not in [piece for _, piece in board.iterate()]


def test_iterate_yields_every_occupied_square() -> None:
    """Order is not meaningful, so compare as sets"""
    board = Board()
    squares = {Square(0, 0), Square(7, 7), Square(3, 4)}
    for square in squares:
        board.put(square, Piece(Color.WHITE, PieceType.BISHOP))

    assert {square for square, _ in board.iterate()} == squares


def test_iterate_is_safe_against_mutation() -> None:
    """The renderer may iterate while pieces are taken off the board"""
    board = Board()
    board.put(Square(0, 0), Piece(Color.WHITE, PieceType.ROOK))
    board.put(Square(7, 0), Piece(Color.WHITE, PieceType.ROOK))

    for square, _ in board.iterate():
        board.remove(square)
    assert len(board) == 0


def test_from_placements() -> None:
    placements = [
        Placement(Color.WHITE, PieceType.KING, Square(4, 0)),
        Placement(Color.BLACK, PieceType.KING, Square(4, 7)),
    ]
    board = Board.from_placements(placements)

    assert len(board) == 2
    white_king = board.get(Square(4, 0))
    assert white_king == Piece(Color.WHITE, PieceType.KING)
    assert white_king is not None
    assert white_king.state == InteractionState.RESTING
    assert not white_king.moved
