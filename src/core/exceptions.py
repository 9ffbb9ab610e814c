"""
Exceptions raised by the board session.

NOTE: illegal moves, clicks on empty squares and unknown piece types are NOT errors.
Those are regular outcomes of a click and are handled without raising.
"""


class ChessError(Exception):
    """Base class for everything raised on purpose by this package."""


class InvalidSquareError(ChessError):
    """A coordinate arriving from the input layer does not name a square on the board."""


class InvalidPlacementError(ChessError):
    """A placement record cannot be put on the board."""


class SetupError(ChessError):
    """The piece definitions could not be read."""
