"""The Board is the single source of truth for which piece stands where."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Protocol, Self

from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color, PieceType


class Placement(Protocol):
    """Just the parts of a placement record the Board needs"""

    @property
    def team(self) -> Color: ...
    @property
    def variant(self) -> PieceType: ...
    @property
    def square(self) -> Square: ...


@dataclass
class Board:
    """
    Occupancy of the board.
    ----

    An empty square simply has no entry in `position`.
    A square holds at most one piece: putting a piece on an occupied square discards the previous occupant.
    """

    position: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def from_placements(cls, placements: Iterable[Placement]) -> Self:
        """Construct a board with a fresh (resting, not yet moved) piece on every placement."""
        board = cls()
        for placement in placements:
            board.put(placement.square, Piece(placement.team, placement.variant))
        return board

    def get(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)

    def remove(self, square: Square) -> Optional[Piece]:
        """Take the piece off the board (if there is one) and hand it to the caller."""
        return self.position.pop(square, None)

    def put(self, square: Square, piece: Piece) -> None:
        """NOTE: whatever stood on the square before is gone. No capture bookkeeping."""
        self.position[square] = piece

    def iterate(self) -> Iterator[tuple[Square, Piece]]:
        """All occupied squares. The order means nothing."""
        return iter(list(self.position.items()))

    def is_occupied(self, square: Square) -> bool:
        return square in self.position

    def __len__(self) -> int:
        return len(self.position)
