"""Requests, records and response models exchanged with the input layer, the setup files and the renderer"""

from typing import Optional, Self

from pydantic import BaseModel, ValidationInfo, field_validator

from src.chess.pieces import Piece
from src.chess.setup import Placement, expand_definition
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidPlacementError, InvalidSquareError
from src.core.shared_types import Color, InteractionState, PieceType

AVAILABLE_TEAMS: set[str] = {team.value for team in Color}
AVAILABLE_VARIANTS: set[str] = {variant.value for variant in PieceType}


def _on_board(value: int, axis: int) -> bool:
    return 0 <= value < BOARD_DIMENSIONS[axis]


# --- REQUEST MODELS ---
class SquareModel(BaseModel):
    """A square as sent by the input layer. Coordinates off the board are refused, never clamped."""

    file: int
    rank: int

    @field_validator("file")
    @classmethod
    def validate_file(cls, value: int) -> int:
        if not _on_board(value, 0):
            raise InvalidSquareError(f"File {value} is not on the board.")
        return value

    @field_validator("rank")
    @classmethod
    def validate_rank(cls, value: int) -> int:
        if not _on_board(value, 1):
            raise InvalidSquareError(f"Rank {value} is not on the board.")
        return value

    @classmethod
    def from_square(cls, square: Square) -> Self:
        return cls(file=square.file, rank=square.rank)

    def to_square(self) -> Square:
        return Square(self.file, self.rank)


class PointerEvent(BaseModel):
    """Raw pointer position in window pixels"""

    x: int
    y: int

    def to_square(self, square_size: int) -> Square:
        """
        The window shows the a-file on the left and the first rank at the top: one square is square_size pixels wide.
        """
        if self.x < 0 or self.y < 0:
            raise InvalidSquareError(f"Pointer at ({self.x}, {self.y}) is outside the board.")
        return SquareModel(
            file=self.x // square_size, rank=self.y // square_size
        ).to_square()


class ClickRequest(BaseModel):
    square: SquareModel


class HoverRequest(BaseModel):
    # None: the pointer is not above the board
    square: Optional[SquareModel] = None


# --- SETUP RECORDS ---
class PlacementRecord(BaseModel):
    """One piece on one square, used once to populate the board"""

    team: Color
    variant: PieceType
    file: int
    rank: int

    @field_validator(*["file", "rank"])
    @classmethod
    def validate_coordinate(cls, value: int, info: ValidationInfo) -> int:
        axis = 0 if info.field_name == "file" else 1
        if not _on_board(value, axis):
            raise InvalidPlacementError(f"Cannot place a piece at coordinate {value}.")
        return value

    def to_placement(self) -> Placement:
        return Placement(self.team, self.variant, Square(self.file, self.rank))


class PieceDefinition(BaseModel):
    """
    Entry of the piece definitions file.
    ---

    ex) {"name": "white knight", "team": "white", "variant": "knight", "src": "img/knight-white.png"}

    NOTE: team and variant are kept as plain strings here. An unknown variant should not break the whole file,
    it only gets refused when converting into placements.
    """

    name: str
    team: str
    variant: str
    src: str = ""

    def to_placements(self) -> list[Placement]:
        """Expand into every starting square of this piece type"""
        if self.team not in AVAILABLE_TEAMS:
            raise InvalidPlacementError(f"Invalid team {self.team!r} for {self.name!r}.")
        if self.variant not in AVAILABLE_VARIANTS:
            raise InvalidPlacementError(
                f"Invalid type {self.variant!r} for {self.name!r}."
            )
        return expand_definition(Color(self.team), PieceType(self.variant))


# --- RESPONSE MODELS ---
class PieceView(BaseModel):
    """What the renderer needs to draw one piece (and its highlight)"""

    file: int
    rank: int
    team: Color
    variant: PieceType
    moved: bool
    state: InteractionState

    @classmethod
    def from_piece(cls, square: Square, piece: Piece) -> Self:
        return cls(
            file=square.file,
            rank=square.rank,
            team=piece.team,
            variant=piece.variant,
            moved=piece.moved,
            state=piece.state,
        )


class BoardResponse(BaseModel):
    pieces: list[PieceView]
    selection: Optional[SquareModel]


class SelectionResponse(BaseModel):
    selection: Optional[SquareModel]
    # True when the click relocated a piece
    committed: bool
