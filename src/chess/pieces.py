"""Defines the pieces standing on the board"""

from dataclasses import dataclass

from src.core.shared_types import Color, InteractionState, PieceType


@dataclass
class Piece:
    team: Color
    variant: PieceType
    # only the pawn's two-step opening cares about this
    moved: bool = False
    state: InteractionState = InteractionState.RESTING

    def select(self) -> None:
        self.state = InteractionState.SELECTED

    def hover(self) -> None:
        self.state = InteractionState.HOVERED

    def rest(self) -> None:
        self.state = InteractionState.RESTING

    def mark_moved(self) -> None:
        """Once moved, always moved."""
        self.moved = True
