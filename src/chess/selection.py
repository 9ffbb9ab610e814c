"""
Selecting a piece and moving it around with clicks.

The selection (the square that was clicked before) lives with the caller: it goes into every
`handle_click()` call and the next selection comes back out.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.chess.board import Board
from src.chess.moves import can_move
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import InteractionState

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionPolicy:
    """
    Rules that are a matter of taste rather than chess.
    ---

    * allow_friendly_overwrite: a piece may land on a square occupied by its own team, destroying that piece.
    * reclick_releases: clicking the selected square again puts the piece back to rest
      (otherwise the click just confirms the current selection).
    """

    allow_friendly_overwrite: bool = True
    reclick_releases: bool = False


DEFAULT_POLICY = SelectionPolicy()


def handle_click(
    board: Board,
    selection: Optional[Square],
    clicked: Square,
    policy: SelectionPolicy = DEFAULT_POLICY,
) -> Optional[Square]:
    """
    Process a single left click on a square.
    ----

    1. Clicked the selected square again? Nothing changes (unless the policy says to release the piece).
    2. Nothing selected (or the selected square is empty)? Select the clicked piece, if there is one.
    3. Attempt to move the selected piece onto the clicked square:
        * legal: the piece moves (destroying whatever stood there) and the selection is cleared.
        * illegal: the piece goes back where it came from, the clicked square is returned.

    Returns the new selection.
    """
    if selection == clicked and not policy.reclick_releases:
        return clicked

    moving = board.remove(selection) if selection is not None else None
    if moving is None:
        return _select(board, clicked)

    # for the typechecker: we only get a moving piece from a selected square
    assert selection is not None

    if selection == clicked:
        moving.rest()
        board.put(selection, moving)
        _LOGGER.debug("Released %s on %s", moving.variant, selection)
        return selection

    if _is_legal(board, moving, selection, clicked, policy):
        moving.mark_moved()
        moving.rest()
        board.put(clicked, moving)
        _LOGGER.debug(
            "Moved %s %s from %s to %s",
            moving.team,
            moving.variant,
            selection,
            clicked,
        )
        return None

    moving.rest()
    board.put(selection, moving)
    _LOGGER.debug(
        "Rejected %s %s from %s to %s",
        moving.team,
        moving.variant,
        selection,
        clicked,
    )
    return clicked


def update_hover(
    board: Board, previous: Optional[Square], pointer: Optional[Square]
) -> Optional[Square]:
    """
    Per frame: move the hover highlight to the piece under the pointer.

    Only resting pieces get highlighted, and only hovered pieces get reset, so a selected piece keeps its highlight.
    Returns the square to pass in as `previous` next frame.
    """
    if previous is not None:
        piece = board.get(previous)
        if piece is not None and piece.state == InteractionState.HOVERED:
            piece.rest()

    if pointer is not None:
        piece = board.get(pointer)
        if piece is not None and piece.state == InteractionState.RESTING:
            piece.hover()

    return pointer


# -- PRIVATE HELPERS ---
def _select(board: Board, clicked: Square) -> Optional[Square]:
    """Select the piece on the clicked square without moving anything."""
    piece = board.get(clicked)
    if piece is None:
        return None
    piece.select()
    _LOGGER.debug("Selected %s %s on %s", piece.team, piece.variant, clicked)
    return clicked


def _is_legal(
    board: Board,
    moving: Piece,
    from_square: Square,
    to_square: Square,
    policy: SelectionPolicy,
) -> bool:
    if not can_move(moving.variant, moving.team, moving.moved, from_square, to_square):
        return False

    if policy.allow_friendly_overwrite:
        return True

    occupant = board.get(to_square)
    return occupant is None or occupant.team != moving.team
