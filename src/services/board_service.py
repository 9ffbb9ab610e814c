"""
Orchestration between the input layer / renderer and the board rules.

One BoardService is one game session: it owns the board, the current selection and the hovered square.
Every read and write goes through a single lock, so a render pass never sees a piece halfway through a move
(taken off its old square but not yet put on the new one).
"""

import logging
import threading
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import TypeAdapter, ValidationError

from src.api.models import (
    BoardResponse,
    ClickRequest,
    HoverRequest,
    PieceDefinition,
    PieceView,
    PlacementRecord,
    PointerEvent,
    SelectionResponse,
    SquareModel,
)
from src.chess.board import Board
from src.chess.selection import SelectionPolicy, handle_click, update_hover
from src.chess.setup import Placement, standard_placements
from src.chess.square import Square
from src.core.config import SessionConfig
from src.core.exceptions import InvalidPlacementError, InvalidSquareError, SetupError

_LOGGER = logging.getLogger(__name__)

RAW_RECORDS = TypeAdapter(list[dict[str, Any]])


class BoardService:
    """Owns the state of a single session"""

    def __init__(self, config: Optional[SessionConfig] = None) -> None:
        self.config = config or SessionConfig()
        self.policy = SelectionPolicy(
            allow_friendly_overwrite=self.config.allow_friendly_overwrite,
            reclick_releases=self.config.reclick_releases,
        )
        self.board = Board()
        self.selection: Optional[Square] = None
        self.hovered: Optional[Square] = None
        self._lock = threading.Lock()

    # -- SETUP ---
    def setup(self, records: Iterable[PlacementRecord | dict[str, Any]]) -> int:
        """
        Rebuild the board from placement records.

        Records that cannot be understood are logged and skipped. Returns the number of pieces placed.
        """
        placements: list[Placement] = []
        for record in records:
            try:
                if not isinstance(record, PlacementRecord):
                    record = PlacementRecord.model_validate(record)
            except (ValidationError, InvalidPlacementError) as error:
                _LOGGER.warning("Skipping placement record %r: %s", record, error)
                continue
            placements.append(record.to_placement())
        return self._reset(placements)

    def setup_from_definitions(self, definitions: Iterable[PieceDefinition]) -> int:
        """Every definition puts its piece type on all of the standard starting squares."""
        placements: list[Placement] = []
        for definition in definitions:
            try:
                placements.extend(definition.to_placements())
            except InvalidPlacementError as error:
                _LOGGER.warning("Skipping piece definition: %s", error)
        return self._reset(placements)

    def setup_standard(self) -> int:
        return self._reset(standard_placements())

    def load_definitions(self, path: Optional[str | Path] = None) -> list[PieceDefinition]:
        """
        Read the piece definitions (JSON array) from file.
        ----

        A file that cannot be read at all raises SetupError. Single malformed entries are logged and skipped.
        """
        path = Path(path or self.config.definitions_path)
        try:
            raw_records = RAW_RECORDS.validate_json(path.read_bytes())
        except (OSError, ValidationError) as error:
            raise SetupError(f"Cannot read piece definitions from {path}: {error}") from error

        definitions: list[PieceDefinition] = []
        for raw in raw_records:
            try:
                definitions.append(PieceDefinition.model_validate(raw))
            except ValidationError as error:
                _LOGGER.warning("Skipping piece definition %r: %s", raw, error)
        return definitions

    # -- INPUT LAYER ---
    def click(self, request: ClickRequest) -> SelectionResponse:
        """The only way the board changes after setup."""
        clicked = request.square.to_square()
        with self._lock:
            previous = self.selection
            self.selection = handle_click(self.board, previous, clicked, self.policy)
            # after a committed move the selection is cleared and the moving piece stands on the clicked square
            committed = (
                previous is not None
                and self.selection is None
                and self.board.is_occupied(clicked)
            )
            _LOGGER.debug("Click on %s: selection %s -> %s", clicked, previous, self.selection)
            return SelectionResponse(
                selection=self._to_model(self.selection), committed=committed
            )

    def hover(self, request: HoverRequest) -> None:
        pointer = request.square.to_square() if request.square else None
        with self._lock:
            self.hovered = update_hover(self.board, self.hovered, pointer)

    def click_at(self, event: PointerEvent) -> SelectionResponse:
        """A click given as a pointer position. A pointer off the board raises InvalidSquareError."""
        square = event.to_square(self.config.square_size)
        return self.click(ClickRequest(square=SquareModel.from_square(square)))

    def hover_at(self, event: PointerEvent) -> None:
        """Per frame pointer position. Moving off the board clears the hover highlight."""
        try:
            square: Optional[SquareModel] = SquareModel.from_square(
                event.to_square(self.config.square_size)
            )
        except InvalidSquareError:
            square = None
        self.hover(HoverRequest(square=square))

    # -- RENDERER ---
    def snapshot(self) -> BoardResponse:
        """Copy of the board for drawing. Taken under the lock, so it never shows a move in progress."""
        with self._lock:
            pieces = [
                PieceView.from_piece(square, piece)
                for square, piece in self.board.iterate()
            ]
            return BoardResponse(pieces=pieces, selection=self._to_model(self.selection))

    # -- Internal helpers --
    def _reset(self, placements: list[Placement]) -> int:
        with self._lock:
            self.board = Board.from_placements(placements)
            self.selection = None
            self.hovered = None
            _LOGGER.info("Board set up with %d pieces", len(self.board))
            return len(self.board)

    def _to_model(self, square: Optional[Square]) -> Optional[SquareModel]:
        return SquareModel.from_square(square) if square is not None else None
