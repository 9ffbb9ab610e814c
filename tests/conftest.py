"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import json
from pathlib import Path

import pytest

from src.core.config import SessionConfig
from src.services.board_service import BoardService

# the piece definitions file, one entry per piece type and team
PIECE_DEFINITIONS: list[dict[str, str]] = [
    {
        "name": f"{team} {variant}",
        "team": team,
        "variant": variant,
        "src": f"img/{variant}-{team}.png",
    }
    for team in ["white", "black"]
    for variant in ["pawn", "rook", "knight", "bishop", "queen", "king"]
]


@pytest.fixture
def definitions_file(tmp_path: Path) -> Path:
    """Standard piece definitions written to a temporary JSON file"""
    path = tmp_path / "chess.json"
    path.write_text(json.dumps(PIECE_DEFINITIONS))
    return path


@pytest.fixture
def service() -> BoardService:
    """A session with an empty board and default settings"""
    return BoardService(SessionConfig())


@pytest.fixture
def standard_service(service: BoardService) -> BoardService:
    """A session with all 32 pieces on their starting squares"""
    service.setup_standard()
    return service
