"""Session settings and logging setup"""

import logging
import os
from typing import Self

from pydantic import BaseModel, ConfigDict, PositiveInt

ENV_PREFIX = "CHESS_"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class SessionConfig(BaseModel):
    """
    Knobs of a single board session.
    ---

    * square_size: width (in pixels) of one square. Used to convert pointer positions into squares, so it must be positive.
    * allow_friendly_overwrite: may a piece land on a square held by its own team (destroying that piece)?
    * reclick_releases: does clicking the selected square again put the piece back to rest?
    * definitions_path: JSON file with the piece definitions used to set up the board.
    """

    model_config = ConfigDict(frozen=True)

    square_size: PositiveInt = 50
    allow_friendly_overwrite: bool = True
    reclick_releases: bool = False
    definitions_path: str = "json/chess.json"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Self:
        """Pick up overrides like CHESS_SQUARE_SIZE=64 from the environment. Unset variables keep their defaults."""
        overrides = {
            name: os.environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in os.environ
        }
        return cls.model_validate(overrides)


def configure_logging(level: str = "INFO") -> None:
    """Only for the process entrypoint. Library modules just create their loggers."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
