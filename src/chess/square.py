"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

Vector = tuple[int, int]


@dataclass(frozen=True)
class Square:
    """
    Zero-based coordinates: (0, 0) is a1, (7, 7) is h8.

    NOTE: the Square does not clamp or wrap anything. Whether the coordinates lie on the board is checked
    at the input boundary (see src/api/models.py), not here.
    """

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7). Ranks past 9 ('a10') are read in full."""
        file = ord(sq[0]) - ord("a")
        rank = int(sq[1:]) - 1
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a'))}{self.rank + 1}"

    def __str__(self) -> str:
        # used in log lines, so it must work for squares off the board too
        if self.is_within_bounds():
            return self.to_algebraic()
        return f"({self.file}, {self.rank})"

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )

    def offset_to(self, other: Square) -> Vector:
        """(delta file, delta rank) needed to get from this square to the other one"""
        return other.file - self.file, other.rank - self.rank
