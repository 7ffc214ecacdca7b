"""
A square on the board, and the size of the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase


@dataclass(frozen=True)
class BoardDimensions:
    width: int
    height: int

    def ranks(self) -> range:
        """Rank indices top to bottom, the order in which they are written."""
        return range(self.height - 1, -1, -1)

    def files(self) -> range:
        return range(self.width)


# Standard chess board. Variants supply their own dimensions.
STANDARD_DIMENSIONS = BoardDimensions(8, 8)


@dataclass(frozen=True)
class Square:
    """Position key. Zero-based: file 0 is the a-file, rank 0 the bottom rank."""

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7). Ranks may have more than one digit ('a10')."""
        file = ascii_lowercase.index(sq[0])
        rank = int(sq[1:]) - 1
        return cls(file, rank)

    def to_algebraic(self) -> str:
        # NOTE: only meaningful for up to 26 files
        return f"{ascii_lowercase[self.file]}{self.rank + 1}"

    def is_within(self, dimensions: BoardDimensions) -> bool:
        return (0 <= self.file < dimensions.width) and (
            0 <= self.rank < dimensions.height
        )
