"""Defines pieces, pockets and the board state produced by the notation reader"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from string import ascii_lowercase
from typing import Self

from src.core.exceptions import UnknownLetterError
from src.core.shared_types import Color
from src.notation.square import Square

PROMOTION_PREFIX = "+"
PROMOTION_SUFFIX = "~"
# Placeholder for an undetermined piece (used by some reserve notations). Never looked up in a mapping.
WILDCARD = "*"
INTERNAL_LETTERS = ascii_lowercase


@dataclass(frozen=True)
class Role:
    """
    Kind of piece, independent of color.
    ----

    `letter` is the internal identifier: the n-th letter of a color's alphabet maps to the n-th lowercase letter ('a', 'b', ...).
    `promoted_kind` marks the promoted version of that kind (written with a '+' prefix, ex. shogi's '+p' / tokin).
    A promoted kind is a different role, not to be confused with `Piece.promoted`, which tracks how a piece got its role.
    """

    letter: str
    promoted_kind: bool = False

    @classmethod
    def from_letter(cls, letter: str) -> Self:
        """'c' -> Role('c'), '+c' -> Role('c', promoted_kind=True)"""
        if letter.startswith(PROMOTION_PREFIX):
            return cls(letter[1:], promoted_kind=True)
        return cls(letter)

    def to_letter(self) -> str:
        return f"{PROMOTION_PREFIX}{self.letter}" if self.promoted_kind else self.letter

    def promote(self) -> Role:
        return replace(self, promoted_kind=True)

    @property
    def index(self) -> int:
        """Position of the letter within a color's alphabet"""
        if len(self.letter) != 1 or self.letter not in INTERNAL_LETTERS:
            raise UnknownLetterError(f"{self.letter!r} is not an internal role letter.")
        return INTERNAL_LETTERS.index(self.letter)

    @property
    def is_wildcard(self) -> bool:
        return self.letter == WILDCARD


@dataclass(frozen=True)
class Piece:
    role: Role
    color: Color
    promoted: bool = False

    def mark_promoted(self) -> Piece:
        """Same piece, flagged as having reached its role through promotion."""
        return replace(self, promoted=True)


Pieces = dict[Square, Piece]
Pocket = dict[Role, int]


@dataclass(frozen=True)
class Pockets:
    """Reserves of both players"""

    white: Pocket = field(default_factory=dict)
    black: Pocket = field(default_factory=dict)

    def of(self, color: Color) -> Pocket:
        return self.white if color == Color.WHITE else self.black


@dataclass(frozen=True)
class BoardState:
    """
    Everything the placement field of a FEN string describes.
    ----

    * `pieces`: which piece stands on which square. Empty squares are simply absent.
    * `pockets`: pieces held off-board. None means the notation had no reserve segment at all,
        which is different from a reserve segment that happened to be empty.
    """

    pieces: Pieces
    pockets: Pockets | None = None
