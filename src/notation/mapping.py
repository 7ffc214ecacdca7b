"""
Alphabet mapping: which external letters denote which piece kinds, per color.

Each color has an ordered list of letters. The n-th letter of either list denotes the same kind of piece,
internally identified by the n-th lowercase letter of the alphabet:

    white: K Q R B N P
    black: k q r b n p
    role:  a b c d e f
"""

import logging

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from src.core.exceptions import (
    AmbiguousLetterError,
    InvalidMappingError,
    UnknownLetterError,
)
from src.core.shared_types import Color
from src.notation.pieces import (
    INTERNAL_LETTERS,
    PROMOTION_PREFIX,
    PROMOTION_SUFFIX,
    WILDCARD,
    Role,
)

logger = logging.getLogger(__name__)

# Characters with a meaning of their own in the notation, can never denote a piece
RESERVED_CHARACTERS = frozenset(
    "0123456789/ []" + PROMOTION_PREFIX + PROMOTION_SUFFIX + WILDCARD
)


class Mapping(BaseModel):
    """Per-color ordered piece letters. Validated once, when constructed."""

    model_config = ConfigDict(frozen=True)

    white_pieces: tuple[str, ...]
    black_pieces: tuple[str, ...]

    @field_validator("white_pieces", "black_pieces")
    @classmethod
    def validate_letters(cls, letters: tuple[str, ...]) -> tuple[str, ...]:
        if len(letters) > len(INTERNAL_LETTERS):
            raise InvalidMappingError(
                f"At most {len(INTERNAL_LETTERS)} piece kinds are supported, got {len(letters)}."
            )
        for letter in letters:
            if len(letter) != 1:
                raise InvalidMappingError(
                    f"Piece letters must be single characters, got {letter!r}."
                )
            if letter in RESERVED_CHARACTERS:
                raise InvalidMappingError(
                    f"{letter!r} is reserved by the notation and cannot denote a piece."
                )
        if len(set(letters)) != len(letters):
            raise InvalidMappingError(f"Duplicate piece letters in {letters!r}.")
        return letters

    @model_validator(mode="after")
    def validate_no_overlap(self) -> "Mapping":
        shared = set(self.white_pieces) & set(self.black_pieces)
        if shared:
            raise InvalidMappingError(
                f"Letters {sorted(shared)} appear in both the white and black alphabet."
            )
        return self

    def letters(self, color: Color) -> tuple[str, ...]:
        return self.white_pieces if color == Color.WHITE else self.black_pieces


DEFAULT_MAPPING = Mapping(
    white_pieces=("K", "Q", "R", "B", "N", "P"),
    black_pieces=("k", "q", "r", "b", "n", "p"),
)


def resolve_external(letter: str, mapping: Mapping) -> tuple[str, Color]:
    """External piece letter -> (internal letter, color)"""
    in_white = letter in mapping.white_pieces
    in_black = letter in mapping.black_pieces
    if not (in_white or in_black):
        raise UnknownLetterError(
            f"Piece letter {letter!r} not found in white or black mapping."
        )
    # only reachable when validation was bypassed (Mapping.model_construct)
    if in_white and in_black:
        raise AmbiguousLetterError(
            f"Piece letter {letter!r} found in both white and black mappings."
        )
    color = Color.WHITE if in_white else Color.BLACK
    index = mapping.letters(color).index(letter)
    return INTERNAL_LETTERS[index], color


def resolve_internal(role: Role, color: Color, mapping: Mapping) -> str:
    """Role -> external piece letter for the given color. Promoted kinds keep their '+' prefix."""
    if role.is_wildcard:
        return role.to_letter()

    letters = mapping.letters(color)
    if role.index >= len(letters):
        raise UnknownLetterError(
            f"Role {role.to_letter()!r} has no {color} letter in the mapping ({len(letters)} letters)."
        )
    external = letters[role.index]
    return f"{PROMOTION_PREFIX}{external}" if role.promoted_kind else external


def resolve_id(letter: str, mapping: Mapping = DEFAULT_MAPPING) -> tuple[Role, Color]:
    """Single letter lookup for callers that only need to know which piece a letter denotes (ex. a piece palette)."""
    internal, color = resolve_external(letter, mapping)
    logger.debug("Resolved %r to role %r (%s)", letter, internal, color)
    return Role(internal), color
