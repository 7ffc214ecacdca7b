"""
Stricter checks than the reader itself performs.

The reader accepts anything its grammar can scan, including boards of the wrong size. Callers that need a
well-formed position should check the notation first. None of these functions raise on malformed input.
"""

from src.notation.board import (
    FIELD_SEPARATOR,
    POCKET_CLOSE,
    POCKET_OPEN,
    RANK_SEPARATOR,
    START_KEYWORD,
)
from src.notation.fen import split_placement
from src.notation.mapping import DEFAULT_MAPPING, Mapping
from src.notation.pieces import PROMOTION_PREFIX, PROMOTION_SUFFIX, BoardState
from src.notation.square import STANDARD_DIMENSIONS, BoardDimensions


def is_known_letter(character: str, mapping: Mapping) -> bool:
    return character in mapping.white_pieces or character in mapping.black_pieces


def is_valid_board(
    board_fen: str,
    dimensions: BoardDimensions = STANDARD_DIMENSIONS,
    mapping: Mapping = DEFAULT_MAPPING,
) -> bool:
    """Exactly `height` ranks, each covering exactly `width` files."""
    if board_fen == START_KEYWORD:
        return dimensions == STANDARD_DIMENSIONS

    rank_fens = board_fen.split(RANK_SEPARATOR)
    if len(rank_fens) != dimensions.height:
        return False
    return all(_is_valid_rank(rank_fen, dimensions.width, mapping) for rank_fen in rank_fens)


def _is_valid_rank(rank_fen: str, width: int, mapping: Mapping) -> bool:
    file_count = 0
    empty_run = ""
    after_piece = False
    after_prefix = False

    for character in rank_fen:
        if character.isascii() and character.isdigit():
            if after_prefix:
                return False
            empty_run += character
            after_piece = False
            continue

        # flush the run of empty squares
        if empty_run:
            if int(empty_run) == 0:
                return False
            file_count += int(empty_run)
            empty_run = ""

        if character == PROMOTION_PREFIX:
            if after_prefix:
                return False
            after_prefix = True
            after_piece = False
        elif character == PROMOTION_SUFFIX:
            # only directly behind a piece, and only once
            if not after_piece:
                return False
            after_piece = False
        elif is_known_letter(character, mapping):
            file_count += 1
            after_piece = True
            after_prefix = False
        else:
            # immediately invalidate if the character is anything else
            return False

    if after_prefix:
        return False
    if empty_run:
        if int(empty_run) == 0:
            return False
        file_count += int(empty_run)
    return file_count == width


def is_valid_pocket(pocket_fen: str, mapping: Mapping = DEFAULT_MAPPING) -> bool:
    return all(is_known_letter(character, mapping) for character in pocket_fen)


def is_valid_notation(
    notation: str,
    dimensions: BoardDimensions = STANDARD_DIMENSIONS,
    mapping: Mapping = DEFAULT_MAPPING,
) -> bool:
    """Check the placement field: a well sized board, and a pocket (if any) made of known letters only."""
    placement = notation.split(FIELD_SEPARATOR)[0]
    if not placement:
        return False
    if POCKET_OPEN in placement and not placement.endswith(POCKET_CLOSE):
        return False
    if placement.count(POCKET_OPEN) > 1 or placement.count(POCKET_CLOSE) > 1:
        return False
    if POCKET_OPEN not in placement and placement.count(RANK_SEPARATOR) > dimensions.height:
        # more than one extra rank: the last ones would be silently dropped
        return False

    board_fen, pocket_fen = split_placement(notation, dimensions)
    if not is_valid_board(board_fen, dimensions, mapping):
        return False
    return pocket_fen is None or is_valid_pocket(pocket_fen, mapping)


def is_within_board(state: BoardState, dimensions: BoardDimensions) -> bool:
    """All pieces stand on the board (the reader itself places pieces beyond the edges without complaint)."""
    return all(square.is_within(dimensions) for square in state.pieces)
