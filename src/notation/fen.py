"""
Top level of the codec: the placement field of a FEN string <-> BoardState.
----

The placement field is the first space-separated part of a FEN string. Drop variants add the players' reserves to it,
in one of two ways:

* between brackets, after the board: "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR[Qn]"
* as one extra rank beyond the height of the board: "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR/Qn"

Brackets take precedence. When writing, brackets are always used.
Remaining FEN fields (color to move, castling, ...) are not part of the board state and are ignored.
"""

import logging
from typing import Optional

from src.notation.board import (
    FIELD_SEPARATOR,
    POCKET_CLOSE,
    POCKET_OPEN,
    RANK_SEPARATOR,
    read_board,
    write_board,
)
from src.notation.mapping import DEFAULT_MAPPING, Mapping
from src.notation.pieces import BoardState
from src.notation.pockets import read_pockets, write_pockets
from src.notation.square import STANDARD_DIMENSIONS, BoardDimensions

logger = logging.getLogger(__name__)


def split_placement(
    notation: str, dimensions: BoardDimensions
) -> tuple[str, Optional[str]]:
    """Split the placement field into its board part and (if any) its pocket part."""
    placement = notation.split(FIELD_SEPARATOR)[0]

    bracket_idx = placement.find(POCKET_OPEN)
    if bracket_idx > -1:
        board_fen = placement[:bracket_idx]
        # NOTE: a missing closing bracket is not checked for, the pocket then runs to the end of the field
        close_idx = placement.find(POCKET_CLOSE, bracket_idx)
        pocket_fen = placement[bracket_idx + 1 : close_idx if close_idx > -1 else None]
        return board_fen, pocket_fen

    ranks = placement.split(RANK_SEPARATOR)
    board_fen = RANK_SEPARATOR.join(ranks[: dimensions.height])
    # any rank after the pocket rank is dropped
    pocket_fen = ranks[dimensions.height] if len(ranks) > dimensions.height else None
    return board_fen, pocket_fen


def read(
    notation: str,
    dimensions: BoardDimensions = STANDARD_DIMENSIONS,
    mapping: Mapping = DEFAULT_MAPPING,
) -> BoardState:
    """Parse a FEN (placement field) into a BoardState. Unknown piece letters raise UnknownLetterError."""
    board_fen, pocket_fen = split_placement(notation, dimensions)
    logger.debug("Split %r into board %r and pocket %r", notation, board_fen, pocket_fen)
    return BoardState(
        pieces=read_board(board_fen, mapping),
        pockets=read_pockets(pocket_fen, mapping),
    )


def write(
    state: BoardState,
    dimensions: BoardDimensions = STANDARD_DIMENSIONS,
    mapping: Mapping = DEFAULT_MAPPING,
) -> str:
    """reverse operation: the canonical placement field for the given state"""
    return write_board(state.pieces, dimensions, mapping) + write_pockets(
        state.pockets, mapping
    )
