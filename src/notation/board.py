"""
Board part of the placement field: ranks separated by slashes, top rank first.

ex) the standard starting position
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
* letters are pieces, resolved through the alphabet mapping (here: capitals are white, lower case black)
* numbers are runs of empty squares, and may take more than one digit on wide boards ("10" is ten empty squares)
* a '+' in front of a letter makes it the promoted kind of that piece ("+p")
* a '~' behind a letter marks the piece right before it as promoted, without changing its kind ("Q~")
"""

import logging
import re
from string import digits

from src.notation.mapping import Mapping, resolve_external, resolve_internal
from src.notation.pieces import (
    PROMOTION_PREFIX,
    PROMOTION_SUFFIX,
    Piece,
    Pieces,
    Role,
)
from src.notation.square import BoardDimensions, Square

logger = logging.getLogger(__name__)

INITIAL_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
# Shorthand accepted in place of a board: the standard starting position
START_KEYWORD = "start"

RANK_SEPARATOR = "/"
FIELD_SEPARATOR = " "
POCKET_OPEN = "["
POCKET_CLOSE = "]"
EMPTY_SQUARE = "1"

_EMPTY_RUN = re.compile(f"{EMPTY_SQUARE}{{2,}}")


def read_board(board_fen: str, mapping: Mapping) -> Pieces:
    """
    Scan the board part of a placement field into a mapping of square -> piece.
    ----

    Rows are counted from the number of separators in the text, so the top rank gets the highest index.
    Nothing is checked against the board's dimensions: a rank that is too long simply places pieces beyond the last file.
    """
    if board_fen == START_KEYWORD:
        board_fen = INITIAL_PLACEMENT

    pieces: Pieces = {}
    row = board_fen.count(RANK_SEPARATOR)
    col = 0
    empty_run = 0
    promote_next = False

    for character in board_fen:
        if character in (FIELD_SEPARATOR, POCKET_OPEN):
            break
        if character == RANK_SEPARATOR:
            row -= 1
            if row < 0:
                break
            col = 0
            empty_run = 0
        elif character == PROMOTION_PREFIX:
            promote_next = True
        elif character == PROMOTION_SUFFIX:
            # applies to the piece placed just before, if any
            previous = Square(col - 1, row)
            if previous in pieces:
                pieces[previous] = pieces[previous].mark_promoted()
        elif character in digits:
            empty_run = 10 * empty_run + int(character)
        else:
            col += empty_run
            empty_run = 0
            letter, color = resolve_external(character, mapping)
            piece = Piece(Role(letter), color)
            if promote_next:
                piece = Piece(piece.role.promote(), color, promoted=True)
                promote_next = False
            pieces[Square(col, row)] = piece
            col += 1

    logger.debug("Read %d pieces from board %r", len(pieces), board_fen)
    return pieces


def write_board(pieces: Pieces, dimensions: BoardDimensions, mapping: Mapping) -> str:
    """Ranks are separated by slashes, runs of empty squares are written as their length."""
    board_fen = RANK_SEPARATOR.join(
        "".join(
            _square_to_fen(pieces.get(Square(file, rank)), mapping)
            for file in dimensions.files()
        )
        for rank in dimensions.ranks()
    )
    # a single empty square is already written as "1"; only longer runs need collapsing
    return _EMPTY_RUN.sub(lambda run: str(len(run.group())), board_fen)


def _square_to_fen(piece: Piece | None, mapping: Mapping) -> str:
    if piece is None:
        return EMPTY_SQUARE
    letter = resolve_internal(piece.role, piece.color, mapping)
    if piece.promoted and not letter.startswith(PROMOTION_PREFIX):
        letter += PROMOTION_SUFFIX
    return letter
