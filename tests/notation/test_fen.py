"""Unit tests for src/notation/fen.py"""

import pytest

from src.core.exceptions import UnknownLetterError
from src.core.shared_types import Color
from src.notation.board import INITIAL_PLACEMENT
from src.notation.fen import read, split_placement, write
from src.notation.mapping import DEFAULT_MAPPING, Mapping
from src.notation.pieces import BoardState, Piece, Pockets, Role
from src.notation.square import STANDARD_DIMENSIONS, BoardDimensions, Square

KING, QUEEN, ROOK, BISHOP, KNIGHT, PAWN = (Role(letter) for letter in "abcdef")
EMPTY_BOARD = "/".join(["8"] * 8)


# --- SPLITTING ---
@pytest.mark.parametrize(
    "notation, board, pocket",
    [
        (INITIAL_PLACEMENT, INITIAL_PLACEMENT, None),
        (f"{INITIAL_PLACEMENT} w KQkq - 0 1", INITIAL_PLACEMENT, None),
        (f"{INITIAL_PLACEMENT}[Qn]", INITIAL_PLACEMENT, "Qn"),
        (f"{INITIAL_PLACEMENT}[] b - - 0 1", INITIAL_PLACEMENT, ""),
        (f"{INITIAL_PLACEMENT}/Qn", INITIAL_PLACEMENT, "Qn"),
        (f"{INITIAL_PLACEMENT}/", INITIAL_PLACEMENT, ""),
        (f"{INITIAL_PLACEMENT}/Qn/ignored/too", INITIAL_PLACEMENT, "Qn"),
        ("4k3[Qn]", "4k3", "Qn"),
        ("4k3[Qn", "4k3", "Qn"),
    ],
)
def test_split_placement(notation: str, board: str, pocket: str | None) -> None:
    assert split_placement(notation, STANDARD_DIMENSIONS) == (board, pocket)


def test_brackets_take_precedence_over_extra_rank() -> None:
    notation = f"{INITIAL_PLACEMENT}/Rr[Qn]"
    assert split_placement(notation, STANDARD_DIMENSIONS) == (
        f"{INITIAL_PLACEMENT}/Rr",
        "Qn",
    )


def test_extra_rank_depends_on_height() -> None:
    """On a 3 rank board, the fourth rank is the pocket"""
    assert split_placement("3/3/3/Pp", BoardDimensions(3, 3)) == ("3/3/3", "Pp")


# --- READING ---
def test_read_empty_board() -> None:
    state = read(EMPTY_BOARD, STANDARD_DIMENSIONS, DEFAULT_MAPPING)
    assert state == BoardState(pieces={}, pockets=None)


def test_start_keyword_writes_initial_placement() -> None:
    state = read("start", STANDARD_DIMENSIONS, DEFAULT_MAPPING)
    assert write(state, STANDARD_DIMENSIONS, DEFAULT_MAPPING) == INITIAL_PLACEMENT


def test_defaults_are_standard_board_and_mapping() -> None:
    assert read("start") == read(INITIAL_PLACEMENT, STANDARD_DIMENSIONS, DEFAULT_MAPPING)


def test_read_bracketed_pockets() -> None:
    state = read("4k3[Qn]", STANDARD_DIMENSIONS, DEFAULT_MAPPING)
    assert state.pieces == {Square(4, 0): Piece(KING, Color.BLACK)}
    assert state.pockets == Pockets(white={QUEEN: 1}, black={KNIGHT: 1})


def test_write_bracketed_pockets() -> None:
    """The single rank ends up at the bottom of the eight rank board"""
    state = read("4k3[Qn]", STANDARD_DIMENSIONS, DEFAULT_MAPPING)
    assert write(state, STANDARD_DIMENSIONS, DEFAULT_MAPPING) == "8/8/8/8/8/8/8/4k3[Qn]"


def test_read_pocket_as_extra_rank() -> None:
    state = read(f"{INITIAL_PLACEMENT}/QQp", STANDARD_DIMENSIONS, DEFAULT_MAPPING)
    assert len(state.pieces) == 32
    assert state.pockets == Pockets(white={QUEEN: 2}, black={PAWN: 1})
    # always written back between brackets
    assert write(state) == f"{INITIAL_PLACEMENT}[QQp]"


def test_read_promoted_rook() -> None:
    state = read("r~6/8/8/8/8/8/8/8", STANDARD_DIMENSIONS, DEFAULT_MAPPING)
    assert state.pieces == {Square(0, 7): Piece(ROOK, Color.BLACK, promoted=True)}
    assert write(state) == "r~7/8/8/8/8/8/8/8"


def test_variant_mapping(two_role_mapping: Mapping) -> None:
    """Letters resolve through the given mapping, not through the default one"""
    state = read("gk6/8/8/8/8/8/8/8", STANDARD_DIMENSIONS, two_role_mapping)
    assert state.pieces == {
        Square(0, 7): Piece(Role("b"), Color.BLACK),
        Square(1, 7): Piece(Role("a"), Color.BLACK),
    }
    # under the default mapping, 'g' is not a piece at all
    with pytest.raises(UnknownLetterError):
        read("gk6/8/8/8/8/8/8/8", STANDARD_DIMENSIONS, DEFAULT_MAPPING)


def test_unknown_letter_in_pocket_aborts_read() -> None:
    with pytest.raises(UnknownLetterError):
        read(f"{INITIAL_PLACEMENT}[Qx]")


def test_large_board() -> None:
    """10x10 board with multi digit runs"""
    dimensions = BoardDimensions(10, 10)
    notation = "k9/10/10/10/10/10/10/10/10/9K"
    state = read(notation, dimensions, DEFAULT_MAPPING)
    assert state.pieces == {
        Square(0, 9): Piece(KING, Color.BLACK),
        Square(9, 0): Piece(KING, Color.WHITE),
    }
    assert write(state, dimensions, DEFAULT_MAPPING) == notation


# --- ROUNDTRIPS ---
@pytest.mark.parametrize(
    "notation",
    [
        "start",
        EMPTY_BOARD,
        "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1 b kq - 3 9",
        "4k3[Qn]",
        f"{INITIAL_PLACEMENT}/",
        "r~7/8/8/8/8/3+P4/8/4K3[RRnnnp]",
        "k7/8/8/8/8/8/8/7K/Qq",
    ],
)
def test_roundtrip_of_canonical_output(notation: str) -> None:
    """read(write(state)) == state, and writing again gives the same string"""
    state = read(notation)
    canonical = write(state)
    assert read(canonical) == state
    assert write(read(canonical)) == canonical


@pytest.mark.parametrize("notation", ["+P7/8/8/8/8/8/8/8", "P~7/8/8/8/8/8/8/8"])
def test_promotion_roundtrip(notation: str) -> None:
    """Both ways of writing a promoted piece survive a roundtrip"""
    state = read(notation)
    piece = state.pieces[Square(0, 7)]
    assert piece.promoted
    assert read(write(state)).pieces[Square(0, 7)] == piece


def test_prefix_and_suffix_promotion_differ_in_role() -> None:
    prefixed = read("+P7/8/8/8/8/8/8/8").pieces[Square(0, 7)]
    suffixed = read("P~7/8/8/8/8/8/8/8").pieces[Square(0, 7)]
    assert prefixed.role == PAWN.promote()
    assert suffixed.role == PAWN
