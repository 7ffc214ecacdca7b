"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, NonNegativeInt, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color
from src.notation.pieces import (
    INTERNAL_LETTERS,
    BoardState,
    Piece,
    Pockets,
    Role,
)
from src.notation.square import Square
from src.notation.variants import VARIANTS

RoleName = str
SquareName = str


def _validate_variant(value: str) -> str:
    if value not in VARIANTS:
        raise InvalidRequestError(
            f"Unknown variant {value!r}, choose from {sorted(VARIANTS)}."
        )
    return value


def _is_algebraic_notation(value: str) -> bool:
    """file letter followed by a (possibly multi digit) rank number, starting at 1"""
    file_char, rank_chars = value[:1], value[1:]
    if not (file_char and file_char in INTERNAL_LETTERS):
        return False
    if not (rank_chars.isascii() and rank_chars.isdigit()):
        return False
    # no zero padding: "a01" would silently land on the same square as "a1"
    return not rank_chars.startswith("0")


def _validate_role(value: str) -> str:
    role = Role.from_letter(value)
    if not (role.is_wildcard or (len(role.letter) == 1 and role.letter in INTERNAL_LETTERS)):
        raise InvalidRequestError(f"Cannot interpret {value!r} as a role.")
    return value


# --- SHARED MODELS ---
class PieceModel(BaseModel):
    """A piece with its role written as the internal letter ('a', 'b', ...), '+' prefixed for promoted kinds."""

    role: RoleName
    color: Color
    promoted: bool = False

    @field_validator("role")
    @classmethod
    def validate_role(cls, value: str) -> str:
        return _validate_role(value)

    @classmethod
    def from_piece(cls, piece: Piece) -> Self:
        return cls(role=piece.role.to_letter(), color=piece.color, promoted=piece.promoted)

    def to_piece(self) -> Piece:
        return Piece(Role.from_letter(self.role), self.color, self.promoted)


class BoardStateModel(BaseModel):
    """JSON friendly BoardState: squares in algebraic notation, pockets as role -> count per color."""

    pieces: dict[SquareName, PieceModel]
    pockets: Optional[dict[Color, dict[RoleName, NonNegativeInt]]] = None

    @field_validator("pieces")
    @classmethod
    def validate_squares(cls, value: dict[str, PieceModel]) -> dict[str, PieceModel]:
        for square in value:
            if not _is_algebraic_notation(square):
                raise InvalidRequestError(
                    f"Cannot interpret {square!r} as a valid square name."
                )
        return value

    @field_validator("pockets")
    @classmethod
    def validate_pocket_roles(
        cls, value: Optional[dict[Color, dict[str, int]]]
    ) -> Optional[dict[Color, dict[str, int]]]:
        if value is None:
            return value
        for pocket in value.values():
            for role in pocket:
                _validate_role(role)
        return value

    @classmethod
    def from_state(cls, state: BoardState) -> Self:
        pockets = None
        if state.pockets is not None:
            pockets = {
                color: {
                    role.to_letter(): count
                    for role, count in state.pockets.of(color).items()
                }
                for color in Color
            }
        return cls(
            pieces={
                square.to_algebraic(): PieceModel.from_piece(piece)
                for square, piece in state.pieces.items()
            },
            pockets=pockets,
        )

    def to_state(self) -> BoardState:
        pockets = None
        if self.pockets is not None:
            white, black = (
                {
                    Role.from_letter(role): count
                    for role, count in self.pockets.get(color, {}).items()
                }
                for color in (Color.WHITE, Color.BLACK)
            )
            pockets = Pockets(white=white, black=black)
        return BoardState(
            pieces={
                Square.from_algebraic(square): piece.to_piece()
                for square, piece in self.pieces.items()
            },
            pockets=pockets,
        )


# --- REQUEST MODELS ---
class ParseRequest(BaseModel):
    notation: str
    variant: str = "standard"

    @field_validator("notation")
    @classmethod
    def validate_notation(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Notation must not be empty.")
        return value

    @field_validator("variant")
    @classmethod
    def validate_variant(cls, value: str) -> str:
        return _validate_variant(value)


class RenderRequest(BaseModel):
    state: BoardStateModel
    variant: str = "standard"

    @field_validator("variant")
    @classmethod
    def validate_variant(cls, value: str) -> str:
        return _validate_variant(value)


class StorePositionRequest(ParseRequest):
    name: str


class GetPositionRequest(BaseModel):
    position_id: UUID


class DeletePositionRequest(BaseModel):
    position_id: UUID


# --- RESPONSE MODELS ---
class PositionResponse(BaseModel):
    position_id: UUID
    name: str
    variant: str
    notation: str
    state: BoardStateModel
