"""
Game variants: the board size, piece alphabet and starting placement that go together.

Rather than passing dimensions and mapping around separately, callers can look a variant up by name
and let it bind both for them.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, field_validator

from src.core.exceptions import UnknownVariantError
from src.notation.board import INITIAL_PLACEMENT
from src.notation.fen import read, write
from src.notation.mapping import DEFAULT_MAPPING, Mapping
from src.notation.pieces import BoardState
from src.notation.square import STANDARD_DIMENSIONS, BoardDimensions


class VariantConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    dimensions: BoardDimensions
    mapping: Mapping
    initial_placement: str

    @field_validator("dimensions")
    @classmethod
    def validate_dimensions(cls, value: BoardDimensions) -> BoardDimensions:
        if value.width < 1 or value.height < 1:
            raise ValueError(f"Board needs at least one file and one rank, got {value}.")
        return value

    @classmethod
    def from_json(cls, json_data: str | bytes) -> Self:
        """Load a variant definition, ex.
        {"name": "...", "dimensions": {"width": 5, "height": 5},
         "mapping": {"white_pieces": [...], "black_pieces": [...]}, "initial_placement": "..."}
        """
        return cls.model_validate_json(json_data)

    def read(self, notation: str) -> BoardState:
        return read(notation, self.dimensions, self.mapping)

    def write(self, state: BoardState) -> str:
        return write(state, self.dimensions, self.mapping)

    def initial_state(self) -> BoardState:
        return self.read(self.initial_placement)


STANDARD = VariantConfig(
    name="standard",
    dimensions=STANDARD_DIMENSIONS,
    mapping=DEFAULT_MAPPING,
    initial_placement=INITIAL_PLACEMENT,
)

# Same board and pieces as standard chess, but captured pieces go to the capturer's pocket
CRAZYHOUSE = VariantConfig(
    name="crazyhouse",
    dimensions=STANDARD_DIMENSIONS,
    mapping=DEFAULT_MAPPING,
    initial_placement=f"{INITIAL_PLACEMENT}[]",
)

# 5x5 shogi: king, gold, silver, bishop, rook, pawn. Promoted kinds are written "+S", "+B", "+R", "+P".
MINISHOGI = VariantConfig(
    name="minishogi",
    dimensions=BoardDimensions(5, 5),
    mapping=Mapping(
        white_pieces=("K", "G", "S", "B", "R", "P"),
        black_pieces=("k", "g", "s", "b", "r", "p"),
    ),
    initial_placement="rbsgk/4p/5/P4/KGSBR[]",
)

VARIANTS: dict[str, VariantConfig] = {
    variant.name: variant for variant in (STANDARD, CRAZYHOUSE, MINISHOGI)
}


def get_variant(name: str) -> VariantConfig:
    try:
        return VARIANTS[name]
    except KeyError:
        raise UnknownVariantError(f"No variant named {name!r}.") from None
