"""Orchestration of communication from API layer to the notation codec and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from sqlalchemy.orm import Session

from src.api.models import (
    BoardStateModel,
    DeletePositionRequest,
    GetPositionRequest,
    ParseRequest,
    PositionResponse,
    RenderRequest,
    StorePositionRequest,
)
from src.core.exceptions import InvalidRequestError, RepositoryError
from src.core.models import PositionModel
from src.db.repository import PositionRepository
from src.db.sql_repository import SQLPositionRepository
from src.notation.pieces import BoardState
from src.notation.validation import is_within_board
from src.notation.variants import VariantConfig, get_variant

logger = logging.getLogger(__name__)


class NotationService:
    """Orchestration of layers for reading, writing and storing positions."""

    def __init__(self, repository: PositionRepository) -> None:
        self.repo = repository

    # -- Codec --
    def parse(self, request: ParseRequest) -> BoardStateModel:
        """Notation -> board state, using the board size and alphabet of the requested variant."""
        variant = get_variant(request.variant)
        state = self._read_on_board(variant, request.notation)
        return BoardStateModel.from_state(state)

    def render(self, request: RenderRequest) -> str:
        """Board state -> canonical notation."""
        variant = get_variant(request.variant)
        return variant.write(request.state.to_state())

    # -- Stored positions --
    def store_position(self, request: StorePositionRequest) -> PositionResponse:
        """
        Store a position under a name.
        ----
        The notation is parsed and written back before storing, so the stored string is always canonical
        (and a notation with unknown piece letters or pieces off the board never reaches the repository).
        """
        variant = get_variant(request.variant)
        canonical = variant.write(self._read_on_board(variant, request.notation))
        stored, position_id = self.repo.create_position(
            PositionModel(name=request.name, variant=variant.name, notation=canonical)
        )
        logger.info("Stored position %r (%s) as %s", stored.name, stored.variant, position_id)
        return self._create_position_response(position_id, stored)

    def get_position(self, request: GetPositionRequest) -> PositionResponse:
        stored = self._fetch_position(request.position_id)
        return self._create_position_response(request.position_id, stored)

    def delete_position(self, request: DeletePositionRequest) -> None:
        """Handle a request to delete a Position record."""
        if self.repo.delete_position(request.position_id) is None:
            logger.warning("Nothing to delete for position %s", request.position_id)
            return
        logger.info("Deleted position %s", request.position_id)

    # -- Internal helpers --
    def _read_on_board(self, variant: VariantConfig, notation: str) -> BoardState:
        """The codec places pieces beyond the edges without complaint; squares off the board have no name to send back."""
        state = variant.read(notation)
        if not is_within_board(state, variant.dimensions):
            raise InvalidRequestError(
                f"Notation {notation!r} places pieces outside the {variant.dimensions.width}x{variant.dimensions.height} board of {variant.name!r}."
            )
        return state

    def _create_position_response(
        self, position_id: UUID, model: PositionModel
    ) -> PositionResponse:
        """Convert info in PositionModel to a PositionResponse, board state included."""
        state = self._read_on_board(get_variant(model.variant), model.notation)
        return PositionResponse(
            position_id=position_id,
            name=model.name,
            variant=model.variant,
            notation=model.notation,
            state=BoardStateModel.from_state(state),
        )

    def _fetch_position(self, position_id: UUID) -> PositionModel:
        """Attempt to find the position in the repository and raise error if it fails."""
        position_model = self.repo.get_position(position_id)
        if position_model is None:
            logger.warning("Position %s not found", position_id)
            raise RepositoryError(f"Position with {position_id=} not found.")
        return position_model


def create_notation_service(db_session: Session) -> NotationService:
    """Service backed by the SQL repository, for a session from `src.db.database.get_db`."""
    return NotationService(SQLPositionRepository(db_session))
