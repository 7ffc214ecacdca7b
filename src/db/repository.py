"""Protocol repository (implemented with SQL Alchemy, could later be anything that stores strings)"""

from typing import Protocol
from uuid import UUID

from src.core.models import PositionModel


class PositionRepository(Protocol):
    """Persistence layer orchestration"""

    def get_position(self, position_id: UUID) -> PositionModel | None:
        """Get position by ID, if record exists."""
        ...

    def create_position(self, position: PositionModel) -> tuple[PositionModel, UUID]:
        """Store new position and return the stored data + newly created position ID."""
        ...

    def delete_position(self, position_id: UUID) -> PositionModel | None:
        """Remove a position's record."""
        ...
