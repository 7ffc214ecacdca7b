"""Implementation of (Position)Repository using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import PositionModel
from src.db.schema import DBPosition


class SQLPositionRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_position(self, position_id: UUID) -> PositionModel | None:
        """Get position by ID, if record exists."""
        position_db = self._fetch_position(position_id)
        if position_db:
            return self._to_model(position_db)
        return None

    def create_position(self, position: PositionModel) -> tuple[PositionModel, UUID]:
        """Store new position and return the stored data + newly created position ID."""
        new_id = uuid4()
        position_db = DBPosition(
            id=new_id,
            name=position.name,
            variant=position.variant,
            notation=position.notation,
        )
        self.db.add(position_db)
        self.db.commit()
        self.db.refresh(position_db)
        return self._to_model(position_db), new_id

    def delete_position(self, position_id: UUID) -> PositionModel | None:
        """Remove a position's record."""
        position_db = self._fetch_position(position_id)
        if not position_db:
            return None
        position_model = self._to_model(position_db)
        self.db.delete(position_db)
        self.db.commit()
        return position_model

    def _fetch_position(self, position_id: UUID) -> DBPosition | None:
        query = select(DBPosition).where(DBPosition.id == position_id)
        return self.db.scalar(query)

    def _to_model(self, position_db: DBPosition) -> PositionModel:
        """Convert SQLAlchemy model to data transfer model."""
        return PositionModel(
            name=position_db.name,
            variant=position_db.variant,
            notation=position_db.notation,
        )
