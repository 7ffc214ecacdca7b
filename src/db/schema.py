"""Database tables / schema"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBPosition(Base):
    """A named position. Only its notation string is stored, the board state is rebuilt from it on demand."""

    __tablename__ = "positions"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    name: Mapped[str]
    variant: Mapped[str]
    notation: Mapped[str]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
