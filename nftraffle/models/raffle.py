"""Database model for persisted raffle headers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    DateTime,
    Integer,
    LargeBinary,
    UniqueConstraint,
    select,
)
from sqlalchemy.orm import Mapped, Session, mapped_column

from .base import Base

# ``size`` and ``length`` are signed BIGINT columns.
MAX_RAFFLE_SIZE = 2**63 - 1


class Raffle(Base):
    """Header of a draw pool: its storage namespace and remaining length.

    The slot values themselves live in :class:`StorageEntry` rows keyed by
    ``prefix``; this row only carries what the pool needs between calls.
    """

    __tablename__ = "raffles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    """Primary key."""

    prefix: Mapped[bytes] = mapped_column(LargeBinary(64), nullable=False)
    """Storage key prefix owned exclusively by this raffle."""

    size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    """Number of values the pool started with."""

    length: Mapped[int] = mapped_column(BigInteger, nullable=False)
    """Number of values still available to draw."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    """Timestamp when the raffle was created."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
    """Timestamp bumped whenever a draw changes the length."""

    __table_args__ = (
        UniqueConstraint("prefix", name="raffles_prefix_key"),
        CheckConstraint("length >= 0 AND length <= size", name="length_range"),
    )

    def __init__(
        self,
        *,
        prefix: bytes,
        size: int,
        length: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        self.prefix = prefix
        self.size = size
        self.length = size if length is None else length
        if created_at is not None:
            self.created_at = created_at
        if updated_at is not None:
            self.updated_at = updated_at

    def __repr__(self) -> str:  # pragma: no cover - repr is trivial
        return "<Raffle(id={id}, prefix={prefix}, length={length}/{size})>".format(
            id=self.id,
            prefix=self.prefix.hex(),
            length=self.length,
            size=self.size,
        )

    @property
    def drawn_count(self) -> int:
        """Number of values drawn so far."""
        return self.size - self.length

    @classmethod
    def get_by_prefix(cls, session: Session, prefix: bytes) -> Optional["Raffle"]:
        """Return the raffle owning ``prefix`` if it exists."""

        return session.scalar(select(cls).where(cls.prefix == prefix))
