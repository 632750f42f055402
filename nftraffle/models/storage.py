from sqlalchemy import LargeBinary
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class StorageEntry(Base):
    """A single opaque key/value pair in the shared raffle storage region.

    Keys are namespaced by the owning raffle's prefix, so several raffles can
    share the table without colliding. Only slots whose value differs from
    their own index ever get a row here.
    """

    __tablename__ = "storage_entries"

    key: Mapped[bytes] = mapped_column(LargeBinary(255), primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    def __repr__(self) -> str:
        return f"<StorageEntry(key={self.key.hex()}, value={self.value.hex()})>"
