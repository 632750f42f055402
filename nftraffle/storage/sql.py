"""Key-value store persisted through a SQLAlchemy session."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models import StorageEntry


class SqlKeyValueStore:
    """:class:`~nftraffle.storage.base.KeyValueStore` over ``storage_entries``.

    Every mutation is flushed immediately so later reads in the same
    transaction see it. Committing or rolling back is left to whoever owns
    the session.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session used for lookups and persistence.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, key: bytes) -> Optional[bytes]:
        entry = self._session.get(StorageEntry, key)
        return None if entry is None else entry.value

    def set(self, key: bytes, value: bytes) -> Optional[bytes]:
        entry = self._session.get(StorageEntry, key)
        if entry is None:
            self._session.add(StorageEntry(key=key, value=value))
            previous = None
        else:
            previous = entry.value
            entry.value = value
        self._session.flush()
        return previous

    def delete(self, key: bytes) -> Optional[bytes]:
        entry = self._session.get(StorageEntry, key)
        if entry is None:
            return None
        previous = entry.value
        self._session.delete(entry)
        self._session.flush()
        return previous

    def count_with_prefix(self, prefix: bytes) -> int:
        """Return how many live slot entries belong to the pool at ``prefix``.

        Slot keys are exactly ``prefix`` plus eight index bytes, so keys of a
        pool whose prefix merely starts with ``prefix`` are not counted.
        """
        # LargeBinary has no portable startswith, so bound the range instead.
        stmt = select(func.count()).select_from(StorageEntry).where(
            StorageEntry.key >= prefix,
            StorageEntry.key <= prefix + b"\xff" * 8,
            func.length(StorageEntry.key) == len(prefix) + 8,
        )
        return int(self._session.scalar(stmt) or 0)


__all__ = ["SqlKeyValueStore"]
