"""Contract every backing store for a draw pool must satisfy."""

from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Byte-keyed storage with previous-value-returning mutations."""

    def get(self, key: bytes) -> Optional[bytes]:  # pragma: no cover - protocol
        """Return the value stored under ``key``, or ``None``."""
        ...

    def set(self, key: bytes, value: bytes) -> Optional[bytes]:  # pragma: no cover
        """Store ``value`` under ``key`` and return the value it replaced."""
        ...

    def delete(self, key: bytes) -> Optional[bytes]:  # pragma: no cover - protocol
        """Remove ``key`` and return the value it held, or ``None``."""
        ...


__all__ = ["KeyValueStore"]
