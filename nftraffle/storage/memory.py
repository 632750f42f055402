"""Dictionary-backed store that meters the mutations it performs."""

from __future__ import annotations

from typing import Dict, Iterator, Optional


class MemoryStore:
    """In-memory :class:`~nftraffle.storage.base.KeyValueStore`.

    ``writes`` and ``deletes`` count the mutations that actually changed the
    store, so a delete of a missing key is free. ``storage_usage`` mirrors the
    byte-metered storage of the contract runtime the pool was designed for.
    """

    def __init__(self) -> None:
        self._data: Dict[bytes, bytes] = {}
        self.writes = 0
        self.deletes = 0

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: bytes) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: bytes, value: bytes) -> Optional[bytes]:
        previous = self._data.get(key)
        self._data[key] = bytes(value)
        self.writes += 1
        return previous

    def delete(self, key: bytes) -> Optional[bytes]:
        previous = self._data.pop(key, None)
        if previous is not None:
            self.deletes += 1
        return previous

    def keys_with_prefix(self, prefix: bytes) -> Iterator[bytes]:
        """Yield the slot keys of the pool at ``prefix`` (prefix plus 8 bytes)."""
        size = len(prefix) + 8
        return (
            key for key in self._data if len(key) == size and key.startswith(prefix)
        )

    def storage_usage(self) -> int:
        """Total bytes held by live keys and values."""
        return sum(len(key) + len(value) for key, value in self._data.items())

    @property
    def mutations(self) -> int:
        return self.writes + self.deletes


__all__ = ["MemoryStore"]
