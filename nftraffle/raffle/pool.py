"""Sparse draw-without-replacement pool over a key-value store."""

from __future__ import annotations

import logging
from typing import Optional

from .codec import U64_MAX, decode_u64, encode_u64, slot_key
from .errors import EmptyPoolError, OutOfRangeError
from .randomness import RandomnessSource, SecretsRandomness, random_u32, reduce_to_index
from ..storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class DrawPool:
    """A pool holding the values ``0..length`` that are drawn without replacement.

    The pool behaves like an array ``A`` where ``A[i]`` is whatever is stored
    under ``key_prefix + u64_le(i)``, or ``i`` itself when no entry exists.
    A fresh pool therefore needs no storage at all. Removing a slot moves the
    last slot's value into the hole, so every removal touches at most the
    removed slot and the last slot, and no entry is ever written whose value
    equals its own index.

    Parameters
    ----------
    store : KeyValueStore
        Backing storage. The pool owns every key beginning with ``key_prefix``.
    key_prefix : bytes
        Namespace separating this pool from other state in ``store``.
    length : int
        Number of values currently in the pool.
    randomness : Optional[RandomnessSource], default: None
        Source of seed bytes for :meth:`draw`. Defaults to
        :class:`SecretsRandomness`.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key_prefix: bytes,
        length: int,
        *,
        randomness: Optional[RandomnessSource] = None,
    ) -> None:
        if not isinstance(key_prefix, (bytes, bytearray)):
            raise TypeError("key_prefix must be bytes")
        if not 0 <= length <= U64_MAX:
            raise ValueError("length must be a non-negative 64-bit integer")
        self._store = store
        self._prefix = bytes(key_prefix)
        self._length = length
        self._randomness = randomness or SecretsRandomness()

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"<DrawPool(prefix={self._prefix.hex()}, length={self._length})>"

    @property
    def length(self) -> int:
        return self._length

    @property
    def key_prefix(self) -> bytes:
        return self._prefix

    def is_empty(self) -> bool:
        return self._length == 0

    def _key(self, index: int) -> bytes:
        return slot_key(self._prefix, index)

    def _read_slot(self, index: int) -> int:
        raw = self._store.get(self._key(index))
        return index if raw is None else decode_u64(raw)

    def _take_slot(self, index: int) -> int:
        # Read and delete in one call; a missing entry means the identity value.
        raw = self._store.delete(self._key(index))
        return index if raw is None else decode_u64(raw)

    def peek(self, index: int) -> int:
        """Return the value at slot ``index`` without changing anything."""
        if index < 0 or index >= self._length:
            raise OutOfRangeError(index, self._length)
        return self._read_slot(index)

    def remove_at(self, index: int) -> int:
        """Remove the value at slot ``index`` and return it.

        The last slot is simply popped. Any other slot receives the last
        slot's value; the write is skipped when that value equals ``index``
        because an absent entry already reads as ``index``. In that case the
        old entry at ``index`` is deleted instead.

        Raises
        ------
        OutOfRangeError
            If ``index`` is not below the current length. Nothing is mutated.
        """
        if index < 0 or index >= self._length:
            raise OutOfRangeError(index, self._length)

        last = self._length - 1
        if index == last:
            value = self._take_slot(last)
            self._length = last
            logger.debug(f"Popped last slot {last} of pool {self._prefix.hex()}")
            return value

        moved = self._take_slot(last)
        self._length = last
        key = self._key(index)
        if moved != index:
            previous = self._store.set(key, encode_u64(moved))
            removed = index if previous is None else decode_u64(previous)
        else:
            # Writing ``index`` at ``index`` would only restate the default;
            # drop any stale entry instead.
            previous = self._store.delete(key)
            removed = index if previous is None else decode_u64(previous)
        logger.debug(
            f"Moved slot {last} into slot {index} of pool {self._prefix.hex()}"
        )
        return removed

    def draw(self) -> int:
        """Remove and return a random value from the pool.

        The slot is ``random_u32(seed) % length``, which carries a small
        modulo bias when ``length`` does not divide 2**32.

        Raises
        ------
        EmptyPoolError
            If the pool has no values left.
        """
        if self._length == 0:
            raise EmptyPoolError()
        seed = self._randomness.random_seed()
        index = reduce_to_index(random_u32(seed), self._length)
        return self.remove_at(index)

    def draw_many(self, num: int) -> list[int]:
        """Draw ``num`` values, or none at all if fewer than ``num`` remain."""
        if num < 0:
            raise ValueError("num must not be negative")
        if num > self._length:
            raise EmptyPoolError(num, self._length)
        return [self.draw() for _ in range(num)]


__all__ = ["DrawPool"]
