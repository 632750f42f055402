"""Randomness sources and the reduction from seed bytes to slot indices."""

from __future__ import annotations

import secrets
from typing import Protocol

SEED_LENGTH = 32


class RandomnessSource(Protocol):
    """Anything that yields fresh, unpredictable seed bytes on every call."""

    def random_seed(self) -> bytes:  # pragma: no cover - protocol
        ...


class SecretsRandomness:
    """Local randomness source backed by the operating system CSPRNG."""

    def __init__(self, seed_length: int = SEED_LENGTH) -> None:
        if seed_length < 4:
            raise ValueError("seed_length must be at least 4 bytes")
        self.seed_length = seed_length

    def random_seed(self) -> bytes:
        return secrets.token_bytes(self.seed_length)


def random_u32(seed: bytes, shift_amount: int = 0) -> int:
    """Derive an unsigned 32-bit integer from ``seed``.

    The seed is rotated left by ``shift_amount`` bytes (modulo its length) and
    the first four bytes are read as a little-endian integer. Rotating lets a
    caller take several distinct numbers out of a single seed.

    Parameters
    ----------
    seed : bytes
        Raw randomness, at least four bytes long.
    shift_amount : int, default: 0
        Number of bytes to rotate the seed by before reading.

    Raises
    ------
    ValueError
        If ``seed`` is shorter than four bytes.
    """
    if len(seed) < 4:
        raise ValueError(f"randomness source returned {len(seed)} bytes, need at least 4")
    shift = shift_amount % len(seed)
    rotated = seed[shift:] + seed[:shift]
    return int.from_bytes(rotated[:4], "little")


def reduce_to_index(value: int, length: int) -> int:
    """Map a random ``u32`` onto ``[0, length)`` by plain modulo.

    Modulo reduction is slightly biased towards low indices whenever
    ``length`` does not divide 2**32. The bias is accepted: the draw
    distribution must stay identical to the on-chain contract this pool
    mirrors, so it is not replaced by rejection sampling.
    """
    if length <= 0:
        raise ValueError("length must be positive")
    return value % length


__all__ = [
    "RandomnessSource",
    "SEED_LENGTH",
    "SecretsRandomness",
    "random_u32",
    "reduce_to_index",
]
