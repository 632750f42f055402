"""Draw-without-replacement pools and their supporting helpers."""

from .codec import decode_u64, encode_u64, slot_key
from .errors import EmptyPoolError, OutOfRangeError, RaffleError
from .pool import DrawPool
from .randomness import (
    RandomnessSource,
    SecretsRandomness,
    random_u32,
    reduce_to_index,
)

__all__ = [
    "DrawPool",
    "EmptyPoolError",
    "OutOfRangeError",
    "RaffleError",
    "RandomnessSource",
    "SecretsRandomness",
    "decode_u64",
    "encode_u64",
    "random_u32",
    "reduce_to_index",
    "slot_key",
]
