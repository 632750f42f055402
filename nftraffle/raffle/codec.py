"""Byte encodings for slot keys and slot values."""

from __future__ import annotations

import struct

_U64 = struct.Struct("<Q")
U64_MAX = (1 << 64) - 1


def encode_u64(value: int) -> bytes:
    """Return the 8-byte little-endian encoding of ``value``."""
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{value} does not fit in an unsigned 64-bit integer")
    return _U64.pack(value)


def decode_u64(raw: bytes) -> int:
    """Decode an 8-byte little-endian value read back from storage."""
    if len(raw) != _U64.size:
        raise ValueError(
            f"stored slot value must be {_U64.size} bytes, got {len(raw)}"
        )
    return _U64.unpack(raw)[0]


def slot_key(prefix: bytes, index: int) -> bytes:
    """Return the storage key for slot ``index`` under ``prefix``."""
    return prefix + encode_u64(index)


__all__ = ["U64_MAX", "decode_u64", "encode_u64", "slot_key"]
