"""Backing stores for draw pools."""

from .base import KeyValueStore
from .memory import MemoryStore
from .sql import SqlKeyValueStore

__all__ = ["KeyValueStore", "MemoryStore", "SqlKeyValueStore"]
