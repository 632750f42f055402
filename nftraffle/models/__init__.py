from .base import Base

# import models so create_all() can discover mappers
from .storage import StorageEntry  # noqa: F401
from .raffle import Raffle  # noqa: F401

__all__ = [
    "Base",
    "StorageEntry",
    "Raffle",
]
