"""Exceptions raised by draw pools."""


class RaffleError(Exception):
    """Base class for draw pool failures."""


class OutOfRangeError(RaffleError, IndexError):
    """An index at or beyond the pool's current length was requested."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of bounds for pool of length {length}")
        self.index = index
        self.length = length


class EmptyPoolError(RaffleError):
    """A draw was requested but not enough values remain in the pool."""

    def __init__(self, requested: int = 1, available: int = 0) -> None:
        if requested == 1:
            message = "Cannot draw from an empty pool"
        else:
            message = f"Cannot draw {requested} values when {available} are left"
        super().__init__(message)
        self.requested = requested
        self.available = available


__all__ = ["EmptyPoolError", "OutOfRangeError", "RaffleError"]
