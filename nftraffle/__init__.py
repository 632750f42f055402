"""Write-minimal draw-without-replacement pools over sparse key-value storage."""

from .raffle import DrawPool, EmptyPoolError, OutOfRangeError, RaffleError

__all__ = ["DrawPool", "EmptyPoolError", "OutOfRangeError", "RaffleError"]
