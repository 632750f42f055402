import logging
from typing import TYPE_CHECKING, Optional

from sqlalchemy.orm import Session

from .models import Raffle
from .models.raffle import MAX_RAFFLE_SIZE
from .raffle.pool import DrawPool
from .storage.sql import SqlKeyValueStore

if TYPE_CHECKING:
    from .raffle.randomness import RandomnessSource

logger = logging.getLogger(__name__)


def create_raffle(session: Session, prefix: bytes, size: int) -> Raffle:
    """Persist a new raffle holding the token ids ``0..size``.

    No storage entries are written: a fresh pool reads every slot as its own
    index.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session.
    prefix : bytes
        Storage namespace for the raffle. Must not be used by another raffle.
    size : int
        Number of token ids available to draw.

    Returns
    -------
    Raffle
        The persisted raffle header with a populated ``id``.
    """
    if not prefix:
        raise ValueError("A raffle needs a non-empty storage prefix.")
    if size < 0:
        raise ValueError("Raffle size must not be negative.")
    if size > MAX_RAFFLE_SIZE:
        raise ValueError(
            f"Raffle size {size} exceeds the storable maximum of {MAX_RAFFLE_SIZE}."
        )
    if Raffle.get_by_prefix(session, prefix) is not None:
        raise ValueError(f"Storage prefix {prefix.hex()} is already owned by a raffle.")

    raffle = Raffle(prefix=prefix, size=size)
    session.add(raffle)
    session.flush()
    logger.info(f"Created raffle {raffle.id} with {size} token ids")
    return raffle


def open_draw_pool(
    session: Session,
    raffle: Raffle,
    randomness: Optional["RandomnessSource"] = None,
) -> DrawPool:
    """Return a :class:`DrawPool` over ``raffle``'s persisted storage.

    The pool's length is a snapshot of ``raffle.length``; callers that draw
    must write it back (see :func:`draw_token_ids`).
    """
    return DrawPool(
        SqlKeyValueStore(session),
        raffle.prefix,
        raffle.length,
        randomness=randomness,
    )


def _require_raffle(session: Session, prefix: bytes) -> Raffle:
    raffle = Raffle.get_by_prefix(session, prefix)
    if raffle is None:
        raise LookupError(f"No raffle owns storage prefix {prefix.hex()}")
    return raffle


def draw_token_ids(
    session: Session,
    prefix: bytes,
    num: int = 1,
    randomness: Optional["RandomnessSource"] = None,
) -> list[str]:
    """Draw ``num`` token ids from the raffle owning ``prefix``.

    This function performs the following steps:
    1. Loads the raffle header.
    2. Draws ``num`` values through a :class:`DrawPool`; nothing is drawn if
       fewer than ``num`` remain.
    3. Writes the new length back to the header and flushes.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session. Committing is left to the caller.
    prefix : bytes
        Storage prefix identifying the raffle.
    num : int, default: 1
        Number of token ids to draw.
    randomness : Optional[RandomnessSource], default: None
        Seed source for the draws, e.g. a
        :class:`~nftraffle.blockchain.api.ChainRandomnessClient`. The local
        CSPRNG is used when omitted.

    Returns
    -------
    list[str]
        Drawn token ids as decimal strings, in draw order.

    Raises
    ------
    LookupError
        If no raffle owns ``prefix``.
    EmptyPoolError
        If fewer than ``num`` token ids are left.
    """
    raffle = _require_raffle(session, prefix)
    pool = open_draw_pool(session, raffle, randomness=randomness)

    drawn = pool.draw_many(num)

    raffle.length = pool.length
    session.flush()

    token_ids = [str(value) for value in drawn]
    logger.info(
        f"Drew {len(token_ids)} token ids from raffle {raffle.id}: "
        f"{', '.join(token_ids)} ({raffle.length} left)"
    )
    return token_ids


def tokens_left(session: Session, prefix: bytes) -> int:
    """Return how many token ids the raffle owning ``prefix`` can still draw."""
    return _require_raffle(session, prefix).length
