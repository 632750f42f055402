import os
import logging
import requests
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Ensure environment variables from .env are loaded when this module is imported.
load_dotenv()


def open_session() -> requests.Session:
    """Open a requests session configured for the randomness beacon.

    When ``RANDOMNESS_API_KEY`` is set it is attached as a bearer token to
    every request made through the session.

    Returns
    -------
    requests.Session
        The initialized session.
    """
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})

    api_key = os.environ.get("RANDOMNESS_API_KEY")
    if api_key:
        session.headers["Authorization"] = f"Bearer {api_key}"
        # Never log the key itself
        logger.debug("Randomness beacon API key configured")
    else:
        logger.debug("No randomness beacon API key configured")
    return session


def parse_seed(payload: object) -> bytes:
    """Extract the seed bytes from a beacon response payload.

    Raises
    ------
    RuntimeError
        If the payload has no ``random_seed`` field or it is not valid hex.
    """
    if not isinstance(payload, dict) or "random_seed" not in payload:
        raise RuntimeError(f"Unexpected randomness beacon response: {payload!r}")
    try:
        return bytes.fromhex(payload["random_seed"])
    except (TypeError, ValueError) as e:
        raise RuntimeError(f"Malformed random_seed in beacon response: {e}") from e
