import os
import logging
from urllib.parse import urljoin
from dotenv import load_dotenv
from .utils import open_session, parse_seed
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ChainRandomnessClient:
    """Randomness source that asks a remote beacon for a fresh seed per call.

    Satisfies :class:`~nftraffle.raffle.randomness.RandomnessSource`, so it can
    be handed straight to a :class:`~nftraffle.raffle.pool.DrawPool`. Seeds
    are never cached and there is no local fallback: if the beacon fails the
    draw fails.
    """

    seed_path = "/api/v1/random-seed"

    def __init__(self, base_fqdn: Optional[str] = None, timeout: int = 45):
        load_dotenv()
        fqdn = base_fqdn or os.getenv("RANDOMNESS_BASE_FQDN")
        if not fqdn:
            raise ValueError("Environment variable 'RANDOMNESS_BASE_FQDN' is not set")

        self.base_url = f"https://{fqdn}".rstrip("/")
        self.session = open_session()
        self.timeout = timeout

    # -------- core request --------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict] = None,
    ) -> Any:
        url = urljoin(self.base_url + "/", path.lstrip("/"))
        r = self.session.request(
            method=method.upper(),
            url=url,
            params=params,
            timeout=self.timeout,
        )
        r.raise_for_status()
        return r.json() if r.content else None

    # -------- API callers --------
    def random_seed(self) -> bytes:
        seed = parse_seed(self._request("GET", self.seed_path))
        if len(seed) < 4:
            raise RuntimeError(
                f"Randomness beacon returned {len(seed)} bytes, need at least 4"
            )
        logger.debug(f"Fetched {len(seed)} seed bytes from randomness beacon")
        return seed
