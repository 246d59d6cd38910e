"""Status probe: round-trip a timestamped message through the cache."""

import logging
import time
from typing import Callable, Optional, Protocol

from britto.errors import CacheUnavailable

logger = logging.getLogger(__name__)

STATUS_KEY = "myMessage"


class CacheClient(Protocol):
    """The two cache operations the probe needs. Failures surface as CacheUnavailable."""

    def set(self, key: str, value: str) -> None:
        ...

    def get(self, key: str) -> Optional[str]:
        ...


def status_message(now_ms: int) -> str:
    return f"Hello World {now_ms}!\n"


def probe(cache: CacheClient, clock: Callable[[], float] = time.time) -> str:
    """Write the status message under STATUS_KEY, read it back and return what the cache returned."""
    value = status_message(int(clock() * 1000))
    cache.set(STATUS_KEY, value)
    stored = cache.get(STATUS_KEY)
    if stored is None:
        raise CacheUnavailable(f"{STATUS_KEY} missing right after write")
    logger.debug("probe %s=%r", STATUS_KEY, stored)
    return stored
