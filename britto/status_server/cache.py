"""Redis-backed CacheClient."""

import logging
from typing import Any, Dict, Optional

import redis

from britto.errors import CacheUnavailable

logger = logging.getLogger(__name__)


class RedisCacheClient:
    """String get/set over redis-py; RedisError becomes CacheUnavailable."""

    def __init__(self, client: "redis.Redis") -> None:
        self._client = client

    @classmethod
    def from_config(cls, cache_config: Dict[str, Any]) -> "RedisCacheClient":
        """Build from the cache config section (url, socket_timeout)."""
        client = redis.Redis.from_url(
            cache_config["url"],
            decode_responses=True,
            socket_timeout=cache_config.get("socket_timeout"),
            socket_connect_timeout=cache_config.get("socket_timeout"),
        )
        return cls(client)

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
        except redis.exceptions.RedisError as e:
            logger.warning("cache set %s failed: %s", key, e)
            raise CacheUnavailable(f"cache set failed: {e}") from e

    def get(self, key: str) -> Optional[str]:
        try:
            return self._client.get(key)
        except redis.exceptions.RedisError as e:
            logger.warning("cache get %s failed: %s", key, e)
            raise CacheUnavailable(f"cache get failed: {e}") from e
