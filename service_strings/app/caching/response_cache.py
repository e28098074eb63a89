"""
Redis-backed store for each user's last response.
"""

import json
from typing import Any, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from shared.logging import get_logger
from shared.errors import ExternalServiceError
from shared.metrics import MetricsCollector


class LastResponseCache:
    """Keeps the most recent split/join response per username.

    One key per user; each write overwrites the previous entry and reads never
    delete it. Values are stored as JSON.
    """

    def __init__(
        self,
        redis_url: str,
        key_prefix: str = "last_response:",
        ttl_seconds: Optional[int] = None,
        metrics: Optional[MetricsCollector] = None,
        client: Optional[redis.Redis] = None,
    ):
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self.ttl_seconds = ttl_seconds
        self.metrics = metrics
        self.logger = get_logger("strings.cache.redis")
        self.redis: Optional[redis.Redis] = client

    def _client(self) -> redis.Redis:
        if self.redis is None:
            self.redis = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                health_check_interval=30
            )
        return self.redis

    def _key(self, username: str) -> str:
        return f"{self.key_prefix}{username}"

    async def get(self, username: str) -> Optional[Any]:
        """Return the cached response for ``username`` or None on a miss."""
        cache_key = self._key(username)
        try:
            cached_data = await self._client().get(cache_key)
        except RedisError as e:
            self.logger.error("Error reading last response", cache_key=cache_key, error=str(e))
            self._record("get", "error")
            raise ExternalServiceError("cache", "Unable to read last response") from e

        if cached_data is None:
            self.logger.debug("Cache miss for last response", cache_key=cache_key)
            self._record("get", "miss")
            return None

        self._record("get", "hit")
        return json.loads(cached_data)

    async def set(self, username: str, response: Any) -> None:
        """Store ``response`` as the last response of ``username``."""
        cache_key = self._key(username)
        data = json.dumps(response if response is not None else {})
        try:
            if self.ttl_seconds:
                await self._client().setex(cache_key, self.ttl_seconds, data)
            else:
                await self._client().set(cache_key, data)
        except RedisError as e:
            self.logger.error("Error caching last response", cache_key=cache_key, error=str(e))
            self._record("set", "error")
            raise ExternalServiceError("cache", "Unable to store last response") from e

        self.logger.debug("Cached last response", cache_key=cache_key, ttl=self.ttl_seconds)
        self._record("set", "ok")

    async def health_check(self) -> bool:
        """Check Redis health."""
        try:
            await self._client().ping()
            return True
        except RedisError:
            return False

    async def stop(self):
        """Close the Redis connection."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            self.logger.info("Redis cache stopped")

    def _record(self, operation: str, result: str) -> None:
        if self.metrics:
            self.metrics.increment_counter("cache_operations_total", operation=operation, result=result)
