"""
Redis cache store for the Gateway service.
"""

from typing import Optional

import redis.asyncio as redis

from shared.logging import get_logger
from shared.errors import CacheBackendError, StartupError


class CacheStore:
    """Thin wrapper over a single long-lived Redis connection pool."""

    def __init__(self, redis_url: str, client: Optional[redis.Redis] = None):
        self.redis_url = redis_url
        self.logger = get_logger("gateway.cache_store")
        self._redis = client if client is not None else redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
        )

    async def connect(self) -> None:
        """Verify the store is reachable; raise StartupError otherwise."""
        self.logger.info("Connecting to Redis", redis_url=self.redis_url)
        try:
            await self._redis.ping()
        except Exception as exc:
            self.logger.error("Failed to connect to Redis", redis_url=self.redis_url, error=str(exc))
            raise StartupError(
                "Cache store unreachable",
                details={"redis_url": self.redis_url, "error": str(exc)},
            ) from exc
        self.logger.info("Connected to Redis", redis_url=self.redis_url)

    async def get(self, key: str) -> Optional[str]:
        """Return the raw stored value for ``key`` or None when absent."""
        try:
            value = await self._redis.get(key)
        except redis.RedisError as exc:
            raise CacheBackendError("Cache read failed", details={"key": key, "error": str(exc)}) from exc
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set_with_expiry(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store ``value`` under ``key`` expiring after ``ttl_seconds``."""
        try:
            await self._redis.set(key, value, ex=ttl_seconds)
        except redis.RedisError as exc:
            raise CacheBackendError("Cache write failed", details={"key": key, "error": str(exc)}) from exc

    async def ping(self) -> bool:
        """Return True when Redis responds to a ping."""
        try:
            return bool(await self._redis.ping())
        except Exception as exc:
            self.logger.error("Redis health check failed", error=str(exc))
            return False

    async def close(self) -> None:
        """Close Redis connections."""
        try:
            await self._redis.aclose()
        except Exception as exc:  # pragma: no cover - close is best effort
            self.logger.warning("Redis close failed", error=str(exc))
