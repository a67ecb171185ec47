"""
Cache-aside helper for gateway routes.

``get_or_set_cache`` looks a key up in the cache store and, on a miss, awaits
the producer, stores its JSON-encoded result with a fixed TTL and returns it.
The cache never decides correctness: any failure on the cache side is logged
and the caller gets the producer's result instead. Concurrent misses on the
same key each run the producer and each write their own result.
"""

import json
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, TypeVar

from shared.logging import get_logger
from .cache_store import CacheStore
from .keys import fits_key_budget

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


T = TypeVar("T")

DEFAULT_EXPIRATION = 3600  # 1 hour

logger = get_logger("gateway.cache_aside")


async def get_or_set_cache(
    store: CacheStore,
    key: str,
    producer: Callable[[], Awaitable[T]],
    *,
    ttl_seconds: int = DEFAULT_EXPIRATION,
    max_key_length: Optional[int] = None,
    metrics: Optional["MetricsCollector"] = None,
    cache_type: str = "default",
) -> T:
    """Return the cached value for ``key`` or produce, cache and return a fresh one.

    Errors raised by ``producer`` propagate unchanged and are never retried.
    """
    if not fits_key_budget(key, max_key_length):
        logger.warning("Cache key exceeds length budget, bypassing cache", key_length=len(key))
        return await producer()

    try:
        cached_data = await store.get(key)
        if cached_data is not None:
            value = json.loads(cached_data)
            logger.info("Cache hit", key=key)
            _count(metrics, "cache_hits_total", cache_type=cache_type)
            return value
    except Exception as exc:
        logger.error("Redis error", key=key, stage="read", error=str(exc))
        _count(metrics, "cache_errors_total", cache_type=cache_type, stage="read")
        return await producer()

    logger.info("Cache miss", key=key)
    _count(metrics, "cache_misses_total", cache_type=cache_type)
    fresh_data = await producer()

    try:
        await store.set_with_expiry(key, json.dumps(fresh_data), ttl_seconds)
    except Exception as exc:
        logger.error("Redis error", key=key, stage="write", error=str(exc))
        _count(metrics, "cache_errors_total", cache_type=cache_type, stage="write")

    return fresh_data


def _count(metrics: Optional["MetricsCollector"], name: str, **labels: Any) -> None:
    if metrics is not None:
        metrics.increment_counter(name, **labels)
