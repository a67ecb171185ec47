"""
Gateway caching package.

Provides the Redis-backed cache store and the cache-aside helper used by the
gateway routes. The cache is a best-effort optimization: every entry expires
after a fixed TTL and no entry is ever deleted explicitly.
"""

from .cache_aside import DEFAULT_EXPIRATION, get_or_set_cache
from .cache_store import CacheStore
from .keys import photo_key, photos_list_key

__all__ = [
    "DEFAULT_EXPIRATION",
    "CacheStore",
    "get_or_set_cache",
    "photo_key",
    "photos_list_key",
]
