"""
Shared fixtures for Photo Gateway tests.
"""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
import redis.exceptions

from shared.config import GatewayConfig
from photo_gateway.app.adapters.photos_client import PhotosClient
from photo_gateway.app.caching.cache_store import CacheStore
from photo_gateway.app.main import GatewayService


UPSTREAM_URL = "https://upstream.test"


class InMemoryRedis:
    """In-memory stand-in for ``redis.asyncio.Redis`` covering the calls the gateway makes."""

    def __init__(self):
        self.data: Dict[str, str] = {}
        self.ttls: Dict[str, Optional[int]] = {}
        self.fail_reads = False
        self.fail_writes = False
        self.fail_ping = False
        self.closed = False

    async def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise redis.exceptions.ConnectionError("redis unavailable")
        return self.data.get(key)

    async def set(self, key: str, value: str, ex: Optional[int] = None) -> bool:
        if self.fail_writes:
            raise redis.exceptions.ConnectionError("redis unavailable")
        self.data[key] = value
        self.ttls[key] = ex
        return True

    async def ping(self) -> bool:
        if self.fail_ping:
            raise redis.exceptions.ConnectionError("redis unavailable")
        return True

    async def aclose(self) -> None:
        self.closed = True


class FakeUpstream:
    """Photos API double served through ``httpx.MockTransport``."""

    def __init__(self, photos: List[Dict[str, Any]]):
        self.photos = photos
        self.requests: List[httpx.Request] = []
        self.status_override: Optional[int] = None

    def calls_to(self, path: str) -> int:
        return sum(1 for request in self.requests if request.url.path == path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_override is not None:
            return httpx.Response(self.status_override, text="upstream failure")

        path = request.url.path
        if path == "/photos":
            album_id = request.url.params.get("albumId")
            items = [p for p in self.photos if album_id is None or str(p["albumId"]) == album_id]
            return httpx.Response(200, json=items)

        if path.startswith("/photos/"):
            photo_id = path.rsplit("/", 1)[-1]
            for photo in self.photos:
                if str(photo["id"]) == photo_id:
                    return httpx.Response(200, json=photo)
            return httpx.Response(404, json={})

        return httpx.Response(404, json={})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def photos():
    """Sample upstream photos."""
    return [
        {
            "id": 1,
            "albumId": 1,
            "title": "accusamus beatae ad facilis cum similique qui sunt",
            "url": "https://via.placeholder.com/600/92c952",
            "thumbnailUrl": "https://via.placeholder.com/150/92c952",
        },
        {
            "id": 2,
            "albumId": 1,
            "title": "reprehenderit est deserunt velit ipsam",
            "url": "https://via.placeholder.com/600/771796",
            "thumbnailUrl": "https://via.placeholder.com/150/771796",
        },
        {
            "id": 51,
            "albumId": 2,
            "title": "non sunt voluptatem placeat consequuntur rem incidunt",
            "url": "https://via.placeholder.com/600/8e973b",
            "thumbnailUrl": "https://via.placeholder.com/150/8e973b",
        },
    ]


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def upstream(photos):
    return FakeUpstream(photos)


@pytest.fixture
def config():
    return GatewayConfig(redis_url="redis://cache.test:6379", upstream_base_url=UPSTREAM_URL)


@pytest.fixture
def cache_store(fake_redis, config):
    return CacheStore(config.redis_url, client=fake_redis)


@pytest.fixture
def service(config, cache_store, upstream):
    """GatewayService wired to in-memory Redis and the fake upstream."""
    photos_client = PhotosClient(
        config.upstream_base_url,
        list_timeout=config.upstream_list_timeout,
        transport=upstream.transport(),
    )
    return GatewayService(config, cache_store=cache_store, photos_client=photos_client)


def stored_json(fake_redis: InMemoryRedis, key: str) -> Any:
    return json.loads(fake_redis.data[key])
