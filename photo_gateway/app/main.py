"""
Photo Gateway service.
"""

from typing import Any, Dict, Optional

from fastapi import Query
from fastapi.responses import JSONResponse, PlainTextResponse

from shared.base_service import BaseService
from shared.config import GatewayConfig
from photo_gateway.app.adapters.photos_client import PhotosClient
from photo_gateway.app.caching.cache_aside import get_or_set_cache
from photo_gateway.app.caching.cache_store import CacheStore
from photo_gateway.app.caching.keys import photo_key, photos_list_key


FETCH_ERROR_MESSAGE = "Error fetching photos"


class GatewayService(BaseService):
    """Caching gateway in front of the upstream photos API."""

    def __init__(
        self,
        config: Optional[GatewayConfig] = None,
        *,
        cache_store: Optional[CacheStore] = None,
        photos_client: Optional[PhotosClient] = None,
    ):
        super().__init__("gateway", config)
        self.cache_store = cache_store or CacheStore(self.config.redis_url)
        self.photos_client = photos_client or PhotosClient(
            self.config.upstream_base_url,
            list_timeout=self.config.upstream_list_timeout,
            metrics=self.metrics,
        )

        self._setup_gateway_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.gateway_service = self

    async def startup(self) -> None:
        await self.cache_store.connect()
        await self.photos_client.start()

    async def shutdown(self) -> None:
        await self.photos_client.close()
        await self.cache_store.close()

    async def _cached(self, key: str, producer, cache_type: str) -> Any:
        return await get_or_set_cache(
            self.cache_store,
            key,
            producer,
            ttl_seconds=self.config.cache_ttl_seconds,
            max_key_length=self.config.max_cache_key_length,
            metrics=self.metrics,
            cache_type=cache_type,
        )

    def _setup_gateway_routes(self):
        """Set up gateway routes."""

        @self.app.get("/", response_class=PlainTextResponse)
        async def root():
            """Greeting confirming the server is running."""
            return "Hello from the Photo Gateway!"

        @self.app.get("/photos")
        async def list_photos(album_id: Optional[str] = Query(None, alias="albumId")):
            """Fetch photos, optionally filtered by albumId.

            Cached under ``photos?albumId={albumId}`` or ``photos`` when the
            filter is omitted.
            """
            cache_key = photos_list_key(album_id)
            self.logger.info("Fetching photos", cache_key=cache_key)

            try:
                photos = await self._cached(
                    cache_key,
                    lambda: self.photos_client.list_photos(album_id),
                    cache_type="photos_list",
                )
            except Exception as exc:
                self.logger.error("Failed to fetch photos", cache_key=cache_key, error=str(exc))
                return PlainTextResponse(FETCH_ERROR_MESSAGE, status_code=500)
            return JSONResponse(content=photos)

        @self.app.get("/photos/{photo_id}")
        async def get_photo(photo_id: str):
            """Fetch a single photo by id, cached under ``photos:{id}``."""
            cache_key = photo_key(photo_id)

            try:
                photo = await self._cached(
                    cache_key,
                    lambda: self.photos_client.get_photo(photo_id),
                    cache_type="photo",
                )
            except Exception as exc:
                self.logger.error("Failed to fetch photo", cache_key=cache_key, error=str(exc))
                return PlainTextResponse(FETCH_ERROR_MESSAGE, status_code=500)
            return JSONResponse(content=photo)

    async def _check_dependencies(self) -> Dict[str, str]:
        """Check gateway dependencies."""
        return {"redis": "ok" if await self.cache_store.ping() else "error"}


def create_app(config: Optional[GatewayConfig] = None, **kwargs):
    """Create FastAPI application."""
    service = GatewayService(config, **kwargs)
    return service.app


if __name__ == "__main__":
    service = GatewayService()
    service.run()
