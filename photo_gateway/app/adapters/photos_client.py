"""
Upstream photos API client for Gateway.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union
from urllib.parse import quote

import httpx

from shared.logging import get_logger
from shared.errors import UpstreamError

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


class PhotosClient:
    """Client for the upstream photos JSON API.

    One ``httpx.AsyncClient`` is shared for the lifetime of the service.
    Failed calls are never retried.
    """

    def __init__(
        self,
        base_url: str,
        *,
        list_timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.list_timeout = list_timeout
        self.metrics = metrics
        self.logger = get_logger("gateway.photos_client")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def start(self) -> None:
        """Open the shared HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self.base_url, transport=self._transport)

    async def close(self) -> None:
        """Close the shared HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def list_photos(self, album_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Fetch all photos, optionally filtered by album."""
        params = {"albumId": album_id} if album_id else {}
        return await self._get("/photos", params=params, timeout=self.list_timeout)

    async def get_photo(self, photo_id: Union[str, int]) -> Dict[str, Any]:
        """Fetch a single photo; the client's default timeout applies."""
        return await self._get(f"/photos/{quote(str(photo_id), safe='')}")

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs: Any) -> Any:
        """Execute a GET against the upstream and decode its JSON body."""
        await self.start()
        try:
            response = await self._client.get(path, params=params, **kwargs)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            self._record(path, "error")
            self.logger.error(
                "Upstream request failed",
                path=path,
                params=params,
                status_code=exc.response.status_code,
            )
            raise UpstreamError(
                service="photos_api",
                message=f"Unexpected status {exc.response.status_code}",
                details={"status_code": exc.response.status_code, "path": path},
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            self._record(path, "error")
            self.logger.error("Upstream request error", path=path, params=params, error=str(exc))
            raise UpstreamError(
                service="photos_api",
                message=str(exc) or type(exc).__name__,
                details={"path": path},
            ) from exc

        self._record(path, "ok")
        self.logger.debug("Upstream response received", path=path, params=params)
        return data

    def _record(self, path: str, outcome: str) -> None:
        if self.metrics is None:
            return
        endpoint = "/photos" if path == "/photos" else "/photos/{id}"
        self.metrics.increment_counter("upstream_requests_total", endpoint=endpoint, outcome=outcome)
