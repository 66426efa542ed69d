"""Async client for the ipinfo.io geolocation API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ip_distance.errors import NetworkError
from ip_distance.models import LocationRecord
from ip_distance.services import SELF_PATH, ServiceConfig, load_config

logger = logging.getLogger(__name__)


class IpInfoClient:
    """Async HTTP client for an ipinfo-compatible geolocation service.

    One request per lookup: no caching, no retry.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or load_config()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> IpInfoClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def fetch_raw(self, ip: Optional[str] = None) -> str:
        """GET the service for ``ip`` (or the caller's own IP) and return the body.

        A non-2xx status is logged but the body is still returned, since the
        service reports errors as JSON.
        """
        url = self.config.url_for(ip or SELF_PATH)
        params = {"token": self.config.token} if self.config.token else None
        client = await self._get_client()

        logger.debug("GET %s", url)
        try:
            resp = await client.get(url, params=params)
        except httpx.RequestError as exc:
            raise NetworkError(f"{self.config.name}: request to {url} failed: {exc}") from exc

        if resp.is_error:
            logger.warning("%s: %s returned HTTP %d", self.config.name, url, resp.status_code)
        return resp.text

    async def fetch(self, ip: Optional[str] = None) -> LocationRecord:
        return LocationRecord.from_json(await self.fetch_raw(ip))
