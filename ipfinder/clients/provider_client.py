import asyncio
from http import HTTPStatus
from typing import Any

import httpx

from ipfinder.clients.base import BaseIPLookupClient
from ipfinder.errors import (
    IpProviderError,
    MalformedResponseError,
    ProviderStatusError,
    ProviderTimeoutError,
    ProviderTransportError,
)
from ipfinder.field_path import extract_field
from ipfinder.logger import logger
from ipfinder.models.common import LookupResult
from ipfinder.models.provider import ProviderSpec

DEFAULT_TIMEOUT_SECONDS = 5.0


class ProviderClient(BaseIPLookupClient):
    """Client for any JSON geolocation provider described by a ProviderSpec.

    The provider's field paths drive normalization, so a single class serves
    every registered provider. When no shared `http_client` is given, a fresh
    httpx.AsyncClient is opened for the request.
    """

    def __init__(
        self,
        provider: ProviderSpec,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._provider = provider
        self._http_client = http_client
        self._timeout_seconds = timeout_seconds

    async def lookup_ip(self, ip: str) -> LookupResult:
        """Query the provider for `ip`.

        Every failure (network, timeout, non-200, bad JSON) collapses into an
        empty LookupResult whose `status` records what went wrong.
        """
        url = self._provider.build_url(ip)
        try:
            data = await self._request(url)
        except IpProviderError as exc:
            logger.debug(f"Provider lookup failed provider={self._provider.name} url={url} error={exc!r}")
            return LookupResult.failed(provider=self._provider.name, status=exc.status)

        return self._normalize_payload(ip, url, data)

    async def _request(self, url: str) -> dict[str, Any]:
        """Perform the HTTP GET and decode the body."""
        try:
            if self._http_client is None:
                async with httpx.AsyncClient(timeout=self._timeout_seconds, follow_redirects=True) as client:
                    response = await self._get(client, url)
            else:
                response = await self._get(self._http_client, url)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise ProviderTimeoutError(f"No answer from IP provider within {self._timeout_seconds}s") from exc
        except (httpx.RequestError, httpx.InvalidURL, UnicodeError, ValueError) as exc:
            # UnicodeError/ValueError: httpx could not encode the URL (e.g. a lone surrogate in the IP).
            raise ProviderTransportError(f"Request to IP provider failed: {repr(exc)}") from exc

        self._handle_http_errors(response)
        return self._parse_json(response)

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        # httpx timeouts apply per phase; wait_for bounds the request as a whole.
        return await asyncio.wait_for(client.get(url), timeout=self._timeout_seconds)

    @staticmethod
    def _handle_http_errors(response: httpx.Response) -> None:
        if response.status_code != HTTPStatus.OK:
            raise ProviderStatusError(f"IP provider returned HTTP {response.status_code}")

    @staticmethod
    def _parse_json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"Failed to decode IP provider response as JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected a JSON object from IP provider, got {type(data).__name__}")
        return data

    def _normalize_payload(self, ip: str, url: str, data: dict[str, Any]) -> LookupResult:
        """Map the provider's response into the normalized record via its field paths."""
        provider = self._provider
        return LookupResult(
            ip=ip,
            country_name=extract_field(data, provider.country_path),
            city=extract_field(data, provider.city_path),
            isp=extract_field(data, provider.isp_path),
            org=extract_field(data, provider.org_path),
            source_url=url,
            provider=provider.name,
        )
