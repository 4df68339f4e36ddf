import asyncio
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

import httpx

from ipfinder.models.provider import ProviderSpec
from ipfinder.registry import ProviderRegistry


def json_response(status_code: int = HTTPStatus.OK, payload: Any = None) -> httpx.Response:
    return httpx.Response(status_code, json=payload if payload is not None else {})


def raw_response(body: bytes, status_code: int = HTTPStatus.OK) -> httpx.Response:
    return httpx.Response(status_code, content=body)


@dataclass
class Route:
    """Canned behaviour for every URL containing a given substring."""

    response: httpx.Response | None = None
    delay: float = 0.0
    error: Exception | None = None


class MockAsyncClient:
    """Minimal async context-manager mock for httpx.AsyncClient.

    `routes` maps a URL substring (usually the host) to a Route. URLs that
    match no route fail like an unreachable host.
    """

    def __init__(self, routes: dict[str, Route]) -> None:
        self._routes = routes
        self.requested_urls: list[str] = []
        self.cancelled_urls: list[str] = []
        self.entered = False
        self.closed = False

    async def __aenter__(self) -> "MockAsyncClient":
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.closed = True
        return None

    async def get(self, url: str) -> httpx.Response:
        self.requested_urls.append(url)
        route = self._match(url)
        if route is None:
            raise httpx.ConnectError("No route to host", request=httpx.Request("GET", url))

        try:
            if route.delay:
                await asyncio.sleep(route.delay)
        except asyncio.CancelledError:
            self.cancelled_urls.append(url)
            raise

        if route.error is not None:
            raise route.error
        return route.response

    def _match(self, url: str) -> Route | None:
        for fragment, route in self._routes.items():
            if fragment in url:
                return route
        return None


class FailingAsyncClient:
    """Async client that raises a RequestError on enter to simulate network failure.

    The target URL is provided at construction time, so tests for different providers
    can reuse this implementation with different base URLs.
    """

    def __init__(self, url: str, *args: Any, **kwargs: Any) -> None:
        self._url = url

    async def __aenter__(self) -> "FailingAsyncClient":
        request = httpx.Request("GET", self._url)
        raise httpx.RequestError("Network failure", request=request)

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None


def make_provider(name: str, **paths: str) -> ProviderSpec:
    """A provider on a fake `<name>.test` host using flat field names unless overridden."""
    fields = {
        "country_path": "country",
        "city_path": "city",
        "isp_path": "isp",
        "org_path": "org",
    }
    fields.update(paths)
    return ProviderSpec(name=name, url_template=f"http://{name}.test/json/1.1.1.1", **fields)


def make_registry(*names: str) -> ProviderRegistry:
    return ProviderRegistry(make_provider(name) for name in names)


def geo_payload(
    country: str = "United States",
    city: str = "Mountain View",
    isp: str = "Google LLC",
    org: str = "Google LLC",
) -> dict[str, str]:
    return {"country": country, "city": city, "isp": isp, "org": org}
