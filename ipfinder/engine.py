"""Concurrent fan-out of one IP lookup across every registered provider."""

import asyncio
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

import httpx

from ipfinder.clients.provider_client import DEFAULT_TIMEOUT_SECONDS, ProviderClient
from ipfinder.logger import logger
from ipfinder.models.common import LookupResult
from ipfinder.registry import ProviderRegistry


class LookupEngine:
    """Queries every provider in the registry concurrently for a single IP.

    Results are streamed in the order providers answer. The stream always
    yields exactly one record per provider and then ends; records for failed
    providers are empty.

    An injected `http_client` is shared by all provider queries and left open
    for the caller to close. Without one, a client is opened per lookup.
    """

    def __init__(
        self,
        registry: ProviderRegistry | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._registry = registry if registry is not None else ProviderRegistry()
        self._http_client = http_client
        self._timeout_seconds = timeout_seconds

    @property
    def provider_count(self) -> int:
        return len(self._registry)

    async def lookup(self, ip: str) -> AsyncGenerator[LookupResult, None]:
        """Yield one LookupResult per provider, fastest first.

        Closing the generator early (or cancelling the consumer) cancels the
        provider requests that are still in flight.
        """
        providers = self._registry.providers()
        logger.info(f"Starting IP lookup ip={ip} providers={len(providers)}")

        async with self._client() as client:
            tasks = [
                asyncio.create_task(
                    ProviderClient(spec, http_client=client, timeout_seconds=self._timeout_seconds).lookup_ip(ip),
                    name=f"lookup:{spec.name}",
                )
                for spec in providers
            ]
            try:
                for next_result in asyncio.as_completed(tasks):
                    yield await next_result
            finally:
                pending = [task for task in tasks if not task.done()]
                for task in pending:
                    task.cancel()
                if pending:
                    logger.info(f"IP lookup abandoned ip={ip} cancelled={len(pending)}")
                    await asyncio.gather(*pending, return_exceptions=True)

    async def lookup_all(self, ip: str) -> list[LookupResult]:
        """Run a full lookup and collect every result in arrival order."""
        return [result async for result in self.lookup(ip)]

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return

        async with httpx.AsyncClient(timeout=self._timeout_seconds, follow_redirects=True) as client:
            yield client
