from abc import ABC, abstractmethod

from ipfinder.models.common import LookupResult


class BaseIPLookupClient(ABC):
    """Abstract base for all IP geolocation clients.

    Implementations map a provider-specific response into a normalized
    LookupResult and must never raise for provider failures: a provider that
    cannot answer is reported as an empty result instead.
    """

    @abstractmethod
    async def lookup_ip(self, ip: str) -> LookupResult:
        """Look up geolocation information for an explicit IP address."""
        raise NotImplementedError
