from pydantic import BaseModel

from ipfinder.models.common import LookupResult


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str


class LookupResultResponse(BaseModel):
    """One provider's answer as exposed by the API."""

    provider: str
    url: str
    country_name: str
    city: str
    isp: str
    org: str
    # Set when ISP and ORG name the same organisation, otherwise null.
    isp_org: str | None = None

    @classmethod
    def from_result(cls, result: LookupResult) -> "LookupResultResponse":
        return cls(
            provider=result.provider,
            url=result.source_url,
            country_name=result.country_name,
            city=result.city,
            isp=result.isp,
            org=result.org,
            isp_org=result.isp if result.isp_matches_org else None,
        )


class IPLookupResponse(BaseModel):
    """Response model for the aggregated IP geolocation lookup."""

    ip: str
    providers_queried: int
    results: list[LookupResultResponse]
