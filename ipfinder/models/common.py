from enum import Enum

from pydantic import BaseModel, ConfigDict


class LookupStatus(str, Enum):
    """Outcome of a single provider query."""

    success = "success"
    timeout = "timeout"
    transport_error = "transport_error"
    bad_status = "bad_status"
    parse_error = "parse_error"


class LookupResult(BaseModel):
    """Normalized, provider-agnostic record produced by one provider query.

    Failure is signalled by emptiness: a failed query leaves every data field
    as an empty string. Consumers filter on `is_empty`, which only looks at the
    country name, so a partially populated record (e.g. no ISP) still counts.
    """

    model_config = ConfigDict(frozen=True)

    ip: str = ""
    country_name: str = ""
    city: str = ""
    isp: str = ""
    org: str = ""
    source_url: str = ""
    provider: str = ""
    status: LookupStatus = LookupStatus.success

    @classmethod
    def failed(cls, provider: str, status: LookupStatus) -> "LookupResult":
        """Build the all-empty record reported for a provider that produced no data."""
        return cls(provider=provider, status=status)

    @property
    def is_empty(self) -> bool:
        return not self.country_name

    @property
    def isp_matches_org(self) -> bool:
        """True when ISP and ORG are the same name, ignoring case."""
        return self.isp.casefold() == self.org.casefold()
