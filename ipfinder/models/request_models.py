from ipaddress import ip_address

from pydantic import BaseModel, Field, field_validator

DEFAULT_LOOKUP_IP = "8.8.8.8"


def validate_ip(value: str) -> str:
    """Return the stripped IP literal or raise ValueError if it is not IPv4/IPv6."""
    value_str = value.strip()
    try:
        ip_address(value_str)
    except ValueError as exc:
        raise ValueError("ip must be a valid IPv4 or IPv6 address") from exc
    return value_str


class IPLookupRequest(BaseModel):
    """Request model for IP geolocation lookup via query parameters.

    If `ip` is omitted, null or blank, the lookup falls back to 8.8.8.8.
    """

    ip: str = Field(
        default=DEFAULT_LOOKUP_IP,
        description="IPv4 or IPv6 address to look up. Defaults to 8.8.8.8.",
        examples=["8.8.8.8", "2001:4860:4860::8888"],
    )

    @field_validator("ip", mode="before")
    @classmethod
    def _validate_ip(cls, value: str | None) -> str:
        """Validate that ip is either empty/None or a valid IP address (IPv4 or IPv6).

        - None or blank string -> the default lookup address.
        - Non-blank -> must be a valid IP literal, otherwise a validation error
          is raised and the endpoint handler is never invoked.
        """
        if value is None:
            return DEFAULT_LOOKUP_IP

        value_str = str(value).strip()
        if not value_str:
            return DEFAULT_LOOKUP_IP

        return validate_ip(value_str)
