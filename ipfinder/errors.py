from ipfinder.models.common import LookupStatus


class AppError(Exception):
    """Base application error for the IP location finder."""


class IpProviderError(AppError):
    """Base error for IP geolocation provider failures."""

    status: LookupStatus = LookupStatus.transport_error


class ProviderTimeoutError(IpProviderError):
    """Raised when the provider does not answer within the request timeout."""

    status = LookupStatus.timeout


class ProviderTransportError(IpProviderError):
    """Raised when the request cannot be sent or the connection fails (DNS, refused, bad URL)."""

    status = LookupStatus.transport_error


class ProviderStatusError(IpProviderError):
    """Raised when the provider answers with anything other than HTTP 200."""

    status = LookupStatus.bad_status


class MalformedResponseError(IpProviderError):
    """Raised when the response body is not a JSON object."""

    status = LookupStatus.parse_error
