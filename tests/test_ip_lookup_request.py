from typing import Any

import pytest
from pydantic import ValidationError

from ipfinder.main import IPLookupRequest


def _build_request(ip: Any) -> IPLookupRequest:
    """Helper to construct IPLookupRequest, used to keep tests small."""
    return IPLookupRequest(ip=ip)


def test_ip_lookup_request_allows_valid_ipv4() -> None:
    """Explicit valid IPv4 address is accepted as-is."""
    req = _build_request("8.8.8.8")
    assert req.ip == "8.8.8.8"


def test_ip_lookup_request_allows_valid_ipv6() -> None:
    """Explicit valid IPv6 address is accepted as-is."""
    req = _build_request("2001:4860:4860::8888")
    assert req.ip == "2001:4860:4860::8888"


def test_ip_lookup_request_strips_whitespace() -> None:
    req = _build_request("  1.0.0.1 ")
    assert req.ip == "1.0.0.1"


def test_ip_lookup_request_blank_defaults_to_public_resolver() -> None:
    """Blank input falls back to 8.8.8.8."""
    req = _build_request("   ")
    assert req.ip == "8.8.8.8"


def test_ip_lookup_request_none_defaults_to_public_resolver() -> None:
    req = _build_request(None)
    assert req.ip == "8.8.8.8"


def test_ip_lookup_request_omitted_defaults_to_public_resolver() -> None:
    assert IPLookupRequest().ip == "8.8.8.8"


@pytest.mark.parametrize("value", ["qwerty", "999.999.999.999", "8.8.8", "2001:db8:::1"])
def test_ip_lookup_request_rejects_invalid_ip(value: str) -> None:
    """Non-empty, non-IP strings are rejected by validation."""
    with pytest.raises(ValidationError):
        _build_request(value)
