from typing import Any

import httpx
import pytest

from ipfinder import cli
from tests.common import MockAsyncClient, Route, geo_payload, json_response


@pytest.fixture
def fake_http(monkeypatch: pytest.MonkeyPatch) -> MockAsyncClient:
    """Answer only for ip-api.com; every other default provider is unreachable."""
    client = MockAsyncClient(
        {"ip-api.com": Route(json_response(payload=geo_payload(country="Netherlands", city="Amsterdam")))}
    )

    def _fake_client(*args: Any, **kwargs: Any) -> MockAsyncClient:
        return client

    monkeypatch.setattr(httpx, "AsyncClient", _fake_client)
    return client


def test_cli_prints_results_with_data(fake_http: MockAsyncClient, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["185.107.56.1"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "URL: http://ip-api.com/json/185.107.56.1",
        "Country: Netherlands  City: Amsterdam",
        "ISP/ORG: Google LLC",
    ]
    assert len(fake_http.requested_urls) == 4


def test_cli_defaults_to_8_8_8_8(fake_http: MockAsyncClient) -> None:
    assert cli.main([]) == 0
    assert "http://ip-api.com/json/8.8.8.8" in fake_http.requested_urls


def test_cli_exit_code_when_no_provider_answers(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(httpx, "AsyncClient", lambda *args, **kwargs: MockAsyncClient({}))

    assert cli.main(["8.8.8.8", "--timeout", "1"]) == 1
    assert capsys.readouterr().out == ""


def test_cli_rejects_invalid_ip(fake_http: MockAsyncClient) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["not-an-ip"])

    assert exc_info.value.code == 2
    assert fake_http.requested_urls == []


def test_cli_blank_ip_defaults_to_8_8_8_8(fake_http: MockAsyncClient) -> None:
    assert cli.main(["  "]) == 0
    assert "http://ip-api.com/json/8.8.8.8" in fake_http.requested_urls
