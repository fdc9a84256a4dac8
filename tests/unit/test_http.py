from __future__ import annotations

import pytest
import requests

from mensa.common.config_loader import ClientConfig
from mensa.common.errors import DecodeError, FetchError, StatusError, TransportError
from mensa.common.http import HttpClient, TimeoutConfig


class FakeResponse:
    def __init__(self, status_code: int, payload=None, raises_json: bool = False):
        self.status_code = status_code
        self._payload = payload
        self._raises_json = raises_json

    def json(self):
        if self._raises_json:
            raise ValueError("bad json")
        return self._payload


def test_http_get_json_success(monkeypatch):
    client = HttpClient()
    calls = []

    def fake_request(**kwargs):
        calls.append(kwargs)
        return FakeResponse(200, [{"ok": True}])

    monkeypatch.setattr(client.session, "request", fake_request)
    payload = client.get_json("https://example.com/canteens")

    assert payload == [{"ok": True}]
    assert len(calls) == 1
    assert calls[0]["method"] == "GET"
    assert calls[0]["timeout"] is None
    assert calls[0]["headers"]["Accept"] == "application/json"


def test_http_non_success_status_raises_status_error(monkeypatch):
    client = HttpClient()
    monkeypatch.setattr(client.session, "request", lambda **_kwargs: FakeResponse(503, {"x": 1}))

    with pytest.raises(StatusError) as excinfo:
        client.get_json("https://example.com")

    assert excinfo.value.status_code == 503
    assert "503" in str(excinfo.value)


def test_http_status_error_is_not_retried(monkeypatch):
    client = HttpClient()
    calls = []

    def fake_request(**kwargs):
        calls.append(kwargs)
        return FakeResponse(500)

    monkeypatch.setattr(client.session, "request", fake_request)

    with pytest.raises(StatusError):
        client.get_json("https://example.com")
    assert len(calls) == 1


def test_http_invalid_json_raises(monkeypatch):
    client = HttpClient()
    monkeypatch.setattr(client.session, "request", lambda **_kwargs: FakeResponse(200, raises_json=True))

    with pytest.raises(DecodeError):
        client.get_json("https://example.com")


def test_http_transport_failure_raises_transport_error(monkeypatch):
    client = HttpClient()

    def boom(**_kwargs):
        raise requests.ConnectionError("name resolution failed")

    monkeypatch.setattr(client.session, "request", boom)

    with pytest.raises(TransportError) as excinfo:
        client.get_json("https://example.com")
    assert isinstance(excinfo.value, FetchError)
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_http_client_from_config_applies_timeouts_and_agent(monkeypatch):
    config = ClientConfig(base_url="https://mensa.example/api/v2/", user_agent="tests/1.0", read_timeout=5.0)
    captured = {}

    def fake_request(**kwargs):
        captured.update(kwargs)
        return FakeResponse(200, [])

    with HttpClient.from_config(config) as client:
        monkeypatch.setattr(client.session, "request", fake_request)
        client.get_json("https://mensa.example/api/v2/canteens")

    assert client.base_url == "https://mensa.example/api/v2"
    assert captured["headers"]["User-Agent"] == "tests/1.0"
    assert captured["timeout"] == (None, 5.0)


def test_timeout_config_without_values_uses_transport_default():
    assert TimeoutConfig().as_requests_timeout() is None
    assert TimeoutConfig(connect=2, read=10).as_requests_timeout() == (2, 10)


def test_http_get_sends_only_url_headers_and_timeout(monkeypatch):
    client = HttpClient(timeout=TimeoutConfig(connect=3, read=7))
    captured = {}

    def fake_request(**kwargs):
        captured.update(kwargs)
        return FakeResponse(200, [])

    monkeypatch.setattr(client.session, "request", fake_request)
    client.get_json("https://example.com/canteens")

    assert set(captured) == {"method", "url", "headers", "timeout"}
    assert captured["timeout"] == (3, 7)
