"""HTTP client issuing single JSON GET requests against the API."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from types import TracebackType
from typing import Any

import requests

from mensa.common.config_loader import ClientConfig
from mensa.common.constants import API_BASE_URL, USER_AGENT
from mensa.common.errors import DecodeError, StatusError, TransportError
from mensa.common.logging import log_event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeoutConfig:
    """Per request timeouts in seconds. ``None`` leaves the transport default."""

    connect: float | None = None
    read: float | None = None

    def as_requests_timeout(self) -> tuple[float | None, float | None] | None:
        if self.connect is None and self.read is None:
            return None
        return (self.connect, self.read)


class HttpClient:
    def __init__(
        self,
        *,
        base_url: str = API_BASE_URL,
        user_agent: str = USER_AGENT,
        timeout: TimeoutConfig | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout or TimeoutConfig()
        self.session = requests.Session()

    @classmethod
    def from_config(cls, config: ClientConfig) -> "HttpClient":
        return cls(
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout=TimeoutConfig(connect=config.connect_timeout, read=config.read_timeout),
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": "application/json"}

    def _raise_for_status(self, response: requests.Response, url: str) -> None:
        status = response.status_code
        if not 200 <= status < 300:
            raise StatusError(status, url)

    def _get_json(self, url: str) -> Any:
        try:
            response = self.session.request(
                method="GET",
                url=url,
                headers=self._headers(),
                timeout=self.timeout.as_requests_timeout(),
            )
        except requests.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        self._raise_for_status(response, url)

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"Invalid JSON payload from {url}") from exc

    def get_json(self, url: str) -> Any:
        started = time.monotonic()
        payload = self._get_json(url)
        log_event(
            logger,
            f"GET {url}",
            level=logging.DEBUG,
            event="HTTP_OK",
            status="ok",
            url=url,
            duration_ms=int((time.monotonic() - started) * 1000),
        )
        return payload
