"""Domain errors and failure typing."""

from __future__ import annotations


class MensaError(Exception):
    """Base class for client failures."""

    error_code = "MENSA_ERROR"


class ConfigError(MensaError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class FetchError(MensaError):
    """Raised when an API resource could not be fetched and decoded."""

    error_code = "FETCH_ERROR"


class TransportError(FetchError):
    """Raised when the network call itself could not complete."""

    error_code = "TRANSPORT_ERROR"


class StatusError(FetchError):
    """Raised when the server answers with a non-success status."""

    error_code = "STATUS_ERROR"

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP status {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class DecodeError(FetchError):
    """Raised when a response body is not JSON or has the wrong shape."""

    error_code = "DECODE_ERROR"
