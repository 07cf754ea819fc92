"""Exceptions raised by the outbound API clients, one class per outcome kind."""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """Base exception for outbound API failures."""


class RequestTimeoutError(ApiError):
    """Raised when a call does not complete within its fixed budget."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Request timed out after {timeout:g}s")
        self.timeout = timeout


class HttpStatusError(ApiError):
    """Raised when the remote answers with a non-2xx status."""

    def __init__(self, status_code: int, reason_phrase: str) -> None:
        super().__init__(f"{status_code} {reason_phrase}")
        self.status_code = status_code
        self.reason_phrase = reason_phrase


class RpcResponseError(ApiError):
    """Raised when a JSON-RPC envelope carries an ``error`` member."""

    def __init__(self, error: Any) -> None:
        super().__init__("JSON-RPC error response")
        self.error = error


class TransportError(ApiError):
    """Raised when the remote cannot be reached at all."""


class InvalidResponseError(ApiError):
    """Raised when a 2xx body is not valid JSON."""
