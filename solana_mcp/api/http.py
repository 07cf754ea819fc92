"""
Shared async HTTP plumbing for the outbound API clients.

Each call is a single request with a fixed budget. Failures are raised as the
typed exceptions in :mod:`solana_mcp.api.errors` so the tool layer never has to
inspect exception names or messages.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from solana_mcp.api.errors import (
    HttpStatusError,
    InvalidResponseError,
    RequestTimeoutError,
    TransportError,
)

logger = logging.getLogger(__name__)


class JsonHttpClient:
    """Async JSON-over-HTTP client with a fixed per-call timeout."""

    def __init__(
        self,
        timeout: float,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def request_json(
        self,
        method: str,
        url: str,
        *,
        json_body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Issue one request and return the decoded JSON body of a 2xx response."""
        client = await self._get_client()
        # Endpoint URLs may embed API keys; only the host is logged.
        host = httpx.URL(url).host
        try:
            response = await asyncio.wait_for(
                client.request(method, url, json=json_body, headers=headers, timeout=self.timeout),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning("%s %s timed out after %ss", method, host, self.timeout)
            raise RequestTimeoutError(self.timeout) from exc
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, host, exc)
            raise TransportError(str(exc)) from exc

        if not response.is_success:
            logger.debug("%s %s returned status %s", method, host, response.status_code)
            raise HttpStatusError(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as exc:
            raise InvalidResponseError(str(exc)) from exc
