"""Thin client for the RugCheck token report API."""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

import httpx

from solana_mcp.api.http import JsonHttpClient
from solana_mcp.config import RugcheckConfig, default_rugcheck_config


class RugcheckClient(JsonHttpClient):
    """Async client for the RugCheck report endpoints."""

    def __init__(
        self,
        config: RugcheckConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_rugcheck_config
        super().__init__(self.config.timeout, async_client=async_client)

    def token_summary_url(self, token_address: str) -> str:
        encoded = quote(token_address, safe="")
        return f"{self.config.base_url.rstrip('/')}/tokens/{encoded}/report/summary"

    async def fetch_token_summary(self, token_address: str) -> Any:
        """Retrieve the report summary for a token mint address."""
        return await self.request_json(
            "GET",
            self.token_summary_url(token_address),
            headers={"accept": "application/json"},
        )


default_rugcheck_client = RugcheckClient()
