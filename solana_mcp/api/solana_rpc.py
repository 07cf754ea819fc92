"""
Solana JSON-RPC client.

Every call is a single JSON-RPC 2.0 envelope POSTed to the configured endpoint.
The client owns the request-id counter; ids are drawn before the request is
awaited, so overlapping calls still get distinct, increasing ids.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from solana_mcp.api.errors import RpcResponseError
from solana_mcp.api.http import JsonHttpClient
from solana_mcp.config import SolanaRpcConfig, default_solana_config

logger = logging.getLogger(__name__)


class SolanaRpcClient(JsonHttpClient):
    """Async client for the Solana JSON-RPC API."""

    def __init__(
        self,
        config: SolanaRpcConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_solana_config
        super().__init__(self.config.timeout, async_client=async_client)
        self._request_ids = itertools.count(1)

    def build_envelope(self, method: str, params: Sequence[Any] = ()) -> Dict[str, Any]:
        """Return a fresh JSON-RPC envelope, consuming the next request id."""
        params_list: List[Any] = list(params)
        return {
            "jsonrpc": "2.0",
            "id": next(self._request_ids),
            "method": method,
            "params": params_list,
        }

    async def call(self, method: str, params: Sequence[Any] = ()) -> Any:
        """
        Invoke a JSON-RPC method and return its ``result`` member.

        Raises:
            RpcResponseError: the response envelope carries an ``error``.
            ApiError: any transport-level failure (see ``JsonHttpClient``).
        """
        envelope = self.build_envelope(method, params)
        logger.debug("rpc call method=%s id=%s", method, envelope["id"])
        data = await self.request_json(
            "POST",
            self.config.rpc_url,
            json_body=envelope,
            headers={"Content-Type": "application/json"},
        )
        if not isinstance(data, dict):
            return None
        if data.get("error") is not None:
            raise RpcResponseError(data["error"])
        return data.get("result")


default_solana_client = SolanaRpcClient()
