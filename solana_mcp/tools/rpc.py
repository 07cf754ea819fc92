"""Shared JSON-RPC call helper used by every Solana tool."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from solana_mcp.api import ApiError
from solana_mcp.results import SOLANA_RPC_MESSAGES, ToolResult, failure_result, success_result

logger = logging.getLogger(__name__)


async def call_rpc(client, method: str, params: Sequence[Any] = ()) -> ToolResult:
    """
    Invoke ``method`` through ``client`` and normalize the outcome.

    Args:
        client: Solana RPC client (override for testing).
        method: JSON-RPC method name.
        params: Positional parameters, already shaped by the calling tool.

    Returns:
        The pretty-printed ``result`` member, or an error text. Never raises.
    """
    try:
        result = await client.call(method, list(params))
    except ApiError as exc:
        logger.warning("rpc method=%s failed: %s", method, exc, extra={"error": type(exc).__name__})
        return failure_result(exc, SOLANA_RPC_MESSAGES)
    except Exception as exc:
        logger.exception("Unexpected error calling %s", method)
        return failure_result(exc, SOLANA_RPC_MESSAGES)
    return success_result(result)
