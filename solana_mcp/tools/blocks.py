"""Block and slot tools."""

from __future__ import annotations

from typing import Optional

from solana_mcp.api import default_solana_client
from solana_mcp.results import ToolResult
from solana_mcp.tools.rpc import call_rpc
from solana_mcp.tools.validators import build_options, with_options


async def get_block(
    slot: int,
    commitment: Optional[str] = None,
    max_supported_transaction_version: Optional[int] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """
    Return a confirmed block with full, parsed transaction details.

    ``encoding`` and ``transactionDetails`` are fixed to ``jsonParsed`` and
    ``full``.
    """
    options = build_options(
        encoding="jsonParsed",
        transactionDetails="full",
        commitment=commitment,
        maxSupportedTransactionVersion=max_supported_transaction_version,
    )
    return await call_rpc(client, "getBlock", [slot, options])


async def get_block_height(commitment: Optional[str] = None, *, client=default_solana_client) -> ToolResult:
    return await call_rpc(client, "getBlockHeight", with_options([], build_options(commitment=commitment)))


async def get_latest_blockhash(commitment: Optional[str] = None, *, client=default_solana_client) -> ToolResult:
    return await call_rpc(client, "getLatestBlockhash", with_options([], build_options(commitment=commitment)))


async def get_block_time(slot: int, *, client=default_solana_client) -> ToolResult:
    """Return the estimated production time of a block as a Unix timestamp."""
    return await call_rpc(client, "getBlockTime", [slot])
