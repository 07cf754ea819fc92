"""Transaction-related tools."""

from __future__ import annotations

from typing import Optional

from solana_mcp.api import default_solana_client
from solana_mcp.results import ToolResult
from solana_mcp.tools.rpc import call_rpc
from solana_mcp.tools.validators import build_options, split_csv, with_options


async def get_transaction(
    signature: str,
    commitment: Optional[str] = None,
    max_supported_transaction_version: Optional[int] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """
    Return a confirmed transaction by signature.

    The encoding is always ``jsonParsed``; callers cannot override it.
    """
    options = build_options(
        encoding="jsonParsed",
        commitment=commitment,
        maxSupportedTransactionVersion=max_supported_transaction_version,
    )
    return await call_rpc(client, "getTransaction", [signature, options])


async def get_signatures_for_address(
    address: str,
    limit: Optional[int] = None,
    before: Optional[str] = None,
    until: Optional[str] = None,
    commitment: Optional[str] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """Return confirmed signatures for transactions involving an address, newest first."""
    options = build_options(limit=limit, before=before, until=until, commitment=commitment)
    return await call_rpc(client, "getSignaturesForAddress", with_options([address], options))


async def get_signature_statuses(
    signatures: str,
    search_transaction_history: Optional[bool] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """Return the statuses of a comma-separated list of signatures."""
    options = build_options(searchTransactionHistory=search_transaction_history)
    return await call_rpc(client, "getSignatureStatuses", with_options([split_csv(signatures)], options))
