"""SPL token tools."""

from __future__ import annotations

from typing import Any, Dict, Optional

from solana_mcp.api import default_solana_client
from solana_mcp.config import SPL_TOKEN_PROGRAM_ID
from solana_mcp.results import ToolResult
from solana_mcp.tools.rpc import call_rpc
from solana_mcp.tools.validators import build_options, with_options


def token_account_filter(mint: Optional[str] = None, program_id: Optional[str] = None) -> Dict[str, Any]:
    """Build the mint-or-program filter; a mint always wins."""
    if mint:
        return {"mint": mint}
    return {"programId": program_id or SPL_TOKEN_PROGRAM_ID}


async def get_token_account_balance(
    token_account: str,
    commitment: Optional[str] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """Return the token balance of an SPL token account."""
    params = with_options([token_account], build_options(commitment=commitment))
    return await call_rpc(client, "getTokenAccountBalance", params)


async def get_token_accounts_by_owner(
    owner: str,
    mint: Optional[str] = None,
    program_id: Optional[str] = None,
    commitment: Optional[str] = None,
    encoding: Optional[str] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """
    Return all SPL token accounts held by ``owner``.

    Filters by ``mint`` when given, otherwise by ``program_id`` (the SPL token
    program by default).
    """
    options = build_options(commitment=commitment, encoding=encoding)
    params = with_options([owner, token_account_filter(mint, program_id)], options)
    return await call_rpc(client, "getTokenAccountsByOwner", params)


async def get_token_supply(mint: str, commitment: Optional[str] = None, *, client=default_solana_client) -> ToolResult:
    """Return the total supply of an SPL token."""
    return await call_rpc(client, "getTokenSupply", with_options([mint], build_options(commitment=commitment)))


async def get_token_largest_accounts(
    mint: str,
    commitment: Optional[str] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """Return the 20 largest accounts of an SPL token."""
    params = with_options([mint], build_options(commitment=commitment))
    return await call_rpc(client, "getTokenLargestAccounts", params)
