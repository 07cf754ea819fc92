"""Account-related tools."""

from __future__ import annotations

from typing import Optional

from solana_mcp.api import default_solana_client
from solana_mcp.results import ToolResult
from solana_mcp.tools.rpc import call_rpc
from solana_mcp.tools.validators import build_options, split_csv, with_options


async def get_balance(
    pubkey: str,
    commitment: Optional[str] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """Return the lamport balance of an account."""
    params = with_options([pubkey], build_options(commitment=commitment))
    return await call_rpc(client, "getBalance", params)


async def get_account_info(
    pubkey: str,
    commitment: Optional[str] = None,
    encoding: Optional[str] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """Return all information associated with an account."""
    options = build_options(commitment=commitment, encoding=encoding)
    return await call_rpc(client, "getAccountInfo", with_options([pubkey], options))


async def get_multiple_accounts(
    pubkeys: str,
    commitment: Optional[str] = None,
    encoding: Optional[str] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """Return account information for a comma-separated list of pubkeys."""
    options = build_options(commitment=commitment, encoding=encoding)
    return await call_rpc(client, "getMultipleAccounts", with_options([split_csv(pubkeys)], options))


async def get_program_accounts(
    program_id: str,
    commitment: Optional[str] = None,
    encoding: Optional[str] = None,
    *,
    client=default_solana_client,
) -> ToolResult:
    """Return all accounts owned by a program."""
    options = build_options(commitment=commitment, encoding=encoding)
    return await call_rpc(client, "getProgramAccounts", with_options([program_id], options))
