import pytest

from solana_mcp.config import SPL_TOKEN_PROGRAM_ID
from solana_mcp.tools.tokens import (
    get_token_account_balance,
    get_token_accounts_by_owner,
    get_token_largest_accounts,
    get_token_supply,
    token_account_filter,
)

OWNER = "4Qkev8aNZcqFNSRhQzwyLMFSsi94jHqE8WNVTJzTP99F"
MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
TOKEN_2022 = "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"


def test_filter_defaults_to_spl_token_program():
    assert SPL_TOKEN_PROGRAM_ID == "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
    assert token_account_filter() == {"programId": SPL_TOKEN_PROGRAM_ID}


def test_filter_mint_wins_over_program():
    assert token_account_filter(mint=MINT, program_id=TOKEN_2022) == {"mint": MINT}


def test_filter_explicit_program():
    assert token_account_filter(program_id=TOKEN_2022) == {"programId": TOKEN_2022}


@pytest.mark.asyncio
async def test_accounts_by_owner_only_owner(rpc_client):
    await get_token_accounts_by_owner(OWNER, client=rpc_client)
    assert rpc_client.calls == [
        ("getTokenAccountsByOwner", [OWNER, {"programId": SPL_TOKEN_PROGRAM_ID}]),
    ]


@pytest.mark.asyncio
async def test_accounts_by_owner_with_mint_and_options(rpc_client):
    await get_token_accounts_by_owner(
        OWNER, mint=MINT, program_id=TOKEN_2022, encoding="jsonParsed", client=rpc_client
    )
    assert rpc_client.calls == [
        ("getTokenAccountsByOwner", [OWNER, {"mint": MINT}, {"encoding": "jsonParsed"}]),
    ]


@pytest.mark.asyncio
async def test_token_account_balance(rpc_client):
    await get_token_account_balance("Acct111", commitment="confirmed", client=rpc_client)
    assert rpc_client.calls == [("getTokenAccountBalance", ["Acct111", {"commitment": "confirmed"}])]


@pytest.mark.asyncio
async def test_token_supply_and_largest_accounts(rpc_client):
    await get_token_supply(MINT, client=rpc_client)
    await get_token_largest_accounts(MINT, commitment="finalized", client=rpc_client)
    assert rpc_client.calls == [
        ("getTokenSupply", [MINT]),
        ("getTokenLargestAccounts", [MINT, {"commitment": "finalized"}]),
    ]
