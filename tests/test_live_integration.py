import os

import pytest

from solana_mcp.api import RugcheckClient, SolanaRpcClient
from solana_mcp.tools import get_block_height, get_token_accounts_by_owner, get_token_summary, get_version

LIVE = os.getenv("LIVE_SOLANA") in {"1", "true", "yes"}
SAMPLE_MINT = os.getenv("SOLANA_SAMPLE_MINT", "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")
SAMPLE_OWNER = os.getenv("SOLANA_SAMPLE_OWNER", "4Qkev8aNZcqFNSRhQzwyLMFSsi94jHqE8WNVTJzTP99F")


pytestmark = pytest.mark.skipif(not LIVE, reason="Live Solana integration tests are disabled")


@pytest.mark.asyncio
async def test_live_version_and_height():
    client = SolanaRpcClient()
    try:
        version = await get_version(client=client)
        assert "solana-core" in version.text
        height = await get_block_height(commitment="finalized", client=client)
        assert int(height.text) > 0
    finally:
        await client.aclose()


@pytest.mark.asyncio
async def test_live_token_accounts_by_owner():
    client = SolanaRpcClient()
    try:
        result = await get_token_accounts_by_owner(SAMPLE_OWNER, encoding="jsonParsed", client=client)
        assert not result.is_error, result.text
    finally:
        await client.aclose()


@pytest.mark.asyncio
async def test_live_token_summary():
    client = RugcheckClient()
    try:
        result = await get_token_summary(SAMPLE_MINT, client=client)
        assert not result.is_error, result.text
    finally:
        await client.aclose()
