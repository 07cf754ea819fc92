"""Minimal live sanity checks for the Solana MCP tools."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from solana_mcp.api import default_rugcheck_client, default_solana_client  # noqa: E402
from solana_mcp.tools import (  # noqa: E402
    get_balance,
    get_epoch_info,
    get_health,
    get_latest_blockhash,
    get_token_accounts_by_owner,
    get_token_summary,
    get_token_supply,
    get_version,
)

# USDC mint and a well-known holder by default; override via env.
SAMPLE_MINT = os.getenv("SOLANA_SAMPLE_MINT", "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")
SAMPLE_OWNER = os.getenv("SOLANA_SAMPLE_OWNER", "4Qkev8aNZcqFNSRhQzwyLMFSsi94jHqE8WNVTJzTP99F")
# Opt-in to the RugCheck lookup (third-party API, rate limited).
RUN_RUGCHECK = os.getenv("RUN_RUGCHECK_SANITY", "false").lower() in {"1", "true", "yes"}


async def main() -> None:
    try:
        print("Health:", (await get_health()).text)
        print("Version:", (await get_version()).text)
        print("Epoch info:", (await get_epoch_info()).text)
        print("Latest blockhash:", (await get_latest_blockhash(commitment="finalized")).text)
        print("Balance:", (await get_balance(SAMPLE_OWNER)).text)
        print("Token supply:", (await get_token_supply(SAMPLE_MINT)).text)
        accounts = await get_token_accounts_by_owner(SAMPLE_OWNER, encoding="jsonParsed")
        print("Token accounts by owner (chars):", len(accounts.text))

        if RUN_RUGCHECK:
            print("RugCheck summary:", (await get_token_summary(SAMPLE_MINT)).text)
    finally:
        await default_solana_client.aclose()
        await default_rugcheck_client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
