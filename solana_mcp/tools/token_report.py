"""RugCheck token report tools."""

from __future__ import annotations

import logging

from solana_mcp.api import ApiError, default_rugcheck_client
from solana_mcp.results import RUGCHECK_MESSAGES, ToolResult, failure_result, success_result

logger = logging.getLogger(__name__)


async def get_token_summary(token_address: str, *, client=default_rugcheck_client) -> ToolResult:
    """
    Fetch the RugCheck report summary for a Solana token.

    Args:
        token_address: Token mint address; forwarded without format checks.
        client: RugCheck API client (override for testing).

    Returns:
        The report summary JSON, pretty-printed, or an error text.
    """
    try:
        summary = await client.fetch_token_summary(token_address)
    except ApiError as exc:
        logger.warning("token summary for %s failed: %s", token_address, exc)
        return failure_result(exc, RUGCHECK_MESSAGES)
    except Exception as exc:
        logger.exception("Unexpected error fetching token summary for %s", token_address)
        return failure_result(exc, RUGCHECK_MESSAGES)
    return success_result(summary)
