"""
Configuration helpers for the Solana MCP servers.

This module centralizes endpoint selection, the fixed per-call timeouts and
logging settings. The RPC endpoint is read from the environment once, at import
time; everything else is a constant.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# RugCheck token report API
RUGCHECK_BASE_URL = "https://api.rugcheck.xyz/v1"
RUGCHECK_TIMEOUT = 15.0

# Solana JSON-RPC
SOLANA_RPC_URL_ENV_VAR = "SOLANA_RPC_URL"
DEFAULT_SOLANA_RPC_URL = "https://api.mainnet-beta.solana.com"
SOLANA_RPC_TIMEOUT = 30.0
SPL_TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

LOG_LEVEL = os.getenv("SOLANA_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("SOLANA_MCP_LOG_FORMAT", "json")  # json or plain


def load_rpc_url() -> str:
    """Return the configured Solana RPC endpoint, falling back to mainnet-beta."""
    raw_url = os.getenv(SOLANA_RPC_URL_ENV_VAR)
    if raw_url and raw_url.strip():
        return raw_url.strip()
    return DEFAULT_SOLANA_RPC_URL


SOLANA_RPC_URL = load_rpc_url()


@dataclass(slots=True)
class RugcheckConfig:
    """Runtime configuration for the RugCheck API client."""

    base_url: str = RUGCHECK_BASE_URL
    timeout: float = RUGCHECK_TIMEOUT


@dataclass(slots=True)
class SolanaRpcConfig:
    """Runtime configuration for the Solana JSON-RPC client."""

    rpc_url: str = SOLANA_RPC_URL
    timeout: float = SOLANA_RPC_TIMEOUT


@dataclass(slots=True)
class LoggingConfig:
    level: str = LOG_LEVEL
    format: str = LOG_FORMAT


default_rugcheck_config = RugcheckConfig()
default_solana_config = SolanaRpcConfig()
default_logging_config = LoggingConfig()
