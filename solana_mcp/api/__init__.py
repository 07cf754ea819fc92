"""HTTP client wrappers for the RugCheck and Solana JSON-RPC APIs."""

from .errors import (
    ApiError,
    HttpStatusError,
    InvalidResponseError,
    RequestTimeoutError,
    RpcResponseError,
    TransportError,
)
from .rugcheck import RugcheckClient, default_rugcheck_client
from .solana_rpc import SolanaRpcClient, default_solana_client

__all__ = [
    "ApiError",
    "HttpStatusError",
    "InvalidResponseError",
    "RequestTimeoutError",
    "RpcResponseError",
    "TransportError",
    "RugcheckClient",
    "SolanaRpcClient",
    "default_rugcheck_client",
    "default_solana_client",
]
