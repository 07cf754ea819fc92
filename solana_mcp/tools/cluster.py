"""Cluster and node tools."""

from __future__ import annotations

from typing import Optional

from solana_mcp.api import default_solana_client
from solana_mcp.results import ToolResult
from solana_mcp.tools.rpc import call_rpc
from solana_mcp.tools.validators import build_options, with_options


async def get_cluster_nodes(*, client=default_solana_client) -> ToolResult:
    """Return information about all nodes participating in the cluster."""
    return await call_rpc(client, "getClusterNodes")


async def get_epoch_info(commitment: Optional[str] = None, *, client=default_solana_client) -> ToolResult:
    """Return information about the current epoch."""
    return await call_rpc(client, "getEpochInfo", with_options([], build_options(commitment=commitment)))


async def get_version(*, client=default_solana_client) -> ToolResult:
    return await call_rpc(client, "getVersion")


async def get_health(*, client=default_solana_client) -> ToolResult:
    return await call_rpc(client, "getHealth")
