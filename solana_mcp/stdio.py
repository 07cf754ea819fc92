"""
Stdio transport for the MCP servers.

Each adapter is an ``mcp.server.Server`` whose list/call handlers are backed by
one tool registry. Stdin is read through an asyncio pipe reader rather than a
worker thread, so cancelling the server (Ctrl-C) never waits on a blocked
``readline``.
"""

from __future__ import annotations

import asyncio
import logging
import os
import stat
import sys
import time
from typing import Any, AsyncIterator, BinaryIO, Dict, List, Mapping, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from solana_mcp.api import default_rugcheck_client, default_solana_client
from solana_mcp.gateway import APP_VERSION, RUGCHECK_SERVER_NAME, SOLANA_RPC_SERVER_NAME
from solana_mcp.logs import configure_logging
from solana_mcp.mcp import RUGCHECK_TOOLS, SOLANA_RPC_TOOLS, ToolCallError, ToolDefinition, call_tool
from solana_mcp.metrics import MetricsRecorder, default_metrics

logger = logging.getLogger(__name__)

# Upper bound for a single inbound JSON-RPC line.
LINE_LIMIT = 16 * 1024 * 1024


def build_server(
    name: str,
    registry: Mapping[str, ToolDefinition],
    *,
    metrics: MetricsRecorder = default_metrics,
) -> Server:
    """Create an MCP server exposing ``registry``."""
    server = Server(name, version=APP_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[Tool]:
        return [
            Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)
            for tool in registry.values()
        ]

    # Arguments are checked by the registry's own validator.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(tool_name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        start = time.monotonic()
        try:
            result = await call_tool(registry, tool_name, arguments)
        except ToolCallError as exc:
            logger.warning(
                "tool=%s outcome=rejected error=%s",
                tool_name,
                exc,
                extra={"tool": tool_name, "error": str(exc)},
            )
            raise

        duration_ms = (time.monotonic() - start) * 1000
        metrics.record_tool(tool_name, error_kind=result.error_kind)
        if result.is_error:
            logger.warning(
                "tool=%s outcome=error kind=%s duration_ms=%.2f",
                tool_name,
                result.error_kind,
                duration_ms,
                extra={"tool": tool_name, "error": result.error_kind},
            )
        else:
            logger.info(
                "tool=%s outcome=success duration_ms=%.2f",
                tool_name,
                duration_ms,
                extra={"tool": tool_name},
            )
        return [TextContent(type="text", text=result.text)]

    return server


async def read_pipe_lines(pipe: BinaryIO) -> AsyncIterator[str]:
    """Yield decoded lines from ``pipe`` until EOF."""
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader(limit=LINE_LIMIT)
    transport, _ = await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), pipe)
    try:
        while True:
            line = await reader.readline()
            if not line:
                break
            yield line.decode("utf-8", errors="replace")
    finally:
        transport.close()


def _stdin_lines() -> Optional[AsyncIterator[str]]:
    # Regular files cannot be registered with the event loop; the SDK reads those itself.
    if stat.S_ISREG(os.fstat(sys.stdin.fileno()).st_mode):
        return None
    return read_pipe_lines(sys.stdin.buffer)


async def serve_stdio(server: Server, client) -> None:
    """Run ``server`` over stdio and close ``client`` once the host disconnects."""
    logger.info("mcp server=%s listening on stdio", server.name)
    try:
        async with stdio_server(stdin=_stdin_lines()) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await client.aclose()
    logger.info("mcp server=%s stdin closed, shutting down", server.name)


def _run(server: Server, client) -> None:
    configure_logging()
    try:
        asyncio.run(serve_stdio(server, client))
    except KeyboardInterrupt:
        logger.info("mcp server=%s interrupted", server.name)
    except Exception:
        logger.exception("mcp server=%s failed", server.name)
        raise


rugcheck_server = build_server(RUGCHECK_SERVER_NAME, RUGCHECK_TOOLS)
solana_rpc_server = build_server(SOLANA_RPC_SERVER_NAME, SOLANA_RPC_TOOLS)


def main_rugcheck() -> None:
    """Console entry point for the RugCheck server."""
    _run(rugcheck_server, default_rugcheck_client)


def main_solana_rpc() -> None:
    """Console entry point for the Solana JSON-RPC server."""
    _run(solana_rpc_server, default_solana_client)
