"""
Minimal JSON-RPC 2.0 gateway implementing the MCP tool surface.

Supported methods:
  - initialize
  - notifications/initialized (and other notifications, ignored)
  - ping
  - list_tools / tools/list
  - call_tool / tools/call

The FastAPI app feeds it decoded messages and writes back whatever it returns.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional

from solana_mcp.mcp import (
    RUGCHECK_TOOLS,
    SOLANA_RPC_TOOLS,
    ToolCallError,
    ToolDefinition,
    call_tool,
    list_tools,
)
from solana_mcp.metrics import MetricsRecorder, default_metrics

logger = logging.getLogger(__name__)

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

APP_VERSION = "0.1.0"
RUGCHECK_SERVER_NAME = "rugcheck"
SOLANA_RPC_SERVER_NAME = "solana-rpc"


def jsonrpc_success_payload(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def jsonrpc_error_payload(rpc_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "error": {"code": code, "message": message}}


class McpGateway:
    """Dispatch MCP JSON-RPC messages to one tool registry."""

    def __init__(
        self,
        name: str,
        version: str,
        registry: Mapping[str, ToolDefinition],
        *,
        metrics: MetricsRecorder = default_metrics,
    ) -> None:
        self.name = name
        self.version = version
        self.registry = registry
        self.metrics = metrics

    def _error(self, rpc_id: Any, code: int, message: str, *, method: Optional[str] = None) -> Dict[str, Any]:
        self.metrics.incr_protocol_error()
        logger.debug("mcp outcome=error method=%s id=%s error_code=%s", method, rpc_id, code)
        return jsonrpc_error_payload(rpc_id, code, message)

    async def handle(self, message: Any, *, request_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Handle one decoded JSON-RPC message.

        Returns:
            The response payload, or None for notifications.
        """
        self.metrics.incr_request()
        if not isinstance(message, dict):
            return self._error(None, INVALID_REQUEST, "Invalid request")

        method = message.get("method")
        rpc_id = message.get("id")
        if not isinstance(method, str) or not method:
            return self._error(rpc_id, INVALID_REQUEST, "Invalid request")

        if method == "initialized" or method.startswith("notifications/"):
            logger.debug("mcp notification received method=%s", method, extra={"request_id": request_id})
            return None

        raw_params = message.get("params")
        if raw_params is None:
            params: Dict[str, Any] = {}
        elif isinstance(raw_params, dict):
            params = raw_params
        else:
            return self._error(rpc_id, INVALID_PARAMS, "Invalid params", method=method)

        if method == "initialize":
            protocol_version = params.get("protocolVersion")
            if not isinstance(protocol_version, str) or not protocol_version:
                return self._error(rpc_id, INVALID_PARAMS, "Invalid params", method=method)
            logger.info(
                "mcp initialize server=%s protocol=%s",
                self.name,
                protocol_version,
                extra={"request_id": request_id},
            )
            result = {
                "protocolVersion": protocol_version,
                "serverInfo": {"name": self.name, "version": self.version},
                "capabilities": {"tools": {"listChanged": False}},
            }
            return jsonrpc_success_payload(rpc_id, result)

        if method == "ping":
            return jsonrpc_success_payload(rpc_id, {})

        if method in ("list_tools", "tools/list"):
            return jsonrpc_success_payload(rpc_id, {"tools": list_tools(self.registry)})

        if method in ("call_tool", "tools/call"):
            return await self._call_tool(rpc_id, params, request_id=request_id)

        return self._error(rpc_id, METHOD_NOT_FOUND, "Method not found", method=method)

    async def _call_tool(
        self, rpc_id: Any, params: Dict[str, Any], *, request_id: Optional[str]
    ) -> Dict[str, Any]:
        tool_name = params.get("name") or params.get("tool")
        arguments = params.get("arguments")
        if arguments is None:
            arguments = params.get("params") or {}
        if not isinstance(tool_name, str) or not tool_name.strip():
            return self._error(rpc_id, INVALID_PARAMS, "Invalid params", method="tools/call")
        if not isinstance(arguments, dict):
            return self._error(rpc_id, INVALID_PARAMS, "Invalid params", method="tools/call")

        start = time.monotonic()
        try:
            result = await call_tool(self.registry, tool_name, arguments)
        except ToolCallError as exc:
            logger.warning(
                "tool=%s outcome=rejected error=%s",
                tool_name,
                exc,
                extra={"tool": tool_name, "request_id": request_id, "error": str(exc)},
            )
            return self._error(rpc_id, exc.code, str(exc), method="tools/call")

        duration_ms = (time.monotonic() - start) * 1000
        self.metrics.record_tool(tool_name, error_kind=result.error_kind)
        if result.is_error:
            logger.warning(
                "tool=%s outcome=error kind=%s duration_ms=%.2f",
                tool_name,
                result.error_kind,
                duration_ms,
                extra={"tool": tool_name, "request_id": request_id, "error": result.error_kind},
            )
        else:
            logger.info(
                "tool=%s outcome=success duration_ms=%.2f",
                tool_name,
                duration_ms,
                extra={"tool": tool_name, "request_id": request_id},
            )
        return jsonrpc_success_payload(rpc_id, result.to_content())


rugcheck_gateway = McpGateway(RUGCHECK_SERVER_NAME, APP_VERSION, RUGCHECK_TOOLS)
solana_rpc_gateway = McpGateway(SOLANA_RPC_SERVER_NAME, APP_VERSION, SOLANA_RPC_TOOLS)
