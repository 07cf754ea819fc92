"""
Uniform tool results.

Every tool returns exactly one text segment: either the pretty-printed JSON
payload or a human-readable error. The ``error_kind`` tag stays server-side and
only feeds logging and metrics.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from solana_mcp.api.errors import HttpStatusError, RequestTimeoutError, RpcResponseError

ERROR_TIMEOUT = "timeout"
ERROR_HTTP_STATUS = "http_status"
ERROR_RPC = "rpc_error"
ERROR_UNKNOWN = "unknown"


@dataclass(slots=True, frozen=True)
class ToolResult:
    text: str
    error_kind: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error_kind is not None

    def to_content(self) -> Dict[str, Any]:
        """Render the MCP ``tools/call`` result body."""
        return {"content": [{"type": "text", "text": self.text}]}


@dataclass(slots=True, frozen=True)
class ErrorMessages:
    """Per-service wording for HTTP status and timeout failures."""

    http_status: str
    timeout: str


RUGCHECK_MESSAGES = ErrorMessages(
    http_status="Error: Failed to fetch token summary. Status: {status} {reason}",
    timeout="Error: Request timed out after {seconds} seconds",
)
SOLANA_RPC_MESSAGES = ErrorMessages(
    http_status="Error: {status} {reason}",
    timeout="Error: Request timed out after {seconds}s",
)


def pretty_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def success_result(payload: Any) -> ToolResult:
    return ToolResult(pretty_json(payload))


def failure_result(exc: BaseException, messages: ErrorMessages) -> ToolResult:
    """Map a transport or RPC failure onto its error text."""
    if isinstance(exc, RequestTimeoutError):
        text = messages.timeout.format(seconds=f"{exc.timeout:g}")
        return ToolResult(text, ERROR_TIMEOUT)
    if isinstance(exc, HttpStatusError):
        text = messages.http_status.format(status=exc.status_code, reason=exc.reason_phrase)
        return ToolResult(text, ERROR_HTTP_STATUS)
    if isinstance(exc, RpcResponseError):
        serialized = json.dumps(exc.error, separators=(",", ":"), ensure_ascii=False)
        return ToolResult(f"RPC Error: {serialized}", ERROR_RPC)
    message = str(exc) or "Unknown error"
    return ToolResult(f"Error: {message}", ERROR_UNKNOWN)
