import json

from solana_mcp.api.errors import (
    HttpStatusError,
    InvalidResponseError,
    RequestTimeoutError,
    RpcResponseError,
    TransportError,
)
from solana_mcp.results import (
    ERROR_HTTP_STATUS,
    ERROR_RPC,
    ERROR_TIMEOUT,
    ERROR_UNKNOWN,
    RUGCHECK_MESSAGES,
    SOLANA_RPC_MESSAGES,
    ToolResult,
    failure_result,
    success_result,
)


def test_success_result_is_pretty_printed_json():
    payload = {"mint": "So111", "risks": [{"name": "Mutable metadata", "score": 100}], "label": "café"}
    result = success_result(payload)
    assert result.text == json.dumps(payload, indent=2, ensure_ascii=False)
    assert json.loads(result.text) == payload
    assert "café" in result.text
    assert not result.is_error


def test_to_content_has_exactly_one_text_segment():
    content = ToolResult("hello").to_content()
    assert content == {"content": [{"type": "text", "text": "hello"}]}
    assert "isError" not in ToolResult("Error: x", ERROR_UNKNOWN).to_content()


def test_timeout_messages_per_service():
    assert failure_result(RequestTimeoutError(15.0), RUGCHECK_MESSAGES) == ToolResult(
        "Error: Request timed out after 15 seconds", ERROR_TIMEOUT
    )
    assert failure_result(RequestTimeoutError(30.0), SOLANA_RPC_MESSAGES) == ToolResult(
        "Error: Request timed out after 30s", ERROR_TIMEOUT
    )


def test_http_status_messages_per_service():
    exc = HttpStatusError(404, "Not Found")
    assert failure_result(exc, RUGCHECK_MESSAGES).text == (
        "Error: Failed to fetch token summary. Status: 404 Not Found"
    )
    assert failure_result(exc, SOLANA_RPC_MESSAGES).text == "Error: 404 Not Found"
    assert failure_result(exc, SOLANA_RPC_MESSAGES).error_kind == ERROR_HTTP_STATUS


def test_rpc_error_is_compact_json():
    exc = RpcResponseError({"code": -32602, "message": "Invalid param"})
    result = failure_result(exc, SOLANA_RPC_MESSAGES)
    assert result.text == 'RPC Error: {"code":-32602,"message":"Invalid param"}'
    assert result.error_kind == ERROR_RPC


def test_other_errors_use_message_or_fallback():
    assert failure_result(TransportError("connection refused"), SOLANA_RPC_MESSAGES).text == (
        "Error: connection refused"
    )
    assert failure_result(InvalidResponseError("Expecting value"), RUGCHECK_MESSAGES).text == (
        "Error: Expecting value"
    )
    assert failure_result(RuntimeError(), RUGCHECK_MESSAGES) == ToolResult("Error: Unknown error", ERROR_UNKNOWN)
