import pytest

from solana_mcp import mcp
from solana_mcp.results import ToolResult

SOLANA_METHOD_TOOLS = {
    "get_balance",
    "get_account_info",
    "get_multiple_accounts",
    "get_program_accounts",
    "get_transaction",
    "get_signatures_for_address",
    "get_signature_statuses",
    "get_block",
    "get_block_height",
    "get_latest_blockhash",
    "get_block_time",
    "get_token_account_balance",
    "get_token_accounts_by_owner",
    "get_token_supply",
    "get_token_largest_accounts",
    "get_cluster_nodes",
    "get_epoch_info",
    "get_version",
    "get_health",
}


def test_registries_cover_every_tool():
    assert set(mcp.RUGCHECK_TOOLS) == {"get_token_summary"}
    assert set(mcp.SOLANA_RPC_TOOLS) == SOLANA_METHOD_TOOLS


def test_list_tools_shape():
    tools = mcp.list_tools(mcp.SOLANA_RPC_TOOLS)
    assert len(tools) == len(SOLANA_METHOD_TOOLS)
    for tool in tools:
        assert set(tool) == {"name", "description", "inputSchema"}
        schema = tool["inputSchema"]
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False
        assert set(schema["required"]) <= set(schema["properties"])


def test_commitment_and_encoding_enums_are_shared():
    props = mcp.SOLANA_RPC_TOOLS["get_account_info"].input_schema["properties"]
    assert props["commitment"]["enum"] == ["finalized", "confirmed", "processed"]
    assert props["encoding"]["enum"] == ["base58", "base64", "jsonParsed"]
    # Forced encodings are not exposed as arguments.
    assert "encoding" not in mcp.SOLANA_RPC_TOOLS["get_transaction"].input_schema["properties"]
    assert "encoding" not in mcp.SOLANA_RPC_TOOLS["get_block"].input_schema["properties"]


def test_token_summary_schema():
    schema = mcp.RUGCHECK_TOOLS["get_token_summary"].input_schema
    assert schema["required"] == ["token_address"]
    assert schema["properties"]["token_address"]["type"] == "string"


def _registry_with(handler, schema=None):
    return {
        "echo": mcp.ToolDefinition(
            name="echo",
            description="Echo",
            input_schema=schema
            or {
                "type": "object",
                "properties": {"value": {"type": "string"}, "commitment": {"type": "string"}},
                "required": ["value"],
                "additionalProperties": False,
            },
            callable=handler,
        )
    }


@pytest.mark.asyncio
async def test_call_tool_drops_null_optionals():
    seen = {}

    async def handler(**kwargs):
        seen.update(kwargs)
        return ToolResult("ok")

    result = await mcp.call_tool(_registry_with(handler), "echo", {"value": "x", "commitment": None})
    assert result == ToolResult("ok")
    assert seen == {"value": "x"}


@pytest.mark.asyncio
async def test_call_tool_unknown_tool():
    with pytest.raises(mcp.ToolCallError, match="Unknown tool: nope"):
        await mcp.call_tool(mcp.SOLANA_RPC_TOOLS, "nope", {})


@pytest.mark.asyncio
async def test_call_tool_invalid_arguments_never_reach_handler():
    async def handler(**kwargs):
        raise AssertionError("handler must not run")

    with pytest.raises(mcp.ToolCallError) as excinfo:
        await mcp.call_tool(_registry_with(handler), "echo", {"value": 3})
    assert excinfo.value.code == -32602


@pytest.mark.asyncio
async def test_call_tool_handler_crash_becomes_text():
    async def handler(**kwargs):
        raise RuntimeError("kaput")

    result = await mcp.call_tool(_registry_with(handler), "echo", {"value": "x"})
    assert result.text == "Error: kaput"
    assert result.is_error
