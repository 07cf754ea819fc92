"""
Tool registries for the two MCP servers.

Each registry maps a tool name to its description, JSON input schema and async
handler. The registries are built once at import and never change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from solana_mcp.results import ERROR_UNKNOWN, ToolResult
from solana_mcp.tools import (
    get_account_info,
    get_balance,
    get_block,
    get_block_height,
    get_block_time,
    get_cluster_nodes,
    get_epoch_info,
    get_health,
    get_latest_blockhash,
    get_multiple_accounts,
    get_program_accounts,
    get_signature_statuses,
    get_signatures_for_address,
    get_token_account_balance,
    get_token_accounts_by_owner,
    get_token_largest_accounts,
    get_token_summary,
    get_token_supply,
    get_transaction,
    get_version,
)
from solana_mcp.tools.validators import ACCOUNT_ENCODINGS, COMMITMENT_LEVELS, validate_arguments

logger = logging.getLogger(__name__)

ToolCallable = Callable[..., Awaitable[ToolResult]]


@dataclass(slots=True, frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Dict[str, Any]
    callable: ToolCallable


class ToolCallError(Exception):
    """Raised when a tool call is rejected before reaching its handler."""

    def __init__(self, message: str, *, code: int = -32602) -> None:
        super().__init__(message)
        self.code = code


def _string(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


def _commitment() -> Dict[str, Any]:
    return {
        "type": "string",
        "enum": list(COMMITMENT_LEVELS),
        "description": "Commitment level (finalized, confirmed, processed)",
    }


def _encoding() -> Dict[str, Any]:
    return {
        "type": "string",
        "enum": list(ACCOUNT_ENCODINGS),
        "description": "Account data encoding (base58, base64, jsonParsed)",
    }


def _slot() -> Dict[str, Any]:
    return {"type": "integer", "minimum": 0, "description": "Slot number"}


def _max_tx_version() -> Dict[str, Any]:
    return {
        "type": "integer",
        "minimum": 0,
        "description": "Highest transaction version to return (set 0 to include versioned transactions)",
    }


def _object_schema(properties: Dict[str, Any], required: Optional[List[str]] = None) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": required or [],
        "additionalProperties": False,
    }


def _tool(name: str, description: str, schema: Dict[str, Any], handler: ToolCallable) -> ToolDefinition:
    return ToolDefinition(name=name, description=description, input_schema=schema, callable=handler)


def _registry(*tools: ToolDefinition) -> Dict[str, ToolDefinition]:
    return {tool.name: tool for tool in tools}


RUGCHECK_TOOLS: Dict[str, ToolDefinition] = _registry(
    _tool(
        "get_token_summary",
        "Get a token report summary from RugCheck API for a given Solana token address",
        _object_schema(
            {"token_address": _string("The Solana token contract address")},
            ["token_address"],
        ),
        get_token_summary,
    ),
)

SOLANA_RPC_TOOLS: Dict[str, ToolDefinition] = _registry(
    _tool(
        "get_balance",
        "Get the SOL balance (in lamports) of an account.",
        _object_schema(
            {"pubkey": _string("Account public key (base58)"), "commitment": _commitment()},
            ["pubkey"],
        ),
        get_balance,
    ),
    _tool(
        "get_account_info",
        "Get all information associated with an account.",
        _object_schema(
            {
                "pubkey": _string("Account public key (base58)"),
                "commitment": _commitment(),
                "encoding": _encoding(),
            },
            ["pubkey"],
        ),
        get_account_info,
    ),
    _tool(
        "get_multiple_accounts",
        "Get account information for several accounts at once.",
        _object_schema(
            {
                "pubkeys": _string("Comma-separated list of account public keys"),
                "commitment": _commitment(),
                "encoding": _encoding(),
            },
            ["pubkeys"],
        ),
        get_multiple_accounts,
    ),
    _tool(
        "get_program_accounts",
        "Get all accounts owned by a program.",
        _object_schema(
            {
                "program_id": _string("Program public key (base58)"),
                "commitment": _commitment(),
                "encoding": _encoding(),
            },
            ["program_id"],
        ),
        get_program_accounts,
    ),
    _tool(
        "get_transaction",
        "Get a confirmed transaction by signature (jsonParsed encoding).",
        _object_schema(
            {
                "signature": _string("Transaction signature (base58)"),
                "commitment": _commitment(),
                "max_supported_transaction_version": _max_tx_version(),
            },
            ["signature"],
        ),
        get_transaction,
    ),
    _tool(
        "get_signatures_for_address",
        "Get confirmed transaction signatures involving an address, newest first.",
        _object_schema(
            {
                "address": _string("Account address (base58)"),
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 1000,
                    "description": "Maximum signatures to return (1-1000)",
                },
                "before": _string("Start searching backwards from this signature"),
                "until": _string("Search until this signature"),
                "commitment": _commitment(),
            },
            ["address"],
        ),
        get_signatures_for_address,
    ),
    _tool(
        "get_signature_statuses",
        "Get the statuses of a list of transaction signatures.",
        _object_schema(
            {
                "signatures": _string("Comma-separated list of transaction signatures"),
                "search_transaction_history": {
                    "type": "boolean",
                    "description": "Search the ledger beyond the recent status cache",
                },
            },
            ["signatures"],
        ),
        get_signature_statuses,
    ),
    _tool(
        "get_block",
        "Get a confirmed block with full, parsed transaction details.",
        _object_schema(
            {
                "slot": _slot(),
                "commitment": _commitment(),
                "max_supported_transaction_version": _max_tx_version(),
            },
            ["slot"],
        ),
        get_block,
    ),
    _tool(
        "get_block_height",
        "Get the current block height.",
        _object_schema({"commitment": _commitment()}),
        get_block_height,
    ),
    _tool(
        "get_latest_blockhash",
        "Get the latest blockhash and its last valid block height.",
        _object_schema({"commitment": _commitment()}),
        get_latest_blockhash,
    ),
    _tool(
        "get_block_time",
        "Get the estimated production time of a block (Unix timestamp).",
        _object_schema({"slot": _slot()}, ["slot"]),
        get_block_time,
    ),
    _tool(
        "get_token_account_balance",
        "Get the token balance of an SPL token account.",
        _object_schema(
            {"token_account": _string("Token account public key (base58)"), "commitment": _commitment()},
            ["token_account"],
        ),
        get_token_account_balance,
    ),
    _tool(
        "get_token_accounts_by_owner",
        "Get all SPL token accounts held by an owner, filtered by mint or token program.",
        _object_schema(
            {
                "owner": _string("Owner public key (base58)"),
                "mint": _string("Only accounts for this token mint"),
                "program_id": _string("Token program id (defaults to the SPL token program)"),
                "commitment": _commitment(),
                "encoding": _encoding(),
            },
            ["owner"],
        ),
        get_token_accounts_by_owner,
    ),
    _tool(
        "get_token_supply",
        "Get the total supply of an SPL token.",
        _object_schema({"mint": _string("Token mint address"), "commitment": _commitment()}, ["mint"]),
        get_token_supply,
    ),
    _tool(
        "get_token_largest_accounts",
        "Get the 20 largest accounts of an SPL token.",
        _object_schema({"mint": _string("Token mint address"), "commitment": _commitment()}, ["mint"]),
        get_token_largest_accounts,
    ),
    _tool(
        "get_cluster_nodes",
        "Get information about all nodes participating in the cluster.",
        _object_schema({}),
        get_cluster_nodes,
    ),
    _tool(
        "get_epoch_info",
        "Get information about the current epoch.",
        _object_schema({"commitment": _commitment()}),
        get_epoch_info,
    ),
    _tool(
        "get_version",
        "Get the Solana software version running on the node.",
        _object_schema({}),
        get_version,
    ),
    _tool(
        "get_health",
        "Get the health of the RPC node.",
        _object_schema({}),
        get_health,
    ),
)


def list_tools(registry: Mapping[str, ToolDefinition]) -> List[Dict[str, Any]]:
    """Return the MCP ``tools/list`` entries for a registry."""
    return [
        {
            "name": tool.name,
            "description": tool.description,
            "inputSchema": tool.input_schema,
        }
        for tool in registry.values()
    ]


async def call_tool(
    registry: Mapping[str, ToolDefinition],
    tool_name: str,
    arguments: Optional[Mapping[str, Any]] = None,
) -> ToolResult:
    """
    Validate arguments and dispatch to a tool by name.

    Raises:
        ToolCallError: unknown tool or arguments that fail the schema checks.
    """
    arguments = dict(arguments or {})
    tool = registry.get(tool_name)
    if tool is None:
        raise ToolCallError(f"Unknown tool: {tool_name}")

    problem = validate_arguments(tool.input_schema, arguments)
    if problem is not None:
        raise ToolCallError(f"Invalid arguments for {tool_name}: {problem}")

    supplied = {key: value for key, value in arguments.items() if value is not None}
    try:
        return await tool.callable(**supplied)
    except Exception as exc:
        logger.exception("Unexpected error while calling tool %s", tool_name)
        return ToolResult(f"Error: {str(exc) or 'Unknown error'}", ERROR_UNKNOWN)
