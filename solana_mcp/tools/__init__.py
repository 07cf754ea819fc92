"""LLM-facing tool implementations."""

from .token_report import get_token_summary
from .account import get_account_info, get_balance, get_multiple_accounts, get_program_accounts
from .transactions import get_signature_statuses, get_signatures_for_address, get_transaction
from .blocks import get_block, get_block_height, get_block_time, get_latest_blockhash
from .tokens import (
    get_token_account_balance,
    get_token_accounts_by_owner,
    get_token_largest_accounts,
    get_token_supply,
)
from .cluster import get_cluster_nodes, get_epoch_info, get_health, get_version
from . import validators

__all__ = [
    "get_token_summary",
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
    "validators",
]
