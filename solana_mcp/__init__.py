"""
Read-only Solana MCP servers.

Two adapters expose the RugCheck token report API and the Solana JSON-RPC API
as MCP tools. See DESIGN.md for full details.
"""

__all__ = ["config"]
