from solana_mcp.config import (
    DEFAULT_SOLANA_RPC_URL,
    RUGCHECK_BASE_URL,
    RUGCHECK_TIMEOUT,
    SOLANA_RPC_TIMEOUT,
    RugcheckConfig,
    SolanaRpcConfig,
    load_rpc_url,
)


def test_load_rpc_url_default(monkeypatch):
    monkeypatch.delenv("SOLANA_RPC_URL", raising=False)
    assert load_rpc_url() == DEFAULT_SOLANA_RPC_URL == "https://api.mainnet-beta.solana.com"


def test_load_rpc_url_from_env(monkeypatch):
    monkeypatch.setenv("SOLANA_RPC_URL", " https://rpc.example.com/?api-key=abc ")
    assert load_rpc_url() == "https://rpc.example.com/?api-key=abc"


def test_load_rpc_url_blank_env_falls_back(monkeypatch):
    monkeypatch.setenv("SOLANA_RPC_URL", "")
    assert load_rpc_url() == DEFAULT_SOLANA_RPC_URL


def test_fixed_timeouts():
    assert RUGCHECK_TIMEOUT == 15.0
    assert SOLANA_RPC_TIMEOUT == 30.0
    assert RugcheckConfig().timeout == 15.0
    assert RugcheckConfig().base_url == RUGCHECK_BASE_URL == "https://api.rugcheck.xyz/v1"
    assert SolanaRpcConfig(rpc_url="http://localhost:8899").rpc_url == "http://localhost:8899"
