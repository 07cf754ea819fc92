import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from solana_mcp.metrics import default_metrics  # noqa: E402


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


class RecordingRpcClient:
    """Stub Solana client that records calls and returns a canned result."""

    def __init__(self, result=None, exc=None):
        self.result = result
        self.exc = exc
        self.calls = []

    async def call(self, method, params=()):
        self.calls.append((method, list(params)))
        if self.exc is not None:
            raise self.exc
        return self.result


@pytest.fixture
def rpc_client():
    return RecordingRpcClient(result={"value": 1})


@pytest.fixture
def make_rpc_client():
    return RecordingRpcClient
