"""FastAPI application exposing both MCP gateways over HTTP."""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from solana_mcp.api import default_rugcheck_client, default_solana_client
from solana_mcp.gateway import (
    APP_VERSION,
    PARSE_ERROR,
    McpGateway,
    jsonrpc_error_payload,
    rugcheck_gateway,
    solana_rpc_gateway,
)
from solana_mcp.logs import configure_logging
from solana_mcp.metrics import default_metrics

logger = logging.getLogger(__name__)
configure_logging()
HEALTH_STATUS = {"status": "ok"}


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Startup
    yield
    # Shutdown
    await default_rugcheck_client.aclose()
    await default_solana_client.aclose()


app = FastAPI(
    title="Solana MCP Server",
    description="Read-only RugCheck and Solana JSON-RPC tools for LLM agents.",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.debug(
        "http %s %s status=%s duration_ms=%.2f",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
        extra={"request_id": request_id},
    )
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for monitoring."""
    return JSONResponse(content=HEALTH_STATUS)


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Return in-process metrics snapshot."""
    return JSONResponse(content=default_metrics.snapshot())


async def _dispatch(gateway: McpGateway, request: Request) -> Response:
    request_id = getattr(request.state, "request_id", None)
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(status_code=400, content=jsonrpc_error_payload(None, PARSE_ERROR, "Parse error"))

    payload = await gateway.handle(body, request_id=request_id)
    if payload is None:
        # Notifications should not return a JSON-RPC response body.
        return Response(status_code=204)
    return JSONResponse(content=payload)


@app.post("/mcp/rugcheck")
async def rugcheck_mcp(request: Request) -> Response:
    """JSON-RPC gateway for the RugCheck tools."""
    return await _dispatch(rugcheck_gateway, request)


@app.post("/mcp/solana")
async def solana_rpc_mcp(request: Request) -> Response:
    """JSON-RPC gateway for the Solana JSON-RPC tools."""
    return await _dispatch(solana_rpc_gateway, request)


# Run with: uvicorn solana_mcp.server:app --reload
