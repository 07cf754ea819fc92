"""Logging setup shared by the stdio and HTTP entry points."""

from __future__ import annotations

import json
import logging
import sys

from solana_mcp.config import LoggingConfig, default_logging_config


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("tool", "request_id", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(config: LoggingConfig | None = None) -> None:
    """
    Install a single stderr handler on the root logger.

    stdout carries the MCP protocol stream, so log records must never go there.
    """
    config = config or default_logging_config
    handler = logging.StreamHandler(sys.stderr)
    if config.format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.INFO),
        handlers=[handler],
    )
