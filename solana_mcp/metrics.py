"""Minimal in-process metrics recorder (not suitable for multi-process aggregation)."""

from __future__ import annotations

from collections import Counter
from threading import Lock
from typing import Dict, Optional


class MetricsRecorder:
    def __init__(self) -> None:
        self._lock = Lock()
        self._requests = 0
        self._protocol_errors = 0
        self._tool_success: Counter[str] = Counter()
        self._tool_error: Counter[str] = Counter()
        self._error_kinds: Counter[str] = Counter()

    def incr_request(self) -> None:
        with self._lock:
            self._requests += 1

    def incr_protocol_error(self) -> None:
        with self._lock:
            self._protocol_errors += 1

    def record_tool(self, tool: str, *, error_kind: Optional[str] = None) -> None:
        with self._lock:
            if error_kind is None:
                self._tool_success[tool] += 1
            else:
                self._tool_error[tool] += 1
                self._error_kinds[error_kind] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "protocol_errors": self._protocol_errors,
                "tool_success": dict(self._tool_success),
                "tool_error": dict(self._tool_error),
                "error_kinds": dict(self._error_kinds),
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._protocol_errors = 0
            self._tool_success.clear()
            self._tool_error.clear()
            self._error_kinds.clear()


default_metrics = MetricsRecorder()
