"""Tool-usage audit log.

Each tool the graph executes is recorded as one JSON line: the question the
run was answering, the tool picked, its two operands and what it returned.
"""

import json
import os
from datetime import datetime, timezone
from typing import Any

from toolgraph import config

_RESULT_LIMIT = 500


class ToolUsageLogger:
    """Append-only JSON-lines audit trail of tool calls, one file per directory."""

    def __init__(self, log_dir: str = config.TOOL_LOG_DIR):
        os.makedirs(log_dir, exist_ok=True)
        self._log_path = os.path.join(log_dir, "tool_usage.jsonl")

    def record(self, question: str, tool_name: str, a: Any, b: Any, result: Any) -> dict:
        """Append the call to the log and return the entry written."""
        entry = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "question": question,
            "tool": tool_name,
            "a": a,
            "b": b,
            "result": str(result)[:_RESULT_LIMIT],
        }
        with open(self._log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")
        return entry
