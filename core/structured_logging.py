"""Shared structured JSON logging helpers."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any


def emit_json_event(
    event_type: str,
    *,
    run_id: str | None = None,
    level: str = "info",
    **payload: Any,
) -> str:
    """
    Emit one JSON event line to stdout and return the rendered line.

    ``run_id`` is only rendered when given; library diagnostics carry none.
    """
    event: dict[str, Any] = {
        "event_type": event_type,
        "level": level,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if run_id is not None:
        event["run_id"] = run_id
    event.update(payload)
    line = json.dumps(event, ensure_ascii=True, sort_keys=True, default=str)
    print(line)
    return line


def emit_diagnostic(event_type: str, **payload: Any) -> str:
    """Emit a non-fatal warning event (rejected assignment, failed parse)."""
    return emit_json_event(event_type, level="warning", **payload)
