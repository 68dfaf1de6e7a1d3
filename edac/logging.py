"""
edac.logging
AUTHOR: carter-vin

Structured JSON event logging for diagnostics

Contract:
- One JSON object per line to stderr (stdout belongs to reports)
- Stable event vocabulary (allowlist)
- UTC timestamps only
- Logger is a value held by its owner, never module-level state
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, TextIO

# Event types
VALID_EVENT_TYPES = {
    "edac_init",
    "edac_reload",
    "edac_close",
    "edac_error",
    "mc_skipped",
    "csrow_skipped",
    "totals_refreshed",
    "report_invalid",
    "no_mc_data",
    "fatal",
}

# Severity -> minimum verbosity needed to show it (None = always shown)
SEVERITY_VERBOSITY: dict[str, int | None] = {
    "fatal": None,
    "error": 0,
    "verbose": 1,
    "debug": 2,
}


def _truncate_message(value: str, *, limit: int = 200) -> str:
    """
    Cap message length to keep events compact
    """
    if len(value) <= limit:
        return value
    return value[:limit] + f"...[truncated {len(value) - limit} chars]"


# Time: current in UTC ISO 8601
def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class EventLogger:
    """
    Event sink with quiet/verbose gating

    - prog: program name stamped on every event
    - verbose: 0 = errors only, 1 = +verbose, 2 = +debug
    - quiet: hide everything except fatal events
    - enabled: False discards every event (library default)
    """

    prog: str = "edac-util"
    verbose: int = 0
    quiet: bool = False
    stream: TextIO | None = None
    enabled: bool = True

    @classmethod
    def null(cls) -> "EventLogger":
        return cls(enabled=False)

    def wants(self, severity: str) -> bool:
        if severity not in SEVERITY_VERBOSITY:
            raise ValueError(f"invalid severity: {severity}")
        if not self.enabled:
            return False
        threshold = SEVERITY_VERBOSITY[severity]
        if threshold is None:
            return True
        if self.quiet:
            return False
        return self.verbose >= threshold

    def emit(self, event_type: str, *, severity: str = "debug", **fields: Any) -> None:
        """
        Emit structured event line

        Rules:
        - event_type in VALID_EVENT_TYPES (checked even when suppressed)
        - event_type, utc_now, prog, severity always present
        - sort_keys + compact separators for format
        """
        if event_type not in VALID_EVENT_TYPES:
            raise ValueError(f"invalid event_type: {event_type}")

        if not self.wants(severity):
            return

        if "message" in fields and isinstance(fields["message"], str):
            # Avoid emitting long strings in event fields
            fields["message"] = _truncate_message(fields["message"])

        payload: dict[str, Any] = {
            "event_type": event_type,
            "utc_now": utc_now_iso(),
            "prog": self.prog,
            "severity": severity,
            **fields,
        }

        # Resolve stderr late so test capture sees the live stream
        stream = self.stream if self.stream is not None else sys.stderr
        print(
            json.dumps(
                payload,
                sort_keys=True,
                separators=(",", ":"),
                ensure_ascii=False,
            ),
            file=stream,
        )
