from __future__ import annotations

import json
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, Iterable, List, Optional


@dataclass(frozen=True)
class ActivityLogEntry:
    tool_name: str
    server_name: str
    success: bool
    duration: int
    error: Optional[str] = None
    time_stamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def from_envelope(cls, tool_name: str, server_name: str, envelope: Dict[str, Any]) -> "ActivityLogEntry":
        return cls(
            tool_name=tool_name,
            server_name=server_name,
            success=bool(envelope.get("success")),
            duration=int(envelope.get("duration") or 0),
            error=envelope.get("error"),
        )


class ActivityLog:
    """In-memory, newest-first ring of recent tool invocations."""

    def __init__(self, limit: int = 10):
        self._entries: Deque[ActivityLogEntry] = deque(maxlen=max(limit, 1))

    def record(self, entry: ActivityLogEntry) -> None:
        self._entries.appendleft(entry)

    def entries(self) -> List[ActivityLogEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def missing_required(parameters: Iterable[Dict[str, Any]], values: Dict[str, Any]) -> List[str]:
    """Names of required parameters still empty; the Execute button stays disabled while any remain."""
    missing = []
    for p in parameters:
        if not p.get("required"):
            continue
        v = values.get(p["name"])
        if v is None or (isinstance(v, str) and v.strip() == ""):
            missing.append(p["name"])
    return missing


def coerce_input(param: Dict[str, Any], raw: Any) -> Any:
    """Convert raw widget input into the parameter's declared type."""
    ptype = param.get("type")
    if raw is None:
        return None

    if ptype == "number":
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return raw
        if isinstance(raw, str) and raw.strip() == "":
            return None
        try:
            return float(raw)
        except (TypeError, ValueError):
            return 0

    if ptype == "boolean":
        if isinstance(raw, bool):
            return raw
        if raw == "":
            return None
        return str(raw).lower() == "true"

    if ptype in ("object", "array"):
        if not isinstance(raw, str):
            return raw
        if raw.strip() == "":
            return None
        try:
            return json.loads(raw)
        except ValueError:
            # let the gateway report the type mismatch
            return raw

    return raw


def param_key_prefix(server_id: str, tool_name: str) -> str:
    return f"param::{server_id}::{tool_name}::"


def param_widget_key(server_id: str, tool_name: str, param_name: str) -> str:
    """Widget state key; scoped per tool so same-named inputs never leak between tools."""
    return param_key_prefix(server_id, tool_name) + param_name


def stale_param_keys(state_keys: Iterable[str], server_id: str, tool_name: str) -> List[str]:
    """Keys to clear when a tool is (re)selected, so its inputs start empty."""
    prefix = param_key_prefix(server_id, tool_name)
    return [k for k in state_keys if isinstance(k, str) and k.startswith(prefix)]
