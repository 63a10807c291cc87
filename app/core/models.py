from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator, model_serializer

from app.core.errors import ErrorKind
from app.mcp.tool_types import ToolDefinition, WireModel

# envelope keys that are left off the wire when empty
_OPTIONAL_ENVELOPE_KEYS = {"result", "error", "errorKind", "error_kind"}


class ServerDescriptor(WireModel):
    id: str
    name: str
    url: str
    description: str = ""
    is_active: bool = True


class ToolCallRequest(WireModel):
    # untyped on purpose: a bad field is reported in the envelope, not as a 422
    tool_name: Any = None
    mcp_server_id: Any = None
    parameters: Any = Field(default_factory=dict)

    @field_validator("parameters", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class ToolInvocationResult(WireModel):
    success: bool
    result: Any = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    time_stamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    duration: int = 0

    @model_serializer(mode="wrap")
    def _drop_empty(self, handler) -> Dict[str, Any]:
        data = handler(self)
        return {k: v for k, v in data.items() if v is not None or k not in _OPTIONAL_ENVELOPE_KEYS}


class ServerTools(WireModel):
    server: ServerDescriptor
    tools: List[ToolDefinition] = Field(default_factory=list)
    error: Optional[str] = None
