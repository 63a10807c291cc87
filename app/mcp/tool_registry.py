from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from .tool_types import ToolDefinition


class ToolRegistry:
    """Tool lists keyed by server id. Keys are assumed to be known server ids."""

    def __init__(self, tools: Mapping[str, Iterable[ToolDefinition]]):
        self._tools: Mapping[str, Tuple[ToolDefinition, ...]] = MappingProxyType(
            {server_id: tuple(defs) for server_id, defs in tools.items()}
        )

    def server_ids(self) -> List[str]:
        return list(self._tools.keys())

    def tools_for(self, server_id: str) -> Optional[List[ToolDefinition]]:
        tools = self._tools.get(server_id)
        return None if tools is None else list(tools)
