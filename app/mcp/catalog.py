from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import TypeAdapter

from app.core.models import ServerDescriptor
from app.mcp.server_directory import ServerDirectory
from app.mcp.tool_registry import ToolRegistry
from app.mcp.tool_types import ToolDefinition

logger = logging.getLogger(__name__)

_servers_adapter = TypeAdapter(List[ServerDescriptor])
_tools_adapter = TypeAdapter(Dict[str, List[ToolDefinition]])


@dataclass(frozen=True)
class Catalog:
    """Seed data loaded once at startup: the server directory and its tool table."""

    directory: ServerDirectory
    registry: ToolRegistry


def build_catalog(servers: Any, tools: Any) -> Catalog:
    """
    Validate raw seed data (already decoded JSON) into a Catalog.

    :param servers: list of server descriptors (camelCase keys)
    :param tools: mapping server id -> list of tool definitions
    :raises pydantic.ValidationError: if either structure is malformed
    """
    directory = ServerDirectory(_servers_adapter.validate_python(servers))
    registry = ToolRegistry(_tools_adapter.validate_python(tools))

    known = set(directory.ids())
    for server_id in registry.server_ids():
        if server_id not in known:
            logger.warning(f"Tool list registered for unknown server id: {server_id}")

    return Catalog(directory=directory, registry=registry)


def _read_json(path: Union[str, Path]) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_catalog(servers_path: Union[str, Path], tools_path: Union[str, Path]) -> Catalog:
    catalog = build_catalog(_read_json(servers_path), _read_json(tools_path))
    logger.info(
        f"Loaded {len(catalog.directory)} servers from {servers_path}, "
        f"tool lists for {len(catalog.registry.server_ids())} servers from {tools_path}"
    )
    return catalog
