from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Dict, List, Optional

from app.core.errors import InvalidParameters, ToolExecutionFailed
from app.mcp.server_directory import ServerDirectory
from app.mcp.tool_registry import ToolRegistry
from app.mcp.tool_types import DEFAULT_TOOLS, ToolDefinition
from app.tools.mock_tools import run_mock_tool

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Routes tool listing and tool calls for the mock MCP servers.

    - get_tools degrades to the default tool list instead of failing
    - call_tool waits a fixed latency, then runs the mock keyed by tool name
    """

    def __init__(
            self,
            directory: ServerDirectory,
            registry: ToolRegistry,
            *,
            latency_s: float = 0.2,
    ):
        """
        :param directory: servers, looked up by url
        :param registry: tool lists keyed by server id
        :param latency_s: artificial round-trip delay applied to every call
        """
        self.directory = directory
        self.registry = registry
        self.latency_s = latency_s

    @staticmethod
    def default_tools() -> List[ToolDefinition]:
        return list(DEFAULT_TOOLS)

    def get_tools(self, server_url: str) -> List[ToolDefinition]:
        logger.info(f"Getting tools for server: {server_url}")

        server = self.directory.find_by_url(server_url)
        if server is None:
            logger.warning(f"Server not found: {server_url}")
            return self.default_tools()

        tools = self.registry.tools_for(server.id)
        if tools is None:
            logger.warning(f"Tools not found for server: {server.id}")
            return self.default_tools()

        return tools

    def find_tool(self, server_url: str, tool_name: str) -> Optional[ToolDefinition]:
        for tool in self.get_tools(server_url):
            if tool.name == tool_name:
                return tool
        return None

    def validate_parameters(self, server_url: str, tool_name: str, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """
        Check parameters against the tool's declared types and fill optional defaults.

        Tool names the server does not declare are passed through unchecked.

        :return: a new parameter mapping
        :raises InvalidParameters: on a missing required parameter or a type mismatch
        """
        tool = self.find_tool(server_url, tool_name)
        if tool is None:
            return dict(parameters)

        out = dict(parameters)
        problems: List[str] = []
        for param in tool.parameters:
            value = out.get(param.name)
            if value is None:
                if param.required:
                    problems.append(f"'{param.name}' is required")
                elif param.default is not None:
                    out[param.name] = copy.deepcopy(param.default)
                continue
            if not param.accepts(value):
                problems.append(f"'{param.name}' must be of type {param.type}, got {type(value).__name__}")

        if problems:
            raise InvalidParameters(f"Invalid parameters for {tool_name}: " + "; ".join(problems))
        return out

    async def call_tool(self, server_url: str, tool_name: str, parameters: Dict[str, Any]) -> Any:
        logger.info(f"Calling tool {tool_name} on {server_url}")
        try:
            await asyncio.sleep(self.latency_s)
            return run_mock_tool(tool_name, parameters)
        except Exception as e:
            logger.error(f"Tool call failed: {e}")
            raise ToolExecutionFailed(e) from e
