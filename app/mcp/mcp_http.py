from __future__ import annotations

import logging
import time
from typing import Any, List

from fastapi import APIRouter, Body, HTTPException

from app.core.errors import ErrorKind, InvalidParameters, MissingOrUnknownServer, kind_of
from app.core.models import ServerDescriptor, ServerTools, ToolCallRequest, ToolInvocationResult
from app.mcp.dispatcher import Dispatcher
from app.mcp.server_directory import ServerDirectory
from app.mcp.tool_types import ToolDefinition

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return int(round((time.perf_counter() - start) * 1000))


def mount_mcp_routes(directory: ServerDirectory, dispatcher: Dispatcher) -> APIRouter:
    r = APIRouter(prefix="/mcp", tags=["mcp"])

    @r.get("/servers", response_model=List[ServerDescriptor])
    def list_servers() -> List[ServerDescriptor]:
        logger.info("Fetching available MCP servers")
        return directory.list_servers()

    @r.get("/servers/{server_id}/tools", response_model=List[ToolDefinition])
    def server_tools(server_id: str) -> List[ToolDefinition]:
        logger.info(f"Fetching tools for server: {server_id}")
        server = directory.find_server(server_id)
        if server is None:
            raise HTTPException(status_code=404, detail=f"Server not found: {server_id}")
        return dispatcher.get_tools(server.url)

    @r.post("/tools/call", response_model=ToolInvocationResult)
    async def call_tool(body: Any = Body(default=None)) -> ToolInvocationResult:
        start = time.perf_counter()
        try:
            if not isinstance(body, dict):
                raise InvalidParameters("request body must be a JSON object")
            req = ToolCallRequest.model_validate(body)

            logger.info(f"Calling tool: {req.tool_name}")

            if req.mcp_server_id is None or req.mcp_server_id == "":
                raise MissingOrUnknownServer("mcpServerId is required but was not provided")

            server = directory.find_server(req.mcp_server_id) if isinstance(req.mcp_server_id, str) else None
            if server is None:
                raise MissingOrUnknownServer(
                    f"Server not found: {req.mcp_server_id}. "
                    f"Available servers: {', '.join(directory.ids())}"
                )

            if not req.tool_name:
                raise InvalidParameters("toolName is required but was not provided")
            if not isinstance(req.tool_name, str):
                raise InvalidParameters(f"toolName must be a string, got {type(req.tool_name).__name__}")
            if not isinstance(req.parameters, dict):
                raise InvalidParameters(f"parameters must be an object, got {type(req.parameters).__name__}")

            params = dispatcher.validate_parameters(server.url, req.tool_name, req.parameters)
            result = await dispatcher.call_tool(server.url, req.tool_name, params)

            response = ToolInvocationResult(success=True, result=result, duration=_elapsed_ms(start))
            logger.info(f"Tool call completed successfully in {response.duration}ms")
            return response
        except Exception as e:
            logger.error(f"Tool call failed: {e}")
            return ToolInvocationResult(
                success=False,
                error=str(e),
                error_kind=kind_of(e) or ErrorKind.TOOL_EXECUTION_FAILED,
                duration=_elapsed_ms(start),
            )

    @r.get("/tools", response_model=List[ServerTools], response_model_exclude_none=True)
    def all_tools() -> List[ServerTools]:
        logger.info("Fetching all tools from all servers")
        results: List[ServerTools] = []
        for server in directory.list_servers():
            try:
                results.append(ServerTools(server=server, tools=dispatcher.get_tools(server.url)))
            except Exception as e:
                logger.warning(f"Failed to fetch tools from server {server.name}: {e}")
                results.append(ServerTools(server=server, tools=[], error=str(e)))
        return results

    return r
