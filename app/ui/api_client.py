from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests


class McpApiClient:
    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[requests.Session] = None):
        """
        Thin HTTP client for the dashboard gateway.

        :param base_url: gateway base including the /mcp prefix
        :param timeout: per-request timeout in seconds
        :param session: optional requests session (tests pass a stub)
        """
        self.base_url = (base_url or "").strip().rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str) -> Any:
        r = self.session.get(f"{self.base_url}{path}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_servers(self) -> List[Dict[str, Any]]:
        return self._get("/servers")

    def get_server_tools(self, server_id: str) -> List[Dict[str, Any]]:
        return self._get(f"/servers/{server_id}/tools")

    def get_all_tools(self) -> List[Dict[str, Any]]:
        return self._get("/tools")

    def call_tool(self, tool_name: str, server_id: str, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """
        Invoke a tool. Transport failures come back as a local failure envelope.
        """
        payload = {"toolName": tool_name, "mcpServerId": server_id, "parameters": parameters}
        try:
            r = self.session.post(f"{self.base_url}/tools/call", json=payload, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            return {
                "success": False,
                "error": str(e) or "Unknown error",
                "timeStamp": datetime.now(timezone.utc).isoformat(),
                "duration": 0,
            }
