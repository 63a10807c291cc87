from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from app.core.models import ServerDescriptor


class ServerDirectory:
    """Read-only, ordered set of mock MCP servers."""

    def __init__(self, servers: Iterable[ServerDescriptor]):
        self._servers = tuple(servers)
        self._by_id: Dict[str, ServerDescriptor] = {s.id: s for s in self._servers}
        self._by_url: Dict[str, ServerDescriptor] = {s.url: s for s in self._servers}

    def list_servers(self) -> List[ServerDescriptor]:
        return list(self._servers)

    def find_server(self, server_id: str) -> Optional[ServerDescriptor]:
        return self._by_id.get(server_id)

    def find_by_url(self, url: str) -> Optional[ServerDescriptor]:
        return self._by_url.get(url)

    def ids(self) -> List[str]:
        return [s.id for s in self._servers]

    def __len__(self) -> int:
        return len(self._servers)
