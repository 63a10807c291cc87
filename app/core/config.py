from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    app_name: str = os.getenv("APP_NAME", "mcp-tool-dashboard")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # seed data
    servers_path: str = os.getenv("MCP_SERVERS_PATH", str(DATA_DIR / "mcp-servers.json"))
    tools_path: str = os.getenv("MCP_TOOLS_PATH", str(DATA_DIR / "mcp-tools.json"))

    tool_latency_ms: int = int(os.getenv("TOOL_LATENCY_MS", "200"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # UI
    api_url: str = os.getenv("API_URL", "http://localhost:3000/mcp")
    activity_log_limit: int = int(os.getenv("ACTIVITY_LOG_LIMIT", "10"))

    @property
    def tool_latency_s(self) -> float:
        return max(self.tool_latency_ms, 0) / 1000.0

    @property
    def cors_origin_list(self) -> List[str]:
        return _split_csv(self.cors_origins) or ["*"]


settings = Settings()
