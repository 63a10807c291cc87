from __future__ import annotations

from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings as default_settings
from app.core.logger import configure_logging, get_logger
from app.mcp.catalog import Catalog, load_catalog
from app.mcp.dispatcher import Dispatcher
from app.mcp.mcp_http import mount_mcp_routes

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, catalog: Optional[Catalog] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ------------------------------------------------------------
    # Seed data: servers + tool lists, immutable for the process lifetime
    # ------------------------------------------------------------
    if catalog is None:
        catalog = load_catalog(settings.servers_path, settings.tools_path)

    dispatcher = Dispatcher(
        catalog.directory,
        catalog.registry,
        latency_s=settings.tool_latency_s,
    )

    app.include_router(mount_mcp_routes(catalog.directory, dispatcher))

    @app.get("/", tags=["meta"])
    def root():
        return {
            "name": settings.app_name,
            "status": "ok",
            "docs": "/docs",
            "endpoints": {
                "servers": "/mcp/servers",
                "server_tools": "/mcp/servers/{server_id}/tools",
                "tools": "/mcp/tools",
                "tool_call": "/mcp/tools/call",
            },
        }

    @app.get("/health", tags=["meta"])
    def health():
        return {"status": "ok", "servers": len(catalog.directory)}

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
        reload=False,
    )
