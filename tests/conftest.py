"""pytest fixtures for the MCP tool dashboard."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import DATA_DIR, Settings
from app.main import create_app
from app.mcp.catalog import Catalog, load_catalog
from app.mcp.dispatcher import Dispatcher


@pytest.fixture()
def catalog() -> Catalog:
    return load_catalog(DATA_DIR / "mcp-servers.json", DATA_DIR / "mcp-tools.json")


@pytest.fixture()
def dispatcher(catalog: Catalog) -> Dispatcher:
    return Dispatcher(catalog.directory, catalog.registry, latency_s=0)


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(tool_latency_ms=0, cors_origins="*")


@pytest.fixture()
def client(test_settings: Settings, catalog: Catalog) -> TestClient:
    app = create_app(test_settings, catalog)
    with TestClient(app) as c:
        yield c
