import asyncio
import time

import pytest

from app.core.errors import (
    DivisionByZero,
    ErrorKind,
    InvalidParameters,
    ToolExecutionFailed,
    UnknownOperation,
)
from app.mcp.catalog import build_catalog
from app.mcp.dispatcher import Dispatcher

CALC_URL = "http://localhost:3004/mcp"
TEXT_URL = "http://localhost:3003/mcp"


def test_get_tools_returns_registered_lists(dispatcher, catalog):
    for server in catalog.directory.list_servers():
        assert dispatcher.get_tools(server.url) == catalog.registry.tools_for(server.id)


def test_get_tools_unknown_url_falls_back(dispatcher):
    tools = dispatcher.get_tools("http://unknown/mcp")
    assert len(tools) == 1
    assert tools[0].name == "default_tool"
    assert tools[0].parameters[0].name == "input"
    assert tools[0].parameters[0].type == "string"
    assert tools[0].parameters[0].required is True


def test_get_tools_server_without_tool_list_falls_back():
    catalog = build_catalog([{"id": "lonely", "name": "L", "url": "http://lonely"}], {})
    d = Dispatcher(catalog.directory, catalog.registry, latency_s=0)
    assert [t.name for t in d.get_tools("http://lonely")] == ["default_tool"]


def test_call_tool_calculator(dispatcher):
    out = asyncio.run(dispatcher.call_tool(CALC_URL, "calculator", {"operation": "add", "a": 2, "b": 3}))
    assert out["result"] == 5
    assert out["operation"] == "2 add 3"


def test_call_tool_wraps_division_by_zero(dispatcher):
    with pytest.raises(ToolExecutionFailed) as info:
        asyncio.run(dispatcher.call_tool(CALC_URL, "calculator", {"operation": "divide", "a": 1, "b": 0}))
    assert isinstance(info.value.cause, DivisionByZero)
    assert info.value.cause_kind == ErrorKind.DIVISION_BY_ZERO
    assert str(info.value) == "Tool execution failed: Division by zero"


def test_call_tool_wraps_unknown_operation(dispatcher):
    with pytest.raises(ToolExecutionFailed) as info:
        asyncio.run(dispatcher.call_tool(CALC_URL, "calculator", {"operation": "mod", "a": 1, "b": 2}))
    assert isinstance(info.value.cause, UnknownOperation)


def test_call_tool_wraps_foreign_faults(dispatcher):
    with pytest.raises(ToolExecutionFailed) as info:
        asyncio.run(dispatcher.call_tool(CALC_URL, "calculator", {"operation": "add", "a": 1, "b": None}))
    assert isinstance(info.value.cause, TypeError)
    assert info.value.cause_kind == ErrorKind.TOOL_EXECUTION_FAILED


def test_call_tool_unknown_tool_succeeds(dispatcher):
    out = asyncio.run(dispatcher.call_tool(TEXT_URL, "foo", {}))
    assert out["tool"] == "foo"
    assert out["mock"] is True


def test_validate_fills_defaults(dispatcher):
    params = dispatcher.validate_parameters(TEXT_URL, "data_summary", {"record": {"a": 1}})
    assert params == {"record": {"a": 1}, "fields": [], "verbose": False}


def test_validate_rejects_missing_required(dispatcher):
    with pytest.raises(InvalidParameters, match="'b' is required"):
        dispatcher.validate_parameters(CALC_URL, "calculator", {"operation": "add", "a": 1})


def test_validate_rejects_type_mismatch(dispatcher):
    with pytest.raises(InvalidParameters, match="'a' must be of type number"):
        dispatcher.validate_parameters(CALC_URL, "calculator", {"operation": "add", "a": "1", "b": 2})


def test_validate_rejects_bool_as_number(dispatcher):
    with pytest.raises(InvalidParameters):
        dispatcher.validate_parameters(CALC_URL, "calculator", {"operation": "add", "a": True, "b": 2})


def test_validate_skips_undeclared_tools(dispatcher):
    assert dispatcher.validate_parameters(CALC_URL, "foo", {"anything": object}) == {"anything": object}


def test_validate_does_not_mutate_input(dispatcher):
    raw = {"record": {}}
    dispatcher.validate_parameters(TEXT_URL, "data_summary", raw)
    assert raw == {"record": {}}


def test_filled_defaults_are_not_shared_with_the_registry(dispatcher):
    first = dispatcher.validate_parameters(TEXT_URL, "data_summary", {"record": {}})
    first["fields"].append("leak")
    second = dispatcher.validate_parameters(TEXT_URL, "data_summary", {"record": {}})
    assert second["fields"] == []
    tool = dispatcher.find_tool(TEXT_URL, "data_summary")
    assert [p.default for p in tool.parameters if p.name == "fields"] == [[]]


def test_call_tool_waits_for_latency(catalog):
    d = Dispatcher(catalog.directory, catalog.registry, latency_s=0.05)
    start = time.perf_counter()
    out = asyncio.run(d.call_tool(TEXT_URL, "text_analyzer", {"text": "hi"}))
    elapsed = time.perf_counter() - start
    assert out["wordCount"] == 1
    # asyncio may wake within one clock tick of the deadline
    assert elapsed >= 0.045
