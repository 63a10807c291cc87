from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Union

from app.core.errors import DivisionByZero, UnknownOperation

Number = Union[int, float]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _fmt(n: Any) -> str:
    # 2.0 -> "2", matching what a JSON client typed in
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def text_analyzer(parameters: Dict[str, Any]) -> Dict[str, Any]:
    text = parameters.get("text") or ""
    words = text.split()
    word_count = len(words)
    if word_count > 10:
        sentiment = "positive"
    elif word_count > 5:
        sentiment = "neutral"
    else:
        sentiment = "negative"
    return {
        "wordCount": word_count,
        "sentiment": sentiment,
        "characters": len(text),
        "words": words,
    }


_OPERATIONS: Dict[str, Callable[[Number, Number], Number]] = {
    "add": lambda a, b: a + b,
    "subtract": lambda a, b: a - b,
    "multiply": lambda a, b: a * b,
    "divide": lambda a, b: a / b,
}


def calculator(parameters: Dict[str, Any]) -> Dict[str, Any]:
    operation = parameters.get("operation")
    a = parameters.get("a")
    b = parameters.get("b")

    if operation not in _OPERATIONS:
        raise UnknownOperation(f"Unknown operation: {operation}")
    if operation == "divide" and b == 0:
        raise DivisionByZero("Division by zero")

    return {
        "operation": f"{_fmt(a)} {operation} {_fmt(b)}",
        "result": _OPERATIONS[operation](a, b),
        "timeStamp": _now(),
    }


def echo(tool_name: str, parameters: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "tool": tool_name,
        "parameters": parameters,
        "message": "Mock execution completed successfully",
        "timeStamp": _now(),
        "mock": True,
    }


MOCK_TOOLS: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
    "text_analyzer": text_analyzer,
    "calculator": calculator,
}


def run_mock_tool(tool_name: str, parameters: Dict[str, Any]) -> Dict[str, Any]:
    """Unrecognized tool names succeed with a generic echo instead of failing."""
    fn = MOCK_TOOLS.get(tool_name)
    if fn is None:
        return echo(tool_name, parameters)
    return fn(parameters)
