import logging

from app.core.config import DATA_DIR, Settings
from app.core.errors import DivisionByZero, ErrorKind, NotFound, ToolExecutionFailed, kind_of
from app.core.logger import configure_logging, get_logger


def test_bundled_seed_files_exist():
    assert (DATA_DIR / "mcp-servers.json").is_file()
    assert (DATA_DIR / "mcp-tools.json").is_file()


def test_latency_conversion():
    assert Settings(tool_latency_ms=250).tool_latency_s == 0.25
    assert Settings(tool_latency_ms=-5).tool_latency_s == 0


def test_cors_origin_list():
    assert Settings(cors_origins="http://a, http://b").cors_origin_list == ["http://a", "http://b"]
    assert Settings(cors_origins="").cors_origin_list == ["*"]


def test_kind_of():
    assert kind_of(NotFound("x")) == ErrorKind.NOT_FOUND
    assert kind_of(ToolExecutionFailed(DivisionByZero("Division by zero"))) == ErrorKind.DIVISION_BY_ZERO
    assert kind_of(ValueError("x")) is None


def test_configure_logging_applies_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        configure_logging("not-a-level")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
    assert get_logger("app.test").name == "app.test"
