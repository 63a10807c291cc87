from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "NotFound"
    MISSING_OR_UNKNOWN_SERVER = "MissingOrUnknownServer"
    INVALID_PARAMETERS = "InvalidParameters"
    DIVISION_BY_ZERO = "DivisionByZero"
    UNKNOWN_OPERATION = "UnknownOperation"
    TOOL_EXECUTION_FAILED = "ToolExecutionFailed"


class DashboardError(Exception):
    """Base class for every failure the gateway knows how to report."""

    kind: ErrorKind = ErrorKind.TOOL_EXECUTION_FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(DashboardError):
    kind = ErrorKind.NOT_FOUND


class MissingOrUnknownServer(DashboardError):
    kind = ErrorKind.MISSING_OR_UNKNOWN_SERVER


class InvalidParameters(DashboardError):
    kind = ErrorKind.INVALID_PARAMETERS


class DivisionByZero(DashboardError):
    kind = ErrorKind.DIVISION_BY_ZERO


class UnknownOperation(DashboardError):
    kind = ErrorKind.UNKNOWN_OPERATION


class ToolExecutionFailed(DashboardError):
    kind = ErrorKind.TOOL_EXECUTION_FAILED

    def __init__(self, cause: BaseException):
        super().__init__(f"Tool execution failed: {cause}")
        self.cause = cause

    @property
    def cause_kind(self) -> ErrorKind:
        """Kind of the wrapped fault, or the generic kind for foreign exceptions."""
        if isinstance(self.cause, DashboardError):
            return self.cause.kind
        return self.kind


def kind_of(exc: BaseException) -> Optional[ErrorKind]:
    if isinstance(exc, ToolExecutionFailed):
        return exc.cause_kind
    if isinstance(exc, DashboardError):
        return exc.kind
    return None
