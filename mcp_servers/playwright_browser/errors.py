"""
Error taxonomy for tool calls.

Every failure that can happen between receiving `tools/call` and producing a
result is one of these. The server shell turns them into a single JSON-RPC
error envelope (see `ToolError.to_rpc_error`).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# JSON-RPC "Internal error". All tool failures share one code; the kind goes in `data`.
TOOL_ERROR_CODE = -32603


class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    NO_SESSION = "no_session"
    SESSION_START = "session_start_failed"
    ELEMENT_NOT_FOUND = "element_not_found"
    TIMEOUT = "timeout"
    EXECUTION = "execution_failed"
    UNKNOWN_TOOL = "unknown_tool"


class ToolError(Exception):
    """Base class for failures surfaced to the MCP client."""

    kind: ErrorKind = ErrorKind.EXECUTION

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_rpc_error(self, tool: str | None = None) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind.value}
        if tool:
            data["tool"] = tool
        return {
            "code": TOOL_ERROR_CODE,
            "message": f"Tool execution failed: {self.message}",
            "data": data,
        }


class UnknownToolError(ToolError):
    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ValidationError(ToolError):
    """Arguments do not match the tool's schema. Raised before any state change."""

    kind = ErrorKind.VALIDATION


class NoSessionError(ToolError):
    kind = ErrorKind.NO_SESSION

    def __init__(self, message: str = "No active browser session. Please navigate to a URL first.") -> None:
        super().__init__(message)


class SessionStartError(ToolError):
    """Browser, context or page could not be created. The session is left empty."""

    kind = ErrorKind.SESSION_START


class ToolExecutionError(ToolError):
    """The automation engine raised while performing the tool's action."""

    kind = ErrorKind.EXECUTION


class ElementNotFoundError(ToolExecutionError):
    kind = ErrorKind.ELEMENT_NOT_FOUND


class ToolTimeoutError(ToolExecutionError):
    kind = ErrorKind.TIMEOUT


__all__ = [
    "TOOL_ERROR_CODE",
    "ErrorKind",
    "ToolError",
    "UnknownToolError",
    "ValidationError",
    "NoSessionError",
    "SessionStartError",
    "ToolExecutionError",
    "ElementNotFoundError",
    "ToolTimeoutError",
]
