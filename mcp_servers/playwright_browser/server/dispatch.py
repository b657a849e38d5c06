"""
Tool call dispatcher.

Routes a `tools/call` to its registered handler and translates anything the
automation engine raises into the closed `ToolError` taxonomy. Each call is
attempted exactly once; nothing is retried or rolled back.
"""

from __future__ import annotations

import logging
from typing import Any

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..errors import ElementNotFoundError, ToolError, ToolExecutionError, ToolTimeoutError
from ..session import SessionHandle
from .registry import ToolRegistry, create_default_registry
from .types import ToolResult

logger = logging.getLogger("mcp.playwright.dispatch")


def _engine_message(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    return message if isinstance(message, str) and message else str(exc)


class Dispatcher:
    """Owns the session handle and the registry for one server process."""

    def __init__(self, session: SessionHandle, registry: ToolRegistry | None = None) -> None:
        self.session = session
        self.registry = registry or create_default_registry()

    def list_tools(self) -> list[dict[str, Any]]:
        return self.registry.list_tools()

    def dispatch(self, name: str, arguments: Any) -> ToolResult:
        """
        Validate and run one tool call.

        Raises:
            UnknownToolError: no tool named `name`
            ValidationError: arguments do not match the tool schema
            NoSessionError: tool needs a page and none is open
            SessionStartError: navigate could not launch the browser
            ToolExecutionError: the engine failed (ElementNotFoundError / ToolTimeoutError on timeouts)
        """
        spec = self.registry.require(name)
        args = spec.validate(arguments)

        try:
            return spec.execute(self.session, args)
        except ToolError:
            raise
        except PlaywrightTimeoutError as exc:
            if spec.kind.targets_element:
                raise ElementNotFoundError(_engine_message(exc)) from exc
            raise ToolTimeoutError(_engine_message(exc)) from exc
        except PlaywrightError as exc:
            raise ToolExecutionError(_engine_message(exc)) from exc


__all__ = ["Dispatcher"]
