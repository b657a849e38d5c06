"""Server package for the Playwright MCP server.

Keep this package import light: importing `mcp_servers.playwright_browser.server.*`
should not eagerly pull the handlers and the Playwright driver.
"""

from __future__ import annotations

from typing import Any

__all__ = ["Dispatcher", "ToolRegistry", "create_default_registry"]


def __getattr__(name: str) -> Any:  # pragma: no cover
    if name == "Dispatcher":
        from .dispatch import Dispatcher

        return Dispatcher
    if name in {"ToolRegistry", "create_default_registry"}:
        from .registry import ToolRegistry, create_default_registry

        return {"ToolRegistry": ToolRegistry, "create_default_registry": create_default_registry}[name]
    raise AttributeError(name)
