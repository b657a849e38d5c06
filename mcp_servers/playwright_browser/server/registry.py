"""
Tool registry: definition, argument model and handler per tool name.

Adding a tool is a registration here, not a new branch in the dispatcher.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..errors import UnknownToolError
from .schemas import ToolArguments, parse_arguments
from .types import HandlerFunc, ToolKind, ToolResult

if TYPE_CHECKING:
    from ..session import SessionHandle

logger = logging.getLogger("mcp.playwright.registry")


@dataclass(slots=True, frozen=True)
class ToolSpec:
    """Specification for a registered tool."""

    name: str
    definition: dict[str, Any]
    arguments: type[ToolArguments]
    handler: HandlerFunc
    kind: ToolKind = ToolKind.PAGE

    def validate(self, raw: Any) -> ToolArguments:
        return parse_arguments(self.name, self.arguments, raw)

    def execute(self, session: SessionHandle, args: ToolArguments) -> ToolResult:
        return self.handler(session, args)


class ToolRegistry:
    """Ordered name -> ToolSpec table; also answers `tools/list`."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}

    def register(self, spec: ToolSpec) -> None:
        if spec.name in self._tools:
            raise ValueError(f"Tool already registered: {spec.name}")
        self._tools[spec.name] = spec

    def require(self, name: str) -> ToolSpec:
        spec = self._tools.get(name)
        if spec is None:
            raise UnknownToolError(name)
        return spec

    def validate(self, name: str, raw: Any) -> ToolArguments:
        """Parse raw arguments for `name`, applying schema defaults."""
        return self.require(name).validate(raw)

    def list_tools(self) -> list[dict[str, Any]]:
        return [spec.definition for spec in self._tools.values()]

    @property
    def tool_names(self) -> list[str]:
        """Get list of registered tool names."""
        return list(self._tools.keys())

    def __len__(self) -> int:
        return len(self._tools)


def create_default_registry() -> ToolRegistry:
    """Registry with every tool from definitions.py, in advertised order."""
    from .definitions import TOOL_DEFINITIONS
    from .handlers import ALL_HANDLERS
    from .schemas import ARGUMENT_MODELS

    registry = ToolRegistry()
    for definition in TOOL_DEFINITIONS:
        name = definition["name"]
        handler, kind = ALL_HANDLERS[name]
        registry.register(
            ToolSpec(
                name=name,
                definition=definition,
                arguments=ARGUMENT_MODELS[name],
                handler=handler,
                kind=kind,
            )
        )
    logger.debug("registered %d tools", len(registry))
    return registry


__all__ = ["ToolRegistry", "ToolSpec", "create_default_registry"]
