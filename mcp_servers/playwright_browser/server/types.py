"""
Type definitions for MCP server responses.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..session import SessionHandle
    from .schemas import ToolArguments


class ToolKind(str, Enum):
    """What a tool touches; decides how engine timeouts are reported."""

    SESSION = "session"
    NAVIGATION = "navigation"
    ELEMENT = "element"
    PAGE = "page"

    @property
    def targets_element(self) -> bool:
        return self is ToolKind.ELEMENT


@dataclass(slots=True)
class ToolContent:
    """Single content item in tool response."""

    type: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to MCP content format."""
        return {"type": self.type, "text": self.text}


@dataclass(slots=True)
class ToolResult:
    """Result of a successful tool execution."""

    content: list[ToolContent] = field(default_factory=list)

    @classmethod
    def text(cls, text: str) -> ToolResult:
        """Create result with single text content."""
        return cls(content=[ToolContent(type="text", text=text)])

    @property
    def first_text(self) -> str:
        return self.content[0].text if self.content else ""

    def to_content_list(self) -> list[dict[str, Any]]:
        """Convert to MCP content list format."""
        return [c.to_dict() for c in self.content]

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.to_content_list()}


HandlerFunc = Callable[["SessionHandle", "ToolArguments"], ToolResult]
