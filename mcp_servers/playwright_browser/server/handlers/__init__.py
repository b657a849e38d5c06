"""
Tool handlers organized by domain.

All handlers follow the signature: (session, parsed_arguments) -> ToolResult.
Each module exports a `*_HANDLERS` table of name -> (handler, ToolKind).
"""

from .capture import CAPTURE_HANDLERS
from .elements import ELEMENT_HANDLERS
from .lifecycle import LIFECYCLE_HANDLERS
from .navigation import NAVIGATION_HANDLERS
from .read import READ_HANDLERS

# Aggregate all handlers
ALL_HANDLERS: dict[str, tuple] = {
    **LIFECYCLE_HANDLERS,
    **NAVIGATION_HANDLERS,
    **ELEMENT_HANDLERS,
    **READ_HANDLERS,
    **CAPTURE_HANDLERS,
}

__all__ = [
    "ALL_HANDLERS",
    "CAPTURE_HANDLERS",
    "ELEMENT_HANDLERS",
    "LIFECYCLE_HANDLERS",
    "NAVIGATION_HANDLERS",
    "READ_HANDLERS",
]
