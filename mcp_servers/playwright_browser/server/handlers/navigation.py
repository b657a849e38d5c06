"""
Navigation tool handlers - history and load state of the current page.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..types import ToolKind, ToolResult

if TYPE_CHECKING:
    from ...session import SessionHandle
    from ..schemas import HistoryArgs, WaitForLoadStateArgs


def handle_go_back(session: SessionHandle, args: HistoryArgs) -> ToolResult:
    session.current().page.go_back(**args.options.to_kwargs())
    return ToolResult.text("Successfully navigated back")


def handle_go_forward(session: SessionHandle, args: HistoryArgs) -> ToolResult:
    session.current().page.go_forward(**args.options.to_kwargs())
    return ToolResult.text("Successfully navigated forward")


def handle_reload(session: SessionHandle, args: HistoryArgs) -> ToolResult:
    session.current().page.reload(**args.options.to_kwargs())
    return ToolResult.text("Successfully reloaded page")


def handle_wait_for_load_state(session: SessionHandle, args: WaitForLoadStateArgs) -> ToolResult:
    session.current().page.wait_for_load_state(args.state, **args.options.to_kwargs())
    return ToolResult.text(f"Successfully waited for load state: {args.state}")


NAVIGATION_HANDLERS: dict[str, tuple] = {
    "wait_for_load_state": (handle_wait_for_load_state, ToolKind.NAVIGATION),
    "go_back": (handle_go_back, ToolKind.NAVIGATION),
    "go_forward": (handle_go_forward, ToolKind.NAVIGATION),
    "reload": (handle_reload, ToolKind.NAVIGATION),
}
