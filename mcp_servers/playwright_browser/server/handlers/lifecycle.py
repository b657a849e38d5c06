"""
Session lifecycle handlers - navigate (starts a session) and close_browser.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..types import ToolKind, ToolResult

if TYPE_CHECKING:
    from ...session import SessionHandle
    from ..schemas import EmptyArgs, NavigateArgs


def handle_navigate(session: SessionHandle, args: NavigateArgs) -> ToolResult:
    """Start a fresh browser session and load the URL in its page."""
    live = session.start(args.browser, headless=args.headless)
    live.page.goto(args.url, **args.options.to_kwargs())
    mode = "headless" if args.headless else "headed"
    return ToolResult.text(f"Successfully navigated to {args.url} using {args.browser} ({mode})")


def handle_close_browser(session: SessionHandle, args: EmptyArgs) -> ToolResult:
    session.dispose()
    return ToolResult.text("Browser closed successfully")


LIFECYCLE_HANDLERS: dict[str, tuple] = {
    "navigate": (handle_navigate, ToolKind.SESSION),
    "close_browser": (handle_close_browser, ToolKind.SESSION),
}
