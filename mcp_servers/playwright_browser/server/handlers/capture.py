"""
Screenshot handler.

The transport is text-only: without a `path` the image bytes are dropped and only
their size (and decoded dimensions, when available) are reported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...imaging import describe_image
from ..types import ToolKind, ToolResult

if TYPE_CHECKING:
    from ...session import SessionHandle
    from ..schemas import ScreenshotArgs


def handle_screenshot(session: SessionHandle, args: ScreenshotArgs) -> ToolResult:
    data = session.current().page.screenshot(**args.options.to_kwargs())
    if args.options.path:
        return ToolResult.text(f"Screenshot saved to: {args.options.path}")

    size = len(data or b"")
    info = describe_image(data)
    if info:
        return ToolResult.text(f"Screenshot taken ({size} bytes, {info})")
    return ToolResult.text(f"Screenshot taken ({size} bytes)")


CAPTURE_HANDLERS: dict[str, tuple] = {
    "screenshot": (handle_screenshot, ToolKind.PAGE),
}
