"""
Element tool handlers - click, keyboard input, form controls, waiting and scrolling.

Selectors are passed to Playwright untouched (CSS, text=, xpath=, ...).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..types import ToolKind, ToolResult

if TYPE_CHECKING:
    from ...session import SessionHandle
    from ..schemas import (
        ClickArgs,
        FillArgs,
        PressKeyArgs,
        ScrollArgs,
        SelectOptionArgs,
        TypeArgs,
        WaitForSelectorArgs,
    )

# Unset keys arrive as undefined, so scrollTo keeps the current offset on that axis.
_SCROLL_TO_JS = "({ x, y, behavior }) => window.scrollTo({ left: x, top: y, behavior })"


def handle_click(session: SessionHandle, args: ClickArgs) -> ToolResult:
    session.current().page.click(args.selector, **args.options.to_kwargs())
    return ToolResult.text(f"Successfully clicked on element: {args.selector}")


def handle_type(session: SessionHandle, args: TypeArgs) -> ToolResult:
    session.current().page.type(args.selector, args.text, **args.options.to_kwargs())
    return ToolResult.text(f'Successfully typed "{args.text}" into element: {args.selector}')


def handle_fill(session: SessionHandle, args: FillArgs) -> ToolResult:
    session.current().page.fill(args.selector, args.value, **args.options.to_kwargs())
    return ToolResult.text(f'Successfully filled "{args.value}" into element: {args.selector}')


def handle_press_key(session: SessionHandle, args: PressKeyArgs) -> ToolResult:
    session.current().page.press(args.selector, args.key, **args.options.to_kwargs())
    return ToolResult.text(f'Successfully pressed key "{args.key}" on element: {args.selector}')


def handle_select_option(session: SessionHandle, args: SelectOptionArgs) -> ToolResult:
    session.current().page.select_option(args.selector, args.values, **args.options.to_kwargs())
    shown = json.dumps(args.values, ensure_ascii=False, separators=(",", ":"))
    return ToolResult.text(f"Successfully selected option(s) {shown} in element: {args.selector}")


def handle_wait_for_selector(session: SessionHandle, args: WaitForSelectorArgs) -> ToolResult:
    session.current().page.wait_for_selector(args.selector, **args.options.to_kwargs())
    return ToolResult.text(f"Successfully waited for selector: {args.selector}")


def handle_scroll(session: SessionHandle, args: ScrollArgs) -> ToolResult:
    """Scroll an element into view, or the window to (x, y); no-op when neither is given."""
    page = session.current().page
    if args.selector:
        page.locator(args.selector).scroll_into_view_if_needed()
        return ToolResult.text(f"Successfully scrolled to element: {args.selector}")

    opts = args.options
    if opts.x is not None or opts.y is not None:
        page.evaluate(_SCROLL_TO_JS, opts.to_kwargs())
    return ToolResult.text(f"Successfully scrolled page to position ({opts.x or 0}, {opts.y or 0})")


ELEMENT_HANDLERS: dict[str, tuple] = {
    "click": (handle_click, ToolKind.ELEMENT),
    "type": (handle_type, ToolKind.ELEMENT),
    "wait_for_selector": (handle_wait_for_selector, ToolKind.ELEMENT),
    "fill": (handle_fill, ToolKind.ELEMENT),
    "select_option": (handle_select_option, ToolKind.ELEMENT),
    "scroll": (handle_scroll, ToolKind.ELEMENT),
    "press_key": (handle_press_key, ToolKind.ELEMENT),
}
