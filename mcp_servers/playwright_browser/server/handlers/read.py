"""
Read-only handlers - text, attributes, page info and script evaluation.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..types import ToolKind, ToolResult

if TYPE_CHECKING:
    from ...session import SessionHandle
    from ..schemas import EmptyArgs, EvaluateArgs, GetAttributeArgs, GetTextArgs


def handle_get_text(session: SessionHandle, args: GetTextArgs) -> ToolResult:
    text = session.current().page.text_content(args.selector)
    return ToolResult.text(f"Text content of {args.selector}: {text or '(empty)'}")


def handle_get_attribute(session: SessionHandle, args: GetAttributeArgs) -> ToolResult:
    value = session.current().page.get_attribute(args.selector, args.attribute)
    # Present-but-empty attributes (e.g. disabled="") are reported as such.
    shown = "(not found)" if value is None else value
    return ToolResult.text(f'Attribute "{args.attribute}" of {args.selector}: {shown}')


def handle_get_page_info(session: SessionHandle, args: EmptyArgs) -> ToolResult:
    page = session.current().page
    return ToolResult.text(f"Page Info:\nURL: {page.url}\nTitle: {page.title()}")


def handle_evaluate(session: SessionHandle, args: EvaluateArgs) -> ToolResult:
    result = session.current().page.evaluate(args.expression)
    # Playwright maps both JS undefined and null to None, so both print as null.
    return ToolResult.text(f"Evaluation result: {json.dumps(result, ensure_ascii=False, default=str)}")


READ_HANDLERS: dict[str, tuple] = {
    "get_text": (handle_get_text, ToolKind.ELEMENT),
    "get_attribute": (handle_get_attribute, ToolKind.ELEMENT),
    "evaluate": (handle_evaluate, ToolKind.PAGE),
    "get_page_info": (handle_get_page_info, ToolKind.PAGE),
}
