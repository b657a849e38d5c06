"""
MCP tool definitions (what `tools/list` advertises).

Order matters: clients show tools in this order, and it is the registration
order of the registry.
"""

from __future__ import annotations

from typing import Any

BROWSER_ENGINES = ["chromium", "firefox", "webkit"]
WAIT_UNTIL_STATES = ["load", "domcontentloaded", "networkidle", "commit"]
LOAD_STATES = ["load", "domcontentloaded", "networkidle"]


def _object(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


_ACTION_OPTIONS = _object(
    {
        "force": {"type": "boolean"},
        "noWaitAfter": {"type": "boolean"},
        "timeout": {"type": "number"},
    }
)

_KEYBOARD_OPTIONS = _object(
    {
        "delay": {"type": "number"},
        "noWaitAfter": {"type": "boolean"},
        "timeout": {"type": "number"},
    }
)

_HISTORY_OPTIONS = _object(
    {
        "timeout": {"type": "number"},
        "waitUntil": {"type": "string", "enum": WAIT_UNTIL_STATES},
    }
)

# ═══════════════════════════════════════════════════════════════════════════════
# NAVIGATION
# ═══════════════════════════════════════════════════════════════════════════════

NAVIGATE_TOOL: dict[str, Any] = {
    "name": "navigate",
    "description": "Navigate to a URL in the browser (starts a fresh browser session)",
    "inputSchema": _object(
        {
            "url": {"type": "string", "format": "uri", "description": "URL to navigate to"},
            "browser": {
                "type": "string",
                "enum": BROWSER_ENGINES,
                "default": "chromium",
                "description": "Browser engine to use",
            },
            "headless": {
                "type": "boolean",
                "default": True,
                "description": "Run browser in headless mode",
            },
            "options": _object(
                {
                    "timeout": {"type": "number"},
                    "waitUntil": {"type": "string", "enum": WAIT_UNTIL_STATES},
                    "referer": {"type": "string"},
                }
            ),
        },
        required=["url"],
    ),
}

# ═══════════════════════════════════════════════════════════════════════════════
# ELEMENT INTERACTION
# ═══════════════════════════════════════════════════════════════════════════════

CLICK_TOOL: dict[str, Any] = {
    "name": "click",
    "description": "Click on an element specified by selector",
    "inputSchema": _object(
        {
            "selector": {"type": "string", "description": "CSS selector or text selector"},
            "options": _object(
                {
                    "button": {"type": "string", "enum": ["left", "right", "middle"]},
                    "clickCount": {"type": "number"},
                    "delay": {"type": "number"},
                    "position": _object({"x": {"type": "number"}, "y": {"type": "number"}}),
                    "modifiers": {
                        "type": "array",
                        "items": {"type": "string", "enum": ["Alt", "Control", "Meta", "Shift"]},
                    },
                    "force": {"type": "boolean"},
                    "noWaitAfter": {"type": "boolean"},
                    "trial": {"type": "boolean"},
                    "timeout": {"type": "number"},
                }
            ),
        },
        required=["selector"],
    ),
}

TYPE_TOOL: dict[str, Any] = {
    "name": "type",
    "description": "Type text into an input element",
    "inputSchema": _object(
        {
            "selector": {"type": "string", "description": "CSS selector for the input element"},
            "text": {"type": "string", "description": "Text to type"},
            "options": _KEYBOARD_OPTIONS,
        },
        required=["selector", "text"],
    ),
}

WAIT_FOR_SELECTOR_TOOL: dict[str, Any] = {
    "name": "wait_for_selector",
    "description": "Wait for an element to appear/disappear",
    "inputSchema": _object(
        {
            "selector": {"type": "string", "description": "CSS selector to wait for"},
            "options": _object(
                {
                    "state": {"type": "string", "enum": ["attached", "detached", "visible", "hidden"]},
                    "timeout": {"type": "number"},
                }
            ),
        },
        required=["selector"],
    ),
}

# ═══════════════════════════════════════════════════════════════════════════════
# READ
# ═══════════════════════════════════════════════════════════════════════════════

GET_TEXT_TOOL: dict[str, Any] = {
    "name": "get_text",
    "description": "Get text content of an element",
    "inputSchema": _object(
        {"selector": {"type": "string", "description": "CSS selector of the element"}},
        required=["selector"],
    ),
}

GET_ATTRIBUTE_TOOL: dict[str, Any] = {
    "name": "get_attribute",
    "description": "Get attribute value of an element",
    "inputSchema": _object(
        {
            "selector": {"type": "string", "description": "CSS selector of the element"},
            "attribute": {"type": "string", "description": "Attribute name to get"},
        },
        required=["selector", "attribute"],
    ),
}

EVALUATE_TOOL: dict[str, Any] = {
    "name": "evaluate",
    "description": "Execute JavaScript in the page context",
    "inputSchema": _object(
        {"expression": {"type": "string", "description": "JavaScript expression to evaluate"}},
        required=["expression"],
    ),
}

SCREENSHOT_TOOL: dict[str, Any] = {
    "name": "screenshot",
    "description": "Take a screenshot of the page",
    "inputSchema": _object(
        {
            "options": _object(
                {
                    "path": {"type": "string", "description": "Path to save the screenshot"},
                    "type": {"type": "string", "enum": ["png", "jpeg"]},
                    "quality": {"type": "number", "minimum": 0, "maximum": 100},
                    "fullPage": {"type": "boolean"},
                    "clip": _object(
                        {
                            "x": {"type": "number"},
                            "y": {"type": "number"},
                            "width": {"type": "number"},
                            "height": {"type": "number"},
                        },
                        required=["x", "y", "width", "height"],
                    ),
                    "omitBackground": {"type": "boolean"},
                }
            ),
        }
    ),
}

FILL_TOOL: dict[str, Any] = {
    "name": "fill",
    "description": "Fill an input field with text (better than type for forms)",
    "inputSchema": _object(
        {
            "selector": {"type": "string", "description": "CSS selector for the input element"},
            "value": {"type": "string", "description": "Value to fill"},
            "options": _ACTION_OPTIONS,
        },
        required=["selector", "value"],
    ),
}

SELECT_OPTION_TOOL: dict[str, Any] = {
    "name": "select_option",
    "description": "Select option(s) in a select element",
    "inputSchema": _object(
        {
            "selector": {"type": "string", "description": "CSS selector for the select element"},
            "values": {
                "oneOf": [
                    {"type": "string"},
                    {"type": "array", "items": {"type": "string"}},
                ],
                "description": "Option value(s) to select",
            },
            "options": _ACTION_OPTIONS,
        },
        required=["selector", "values"],
    ),
}

SCROLL_TOOL: dict[str, Any] = {
    "name": "scroll",
    "description": "Scroll the page or an element",
    "inputSchema": _object(
        {
            "selector": {
                "type": "string",
                "description": "CSS selector of element to scroll (optional, scrolls page if not provided)",
            },
            "options": _object(
                {
                    "x": {"type": "number", "description": "Horizontal scroll position"},
                    "y": {"type": "number", "description": "Vertical scroll position"},
                    "behavior": {"type": "string", "enum": ["auto", "smooth"]},
                }
            ),
        }
    ),
}

PRESS_KEY_TOOL: dict[str, Any] = {
    "name": "press_key",
    "description": "Press a keyboard key on an element",
    "inputSchema": _object(
        {
            "selector": {"type": "string", "description": "CSS selector of the element"},
            "key": {"type": "string", "description": 'Key to press (e.g., "Enter", "Tab", "Escape")'},
            "options": _KEYBOARD_OPTIONS,
        },
        required=["selector", "key"],
    ),
}

GET_PAGE_INFO_TOOL: dict[str, Any] = {
    "name": "get_page_info",
    "description": "Get current page information (URL, title, etc.)",
    "inputSchema": _object({}),
}

# ═══════════════════════════════════════════════════════════════════════════════
# HISTORY & LOAD STATE
# ═══════════════════════════════════════════════════════════════════════════════

WAIT_FOR_LOAD_STATE_TOOL: dict[str, Any] = {
    "name": "wait_for_load_state",
    "description": "Wait for page to reach a specific load state",
    "inputSchema": _object(
        {
            "state": {
                "type": "string",
                "enum": LOAD_STATES,
                "default": "load",
                "description": "Load state to wait for",
            },
            "options": _object({"timeout": {"type": "number"}}),
        }
    ),
}

GO_BACK_TOOL: dict[str, Any] = {
    "name": "go_back",
    "description": "Navigate back in browser history",
    "inputSchema": _object({"options": _HISTORY_OPTIONS}),
}

GO_FORWARD_TOOL: dict[str, Any] = {
    "name": "go_forward",
    "description": "Navigate forward in browser history",
    "inputSchema": _object({"options": _HISTORY_OPTIONS}),
}

RELOAD_TOOL: dict[str, Any] = {
    "name": "reload",
    "description": "Reload/refresh the current page",
    "inputSchema": _object({"options": _HISTORY_OPTIONS}),
}

CLOSE_BROWSER_TOOL: dict[str, Any] = {
    "name": "close_browser",
    "description": "Close the browser and cleanup resources",
    "inputSchema": _object({}),
}


TOOL_DEFINITIONS: list[dict[str, Any]] = [
    NAVIGATE_TOOL,
    CLICK_TOOL,
    TYPE_TOOL,
    WAIT_FOR_SELECTOR_TOOL,
    GET_TEXT_TOOL,
    GET_ATTRIBUTE_TOOL,
    EVALUATE_TOOL,
    SCREENSHOT_TOOL,
    FILL_TOOL,
    SELECT_OPTION_TOOL,
    SCROLL_TOOL,
    PRESS_KEY_TOOL,
    GET_PAGE_INFO_TOOL,
    WAIT_FOR_LOAD_STATE_TOOL,
    GO_BACK_TOOL,
    GO_FORWARD_TOOL,
    RELOAD_TOOL,
    CLOSE_BROWSER_TOOL,
]
