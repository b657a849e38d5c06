"""Redaction utilities for logging and frame-dumps.

Typed and filled text may be passwords, and URLs may carry credentials or
tokens. None of that should reach stderr logs or dump files verbatim.
Tool responses sent to the client are never altered.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SENSITIVE_SUBSTRINGS = (
    "token",
    "secret",
    "password",
    "passwd",
    "pwd",
    "authorization",
    "cookie",
    "session",
    "jwt",
    "bearer",
    "api-key",
    "api_key",
    "apikey",
)

# Avoid false-positives like "author" while still protecting obvious keys.
_SENSITIVE_EXACT = {"auth", "pass"}

# Argument values that hold user-entered text, per tool.
_TEXT_ARGUMENTS = {
    "type": {"text"},
    "fill": {"value"},
}

_MAX_EXPRESSION_CHARS = 200

_ECHOED_INPUT_RE = re.compile(r'^(Successfully (?:typed|filled) )"(.*)"( into element: .*)$', re.DOTALL)

_EMBEDDED_URL_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*://[^\s\"'<>]+")


def is_sensitive_key(key: str) -> bool:
    k = (key or "").strip().lower()
    if not k:
        return False
    if k in _SENSITIVE_EXACT:
        return True
    return any(s in k for s in _SENSITIVE_SUBSTRINGS)


def _redacted_summary(value: Any) -> str:
    if value is None:
        return "<redacted>"
    if isinstance(value, (bytes, bytearray)):
        return f"<redacted bytes len={len(value)}>"
    if isinstance(value, str):
        return f"<redacted str len={len(value)}>"
    if isinstance(value, (list, tuple, set)):
        return f"<redacted list len={len(value)}>"
    if isinstance(value, dict):
        return f"<redacted dict keys={len(value)}>"
    return "<redacted>"


def _redact_pairs(raw: str) -> tuple[str, bool]:
    pairs = parse_qsl(raw, keep_blank_values=True)
    out: list[tuple[str, str]] = []
    changed = False
    for k, v in pairs:
        if v and is_sensitive_key(k):
            out.append((k, "<redacted>"))
            changed = True
        else:
            out.append((k, v))
    return (urlencode(out, doseq=True) if changed else raw), changed


def redact_url(url: str) -> str:
    """Redact credentials and secret-looking query params from a URL.

    - Removes userinfo (`user:pass@host`) from netloc.
    - Redacts values for keys like token/auth/secret/api-key.
    - Sanitizes fragment when it looks like a query string (OAuth-style).

    Returns the original URL unchanged when no redaction is needed.
    """
    if not isinstance(url, str) or not url:
        return url
    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    netloc, query, fragment = parts.netloc, parts.query, parts.fragment
    changed = False

    if "@" in netloc:
        netloc = netloc.rsplit("@", 1)[1]
        changed = True
    if query:
        query, q_changed = _redact_pairs(query)
        changed = changed or q_changed
    if fragment and "=" in fragment:
        fragment, f_changed = _redact_pairs(fragment)
        changed = changed or f_changed

    if not changed:
        return url
    return urlunsplit((parts.scheme, netloc, parts.path, query, fragment))


def _redact_any(value: Any, *, tool: str, key: str | None) -> Any:
    if isinstance(value, dict):
        return {k: _redact_any(v, tool=tool, key=str(k)) for k, v in value.items()}
    if isinstance(value, list):
        return [_redact_any(v, tool=tool, key=key) for v in value]

    lk = (key or "").lower()
    if isinstance(value, str) and lk in {"url", "referer"}:
        return redact_url(value)
    if lk in _TEXT_ARGUMENTS.get(tool, ()):
        return _redacted_summary(value)
    if tool == "evaluate" and lk == "expression" and isinstance(value, str) and len(value) > _MAX_EXPRESSION_CHARS:
        return value[:_MAX_EXPRESSION_CHARS] + f"… <truncated len={len(value)}>"
    if is_sensitive_key(lk):
        return _redacted_summary(value)
    return value


def redact_tool_arguments(tool: str, args: Any) -> Any:
    """Redact tool arguments for safe logging."""
    return _redact_any(args, tool=tool if isinstance(tool, str) else "", key=None)


def redact_text(text: str) -> str:
    """Redact every URL embedded in free text (summaries, engine error messages)."""
    if not isinstance(text, str) or "://" not in text:
        return text
    return _EMBEDDED_URL_RE.sub(lambda m: redact_url(m.group(0)), text)


def redact_result_text(text: str) -> str:
    """Hide the echoed input in type/fill summaries and credentials in URLs."""
    match = _ECHOED_INPUT_RE.match(text or "")
    if match:
        text = f"{match.group(1)}{_redacted_summary(match.group(2))}{match.group(3)}"
    return redact_text(text)


def redact_jsonrpc_for_dump(payload: dict[str, Any], *, max_text_chars: int | None = 5000) -> dict[str, Any]:
    """Redact a JSON-RPC message for file dumps.

    Tool call arguments are redacted per tool; result text is scrubbed of
    echoed input and URL credentials, then truncated. Error messages get the
    same URL scrubbing.
    """
    msg = dict(payload) if isinstance(payload, dict) else {}

    if msg.get("method") in {"tools/call", "call_tool"}:
        params = msg.get("params")
        if isinstance(params, dict):
            name = params.get("name")
            args = params.get("arguments")
            if isinstance(args, dict):
                msg["params"] = {**params, "arguments": redact_tool_arguments(name, args)}

    result = msg.get("result")
    if isinstance(result, dict) and isinstance(result.get("content"), list):
        content = []
        for item in result["content"]:
            if isinstance(item, dict) and item.get("type") == "text" and isinstance(item.get("text"), str):
                text = redact_result_text(item["text"])
                if max_text_chars is not None and len(text) > max_text_chars:
                    text = text[:max_text_chars] + f"… <truncated len={len(item['text'])}>"
                item = {**item, "text": text}
            content.append(item)
        msg["result"] = {**result, "content": content}

    error = msg.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        msg["error"] = {**error, "message": redact_text(error["message"])}

    return msg


def redact_jsonrpc_for_log(payload: dict[str, Any]) -> dict[str, Any]:
    """Stricter redaction for logs (shorter)."""
    return redact_jsonrpc_for_dump(payload, max_text_chars=512)


__all__ = [
    "is_sensitive_key",
    "redact_jsonrpc_for_dump",
    "redact_jsonrpc_for_log",
    "redact_result_text",
    "redact_text",
    "redact_tool_arguments",
    "redact_url",
]
