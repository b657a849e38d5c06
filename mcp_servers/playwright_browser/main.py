"""
MCP server for browser automation via Playwright.

This module provides the main entry point and protocol handling: one JSON-RPC
message per line on stdin, one response per line on stdout. Logs go to stderr.
Tool dispatch is handled via the registry in server/registry.py.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any

from .config import ServerConfig
from .errors import ToolError
from .server.contract import (
    DEFAULT_PROTOCOL_VERSION,
    LATEST_PROTOCOL_VERSION,
    SUPPORTED_PROTOCOL_VERSIONS,
    initialize_result,
    select_protocol,
)
from .server.dispatch import Dispatcher
from .server.redaction import redact_jsonrpc_for_dump, redact_jsonrpc_for_log, redact_text, redact_tool_arguments
from .session import SessionHandle

logger = logging.getLogger("mcp.playwright")

__all__ = [
    "SUPPORTED_PROTOCOL_VERSIONS",
    "LATEST_PROTOCOL_VERSION",
    "DEFAULT_PROTOCOL_VERSION",
    "McpServer",
    "main",
]

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601


def _write_message(payload: dict[str, Any]) -> None:
    """Write JSON-RPC message to stdout."""
    data = json.dumps(payload, ensure_ascii=False)
    sys.stdout.buffer.write((data + "\n").encode())
    sys.stdout.buffer.flush()


def _read_message() -> dict[str, Any] | None:
    """
    Read one JSON-RPC message from stdin.

    Returns None at EOF and an empty dict for blank lines. Raises ValueError
    when the line is not valid JSON.
    """
    line = sys.stdin.buffer.readline()
    if not line:
        return None
    line = line.strip()
    if not line:
        return {}
    return json.loads(line.decode())


class McpServer:
    """MCP server with registry-based tool dispatch and a single browser session."""

    def __init__(self, config: ServerConfig | None = None, session: SessionHandle | None = None) -> None:
        self.config = config or ServerConfig.from_env()
        self.session = session or SessionHandle(self.config)
        self.dispatcher = Dispatcher(self.session)

    # ─── transport ───────────────────────────────────────────────────────────

    def _dump_frame(self, direction: str, payload: Any) -> None:
        dump_path = self.config.dump_frames_path
        if not dump_path:
            return
        if dump_dir := os.path.dirname(dump_path):
            os.makedirs(dump_dir, exist_ok=True)
        safe = payload if self.config.dump_frames_raw else redact_jsonrpc_for_dump(payload)
        with open(dump_path, "ab") as fp:
            fp.write(f"--{direction}--\n".encode())
            fp.write((json.dumps(safe, ensure_ascii=False) + "\n").encode())

    def _send(self, payload: dict[str, Any]) -> None:
        self._dump_frame("out", payload)
        _write_message(payload)

    def _send_error(self, request_id: Any, code: int, message: str, data: dict[str, Any] | None = None) -> None:
        error: dict[str, Any] = {"code": code, "message": message}
        if data:
            error["data"] = data
        self._send({"jsonrpc": "2.0", "id": request_id, "error": error})

    def send_parse_error(self, detail: str) -> None:
        self._send_error(None, PARSE_ERROR, f"Parse error: {detail}")

    # ─── methods ─────────────────────────────────────────────────────────────

    def handle_initialize(self, request_id: Any, params: dict[str, Any] | None = None) -> None:
        """Handle initialize request."""
        requested = (params or {}).get("protocolVersion") if isinstance(params, dict) else None
        protocol = select_protocol(requested)
        self._send({"jsonrpc": "2.0", "id": request_id, "result": initialize_result(protocol)})

    def handle_list_tools(self, request_id: Any) -> None:
        """Handle tools/list request."""
        self._send({"jsonrpc": "2.0", "id": request_id, "result": {"tools": self.dispatcher.list_tools()}})

    def _log_call(self, name: str, arguments: Any) -> None:
        """Log tool call with sanitized arguments."""
        logger.info("tool=%s args=%s", name, redact_tool_arguments(name, arguments))

    def handle_call_tool(self, request_id: Any, name: str, arguments: Any) -> None:
        """Handle tool call via dispatcher; every failure becomes one JSON-RPC error."""
        try:
            self._log_call(name, arguments)
            result = self.dispatcher.dispatch(name, arguments)
        except ToolError as exc:
            logger.info("tool_error tool=%s kind=%s reason=%s", name, exc.kind.value, redact_text(exc.message))
            self._send({"jsonrpc": "2.0", "id": request_id, "error": exc.to_rpc_error(name)})
            return
        except Exception as exc:
            logger.exception("tool_call_failed tool=%s", name)
            self._send({"jsonrpc": "2.0", "id": request_id, "error": ToolError(str(exc)).to_rpc_error(name)})
            return

        self._send({"jsonrpc": "2.0", "id": request_id, "result": result.to_dict()})

    def dispatch(self, message: Any) -> None:
        """Dispatch incoming JSON-RPC message to appropriate handler."""
        if not message:
            return
        if not isinstance(message, dict):
            self._send_error(None, INVALID_REQUEST, "Invalid Request")
            return

        self._dump_frame("in", message)
        if self.config.trace:
            logger.info("recv %s", redact_jsonrpc_for_log(message))

        method = message.get("method")
        request_id = message.get("id")
        params = message.get("params") or {}
        if not isinstance(params, dict):
            params = {}

        if method == "initialize":
            self.handle_initialize(request_id, params)
        elif isinstance(method, str) and method.startswith("notifications/"):
            return
        elif method in ("tools/list", "list_tools"):
            self.handle_list_tools(request_id)
        elif method in ("tools/call", "call_tool"):
            name = params.get("name")
            # Non-string names cannot match a tool; keep them visible in the error.
            if not isinstance(name, str):
                name = "" if name is None else json.dumps(name, ensure_ascii=False, default=str)
            arguments = params.get("arguments", params.get("args"))
            self.handle_call_tool(request_id, name, arguments)
        elif method == "ping":
            self._send({"jsonrpc": "2.0", "id": request_id, "result": {}})
        else:
            self._send_error(request_id, METHOD_NOT_FOUND, f"Method {method} not found")

    def close(self) -> None:
        """Release the browser and the Playwright driver."""
        self.session.shutdown()


def main() -> None:
    """Main entry point for MCP server."""
    config = ServerConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    server = McpServer(config)
    logger.info("Playwright MCP server running on stdio")
    try:
        while True:
            try:
                message = _read_message()
            except ValueError as exc:
                logger.warning("parse_error: %s", exc)
                server.send_parse_error(str(exc))
                continue
            if message is None:
                break
            server.dispatch(message)
    except KeyboardInterrupt:
        logger.info("interrupted")
    finally:
        server.close()


if __name__ == "__main__":
    main()
