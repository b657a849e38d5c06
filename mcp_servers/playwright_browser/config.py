from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger("mcp.playwright.config")


def _optional_float(name: str) -> float | None:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("ignoring %s=%r (not a number)", name, raw)
        return None
    if value < 0:
        logger.warning("ignoring %s=%r (negative)", name, raw)
        return None
    return value


@dataclass
class ServerConfig:
    default_timeout_ms: float | None = None
    launch_args: list[str] = field(default_factory=list)
    slow_mo_ms: float | None = None
    log_level: str = "INFO"
    trace: bool = False
    dump_frames_path: str | None = None
    dump_frames_raw: bool = False

    @staticmethod
    def normalize_log_level(raw: str | None) -> str:
        level = (raw or "").strip().upper()
        if level in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return level
        if level == "WARN":
            return "WARNING"
        return "INFO"

    @classmethod
    def from_env(cls) -> ServerConfig:
        args_raw = os.environ.get("MCP_PLAYWRIGHT_ARGS", "")
        launch_args = [arg.strip() for arg in args_raw.split(",") if arg.strip()]
        return cls(
            default_timeout_ms=_optional_float("MCP_PLAYWRIGHT_TIMEOUT_MS"),
            launch_args=launch_args,
            slow_mo_ms=_optional_float("MCP_PLAYWRIGHT_SLOW_MO"),
            log_level=cls.normalize_log_level(os.environ.get("MCP_LOG_LEVEL")),
            trace=bool(os.environ.get("MCP_TRACE")),
            dump_frames_path=os.environ.get("MCP_DUMP_FRAMES") or None,
            dump_frames_raw=os.environ.get("MCP_DUMP_FRAMES_RAW") == "1",
        )

    def launch_options(self, headless: bool) -> dict[str, object]:
        """Keyword arguments for `BrowserType.launch`."""
        options: dict[str, object] = {"headless": headless}
        if self.launch_args:
            options["args"] = list(self.launch_args)
        if self.slow_mo_ms is not None:
            options["slow_mo"] = self.slow_mo_ms
        return options
