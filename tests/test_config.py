from __future__ import annotations

import logging

import pytest

from mcp_servers.playwright_browser.config import ServerConfig

_ENV = (
    "MCP_PLAYWRIGHT_TIMEOUT_MS",
    "MCP_PLAYWRIGHT_ARGS",
    "MCP_PLAYWRIGHT_SLOW_MO",
    "MCP_LOG_LEVEL",
    "MCP_TRACE",
    "MCP_DUMP_FRAMES",
    "MCP_DUMP_FRAMES_RAW",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_env() -> None:
    cfg = ServerConfig.from_env()
    assert cfg == ServerConfig()
    assert cfg.launch_options(True) == {"headless": True}


def test_parses_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MCP_PLAYWRIGHT_TIMEOUT_MS", "15000")
    monkeypatch.setenv("MCP_PLAYWRIGHT_ARGS", "--no-sandbox, --disable-gpu ,")
    monkeypatch.setenv("MCP_PLAYWRIGHT_SLOW_MO", "25")
    monkeypatch.setenv("MCP_LOG_LEVEL", "debug")
    monkeypatch.setenv("MCP_TRACE", "1")
    monkeypatch.setenv("MCP_DUMP_FRAMES", "/tmp/frames.log")
    monkeypatch.setenv("MCP_DUMP_FRAMES_RAW", "1")
    cfg = ServerConfig.from_env()
    assert cfg.default_timeout_ms == 15000
    assert cfg.launch_args == ["--no-sandbox", "--disable-gpu"]
    assert cfg.slow_mo_ms == 25
    assert cfg.log_level == "DEBUG"
    assert cfg.trace is True
    assert cfg.dump_frames_path == "/tmp/frames.log"
    assert cfg.dump_frames_raw is True
    assert cfg.launch_options(False) == {"headless": False, "args": ["--no-sandbox", "--disable-gpu"], "slow_mo": 25}


@pytest.mark.parametrize("raw", ["soon", "-5"])
def test_bad_timeout_is_ignored(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, raw: str) -> None:
    monkeypatch.setenv("MCP_PLAYWRIGHT_TIMEOUT_MS", raw)
    with caplog.at_level(logging.WARNING, logger="mcp.playwright.config"):
        cfg = ServerConfig.from_env()
    assert cfg.default_timeout_ms is None
    assert "MCP_PLAYWRIGHT_TIMEOUT_MS" in caplog.text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("warn", "WARNING"), ("ERROR", "ERROR"), ("verbose", "INFO"), (None, "INFO")],
)
def test_normalize_log_level(raw: str | None, expected: str) -> None:
    assert ServerConfig.normalize_log_level(raw) == expected


def test_launch_args_are_copied() -> None:
    cfg = ServerConfig(launch_args=["--a"])
    cfg.launch_options(True)["args"].append("--b")
    assert cfg.launch_args == ["--a"]
