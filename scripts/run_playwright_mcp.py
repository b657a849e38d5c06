#!/usr/bin/env python3
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

print(
    f"[mcp] timeout_ms={os.environ.get('MCP_PLAYWRIGHT_TIMEOUT_MS', 'engine default')} | "
    f"args={os.environ.get('MCP_PLAYWRIGHT_ARGS', '-')} | "
    f"slow_mo={os.environ.get('MCP_PLAYWRIGHT_SLOW_MO', '-')} | "
    f"log_level={os.environ.get('MCP_LOG_LEVEL', 'INFO')}",
    file=sys.stderr,
)

from mcp_servers.playwright_browser.main import main  # noqa: E402

if __name__ == "__main__":
    main()
