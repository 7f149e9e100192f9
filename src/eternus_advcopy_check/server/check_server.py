"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: run the Advanced Copy check live, or evaluate a pasted capture
- Resources: the classification table, a sample capture and a help page

Run locally (stdio):
    python -m eternus_advcopy_check.server.check_server
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from eternus_advcopy_check.core.config import configure_logging
from eternus_advcopy_check.resources.registry import register_resources
from eternus_advcopy_check.tools.check import check_advanced_copy_impl, evaluate_output_impl

LOGGER = logging.getLogger(__name__)

mcp = FastMCP("eternus-advcopy", json_response=True)

register_resources(mcp)


@mcp.tool()
async def check_advanced_copy(
    hostname: str,
    username: str,
    password: str,
    port: int = 22,
    shell_wait: float | None = None,
) -> dict[str, Any]:
    """Connect to an ETERNUS DX array and classify its Advanced Copy sessions.

    Parameters
    ----------
    hostname:
        IP address or hostname of the array's management interface.
    username/password:
        CLI account (at least the Monitor role).
    port:
        SSH port (default 22).
    shell_wait:
        Seconds to wait for the listing after sending the command (default 2).

    Returns
    -------
    dict:
        {"severity", "exit_code", "summary", "session_count", "details", "report"}
    """
    return await asyncio.to_thread(
        check_advanced_copy_impl,
        hostname=hostname,
        username=username,
        password=password,
        port=port,
        shell_wait=shell_wait,
    )


@mcp.tool()
def evaluate_advanced_copy_output(
    output: str,
    skip_head: int = 0,
    skip_tail: int = 0,
) -> dict[str, Any]:
    """Classify sessions from already captured ``show advanced-copy-sessions`` output.

    Lines that are not session rows (banner, headers, prompt) are ignored;
    skip_head/skip_tail drop a fixed number of lines first.
    """
    return evaluate_output_impl(output=output, skip_head=skip_head, skip_tail=skip_tail)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    configure_logging("INFO")
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
