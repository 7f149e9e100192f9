"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from eternus_advcopy_check.core.classifier import STATE_TABLE, UNKNOWN_TYPE_PREFIX
from eternus_advcopy_check.core.config import DEFAULT_COMMAND
from eternus_advcopy_check.core.models import Severity, TypeCategory

CATEGORY_TYPES: dict[TypeCategory, list[str]] = {
    TypeCategory.COPY: ["EC", "OPC", "QuickOPC", "SnapOPC", "SnapOPC+", "Monitor"],
    TypeCategory.REMOTE: ["REC"],
    TypeCategory.OFFLOAD: ["ODX"],
}

SAMPLE_OUTPUT = (
    "CLI> show advanced-copy-sessions -type all\n"
    "SID   Gene-  Type       Volume     Source Volume     Destination Volume  Status         Phase           Error  Requestor\n"
    "      ration            Type       No.  Name         No.  Name                                          Code\n"
    "----- ------ ---------- ---------- ---- ------------ ---- ------------ -------------- --------------- ------ ---------\n"
    "    0 -/-    EC         Standard     10 DB_DATA        20 DB_MIRROR    Active         Equivalent      0x00   GUI\n"
    "    1 -/-    REC        Standard     11 DB_LOG         21 DR_LOG       Halt           Tracking        0xBA   GUI\n"
    "    2 1/2    SnapOPC+   TPV          12 FS_HOME        22 FS_SNAP1     Error Suspend  Copying         0x02   CLI\n"
    "CLI> "
)


def classification_table() -> dict[str, Any]:
    """Return the state table keyed by category name."""
    out: dict[str, Any] = {}
    for category, states in STATE_TABLE.items():
        out[category.value] = {
            "types": CATEGORY_TYPES[category],
            "states": {state: sev.value for state, sev in states.items()},
            "default": Severity.UNKNOWN.value,
        }
    out[TypeCategory.UNRECOGNIZED.value] = {
        "types": [],
        "states": {},
        "default": Severity.UNKNOWN.value,
        "prefix": UNKNOWN_TYPE_PREFIX,
    }
    return out


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://eternus-advcopy/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        return (
            "Resources:\n"
            "- app://eternus-advcopy/help\n"
            "- app://eternus-advcopy/config/classification-table\n"
            "- app://eternus-advcopy/examples/sample-output\n"
            f"\nListing command: {DEFAULT_COMMAND}\n"
        )

    @mcp.resource("app://eternus-advcopy/config/classification-table")
    def classification_table_resource() -> dict[str, Any]:
        """Return the session state table used for classification."""
        return classification_table()

    @mcp.resource("app://eternus-advcopy/examples/sample-output")
    def sample_output() -> str:
        """Return a small captured listing for demos and tests."""
        return SAMPLE_OUTPUT
