"""MCP server entrypoints."""
