"""MCP server exposing read-only Google Play Developer API tools."""
