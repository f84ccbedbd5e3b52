"""MCP tools exposing the calculator."""
