"""MCP server exposing chunkpack to model clients."""

from chunkpack.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]
