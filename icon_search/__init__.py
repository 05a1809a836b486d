"""Keyword-to-icon search engine exposed as an MCP server."""

__version__ = "0.3.0"
