"""Tool registration helpers for the Realtor MCP server."""

from .property_search import register_property_search_tool

__all__ = ["register_property_search_tool"]
