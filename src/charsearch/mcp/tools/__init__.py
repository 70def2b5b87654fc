"""Tool registration modules for the charsearch MCP server."""

from .characters import register_character_tools

__all__ = ["register_character_tools"]
