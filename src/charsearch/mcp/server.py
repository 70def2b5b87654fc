"""charsearch MCP server entrypoint using FastMCP.

Exposes character search tools backed by the configured document store.
Run with:
  - charsearch-mcp
  - or: python -m charsearch.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

import logging
from typing import Optional

from fastmcp import FastMCP

from charsearch.config import Settings, load_settings
from charsearch.logging_config import setup_logging
from charsearch.mcp.tools import register_character_tools
from charsearch.repository import CharacterRepository
from charsearch.storage.base import DocumentStore
from charsearch.storage.factory import create_store

logger = logging.getLogger(__name__)


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.store: Optional[DocumentStore] = None
        self.repository: Optional[CharacterRepository] = None

    def init_store(self) -> None:
        """Create the document store and repository from configuration."""
        self.store = create_store(self.settings)
        self.repository = CharacterRepository(self.store)
        logger.info("Using %s document store", self.settings.store.backend)


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("charsearch MCP Server")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

def main() -> None:
    """Initialize state and run the MCP server."""
    global _state
    settings = load_settings()
    setup_logging(settings.app.log_level, log_file=settings.app.log_file)
    _state = AppState(settings)
    _state.init_store()
    register_character_tools(mcp, get_state=lambda: _state)
    # Choose transport based on configuration: stdio (default), http, or sse
    transport = settings.app.transport
    if transport in ("http", "sse"):
        mcp.run(transport=transport, host=settings.app.host, port=settings.app.port)
    else:
        mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
