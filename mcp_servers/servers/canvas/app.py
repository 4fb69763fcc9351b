"""
Shared state for the Canvas MCP server.

Holds the FastMCP registry every tool module registers on, the single
process-wide DataAnonymizer, and the lazily created CanvasClient.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP

from mcp_servers.servers.canvas import config
from mcp_servers.servers.canvas.anonymizer import DataAnonymizer
from mcp_servers.servers.canvas.canvas_descriptions import SERVER_INSTRUCTIONS
from mcp_servers.servers.canvas.client import CanvasClient

# One mapping for the whole process so pseudonyms stay stable across calls
anonymizer = DataAnonymizer()

_canvas: Optional[CanvasClient] = None


def get_canvas() -> CanvasClient:
    """Return the shared Canvas client, creating it on first use."""
    global _canvas
    if _canvas is None:
        missing = config.missing_settings()
        if missing:
            raise RuntimeError(
                f"Canvas is not configured. Set {', '.join(missing)} in the environment or .env file."
            )
        _canvas = CanvasClient(
            config.CANVAS_BASE_URL,
            config.CANVAS_API_TOKEN,
            timeout=config.CANVAS_TIMEOUT,
            per_page=config.DEFAULT_PER_PAGE,
        )
    return _canvas


def set_canvas(client: Optional[CanvasClient]):
    """Swap the shared client (used by tests to point at a fake upstream)."""
    global _canvas
    _canvas = client


async def close_canvas():
    """Close the shared client's connection pool, if one was opened."""
    global _canvas
    if _canvas is not None:
        await _canvas.aclose()
        _canvas = None


@asynccontextmanager
async def canvas_lifespan(server: FastMCP) -> AsyncIterator[None]:
    try:
        yield
    finally:
        await close_canvas()


mcp = FastMCP("Canvas LMS Tools", instructions=SERVER_INSTRUCTIONS, lifespan=canvas_lifespan)
