"""Runtime bootstrap for the Realtor MCP server."""

from __future__ import annotations

import os
import sys
from typing import Optional, Tuple

from dotenv import load_dotenv  # type: ignore[import]
from mcp.server.fastmcp import FastMCP  # type: ignore[import]

from .client import PropertySearchClient


SERVER_NAME = "Realtor MCP"


def initialize_runtime() -> Tuple[FastMCP, Optional[PropertySearchClient]]:
    """Load environment variables, create the MCP instance, and initialize the client."""

    print("Starting Realtor MCP Server...", file=sys.stderr)
    load_dotenv()
    print("Environment variables loaded", file=sys.stderr)

    mcp = FastMCP(
        SERVER_NAME,
        instructions=(
            "Search real estate listings. Call `property_search` with a short amenity description "
            "in `query` plus optional numeric filters and an optional search center."
        ),
        dependencies=["httpx", "pydantic", "python-dotenv"],
    )
    print("MCP server instance created", file=sys.stderr)

    try:
        property_client = PropertySearchClient()
    except ValueError as exc:
        print(f"Error initializing property search client: {exc}", file=sys.stderr)
        property_client = None

    return mcp, property_client


def run_server(mcp: FastMCP) -> None:
    """Run the MCP server using either stdio or SSE transport."""

    transport = os.getenv("MCP_TRANSPORT", "stdio")
    if transport == "sse":
        host = os.getenv("MCP_HOST", "0.0.0.0")
        port = int(os.getenv("MCP_PORT", "8080"))
        mcp.settings.host = host
        mcp.settings.port = port
        print(f"Running MCP server over SSE on {host}:{port}", file=sys.stderr)
        mcp.run(transport="sse")
    else:
        print("Running MCP server over stdio", file=sys.stderr)
        mcp.run(transport="stdio")


__all__ = ["SERVER_NAME", "initialize_runtime", "run_server"]
