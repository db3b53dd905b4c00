"""Realtor MCP Server public entrypoint.

The implementation lives under ``realtor_mcp_server_core``. This module wires
the runtime together at import time and re-exports the public API that the
tests and external tooling rely on.
"""

from __future__ import annotations

from realtor_mcp_server_core import (
    NoResponseError,
    PropertySearchClient,
    PropertySearchError,
    RemoteApiError,
    RequestFailedError,
    SearchParameters,
    ValidationError,
    build_query_params,
    format_result,
    initialize_runtime,
    normalize_max_price,
    register_property_search_tool,
    run_server,
    validate_search_parameters,
)


mcp, property_client = initialize_runtime()


def _get_property_client():
    return globals().get("property_client")


property_search = register_property_search_tool(mcp, _get_property_client)


def main() -> None:
    """Entry point used when running the module as a script."""

    run_server(mcp)


__all__ = [
    "PropertySearchClient",
    "PropertySearchError",
    "ValidationError",
    "RemoteApiError",
    "NoResponseError",
    "RequestFailedError",
    "SearchParameters",
    "mcp",
    "property_client",
    "property_search",
    "main",
    "validate_search_parameters",
    "build_query_params",
    "normalize_max_price",
    "format_result",
]


if __name__ == "__main__":  # pragma: no cover - entrypoint behaviour
    main()
