"""Core implementation for the Realtor MCP server.

This package houses the supporting modules that the public
`realtor_mcp_server` wrapper re-exports. The entrypoint stays lightweight
while validation, the HTTP client and the tool registration live here.
"""

from . import runtime
from .client import PropertySearchClient
from .errors import (
    NoResponseError,
    PropertySearchError,
    RemoteApiError,
    RequestFailedError,
    ValidationError,
)
from .formatting import format_result
from .runtime import initialize_runtime, run_server
from .tools.property_search import register_property_search_tool
from .utils import build_query_params, normalize_max_price
from .validation import SearchParameters, validate_search_parameters

__all__ = [
    "PropertySearchClient",
    "PropertySearchError",
    "ValidationError",
    "RemoteApiError",
    "NoResponseError",
    "RequestFailedError",
    "SearchParameters",
    "validate_search_parameters",
    "build_query_params",
    "normalize_max_price",
    "format_result",
    "initialize_runtime",
    "run_server",
    "register_property_search_tool",
    "runtime",
]
