"""Property search MCP tool."""

from __future__ import annotations

import sys
from typing import Annotated, Any, Callable

from mcp.types import ToolAnnotations  # type: ignore[import]
from pydantic import Field, WithJsonSchema  # type: ignore[import]

from ..errors import PropertySearchError, RequestFailedError
from ..formatting import format_result
from ..validation import (
    DEFAULT_LIMIT,
    DEFAULT_SEARCH_RADIUS,
    FIELD_DESCRIPTIONS,
    FIELD_JSON_SCHEMAS,
    validate_search_parameters,
)


TOOL_NAME = "property_search"
TOOL_TITLE = "Property Search"
TOOL_DESCRIPTION = "Search for a real estate property via spatial, semantic, or hybrid search"


def _argument(name: str) -> Any:
    """Pass the raw argument through to ``validate_search_parameters`` while advertising its schema."""

    return Annotated[
        Any,
        WithJsonSchema(FIELD_JSON_SCHEMAS[name]),
        Field(description=FIELD_DESCRIPTIONS[name]),
    ]


LimitArgument = _argument("limit")
MaxPriceArgument = _argument("max_price")
MinBathsArgument = _argument("min_baths")
MinBedsArgument = _argument("min_beds")
MinSqftArgument = _argument("min_sqft")
LatitudeArgument = _argument("search_center_latitude")
LongitudeArgument = _argument("search_center_longitude")
SearchRadiusArgument = _argument("search_radius")


def register_property_search_tool(mcp, get_property_client) -> Callable:
    """Register the property search tool on the provided MCP instance."""

    @mcp.tool(
        name=TOOL_NAME,
        title=TOOL_TITLE,
        description=TOOL_DESCRIPTION,
        annotations=ToolAnnotations(
            title=TOOL_TITLE,
            readOnlyHint=True,
            openWorldHint=True,
        ),
    )
    async def property_search(
        query: Annotated[
            str,
            Field(
                description=FIELD_DESCRIPTIONS["query"],
                examples=["quiet street, natural light, in-unit laundry"],
            ),
        ],
        limit: LimitArgument = DEFAULT_LIMIT,
        max_price: MaxPriceArgument = None,
        min_baths: MinBathsArgument = 0,
        min_beds: MinBedsArgument = 0,
        min_sqft: MinSqftArgument = 0,
        search_center_latitude: LatitudeArgument = None,
        search_center_longitude: LongitudeArgument = None,
        search_radius: SearchRadiusArgument = DEFAULT_SEARCH_RADIUS,
    ) -> str:
        """Search for a real estate property via spatial, semantic, or hybrid search."""

        print(f"Tool called: {TOOL_NAME}({query!r}, limit={limit})", file=sys.stderr)

        params = validate_search_parameters(
            {
                "limit": limit,
                "max_price": max_price,
                "min_baths": min_baths,
                "min_beds": min_beds,
                "min_sqft": min_sqft,
                "query": query,
                "search_center_latitude": search_center_latitude,
                "search_center_longitude": search_center_longitude,
                "search_radius": search_radius,
            }
        )

        property_client = get_property_client()
        if property_client is None:
            raise RequestFailedError(
                "Property search client is not initialized. Check server logs for details."
            )

        try:
            payload = await property_client.search_properties(params)
        except PropertySearchError as exc:
            print(f"Error performing property search: {exc}", file=sys.stderr)
            raise

        return format_result(payload)

    return property_search


__all__ = ["TOOL_NAME", "TOOL_TITLE", "TOOL_DESCRIPTION", "register_property_search_tool"]
