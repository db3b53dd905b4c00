"""Search parameter schema for the property search tool."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator  # type: ignore[import]
from pydantic import ValidationError as PydanticValidationError  # type: ignore[import]
from pydantic_core import PydanticCustomError  # type: ignore[import]

from .errors import ValidationError
from .utils import UNBOUNDED, normalize_max_price


COORDINATE_FIELDS = ("search_center_latitude", "search_center_longitude")
NUMERIC_FIELDS = (
    "limit",
    "max_price",
    "min_baths",
    "min_beds",
    "min_sqft",
    "search_center_latitude",
    "search_center_longitude",
    "search_radius",
)

DEFAULT_LIMIT = 20
DEFAULT_SEARCH_RADIUS = 5.0

FIELD_DESCRIPTIONS: Dict[str, str] = {
    "limit": "The maximum number of properties to return",
    "max_price": "Maximum price of properties to return. Leave empty or pass \"unbounded\" for no upper bound.",
    "min_baths": "Return properties with a number of baths greater than or equal to this number",
    "min_beds": "Return properties with a number of bedrooms greater than or equal to this number",
    "min_sqft": "Return properties with a square footage greater than or equal to this number",
    "query": (
        "A short and concise description of desired apartment amenities and other intangibles. "
        "Don't include traits like number of bedrooms that are covered by other search parameters. "
        "Don't include amenities or intangibles the user wants to avoid."
    ),
    "search_center_latitude": (
        "Optional float latitude for search center. Should always be set if longitude is set"
    ),
    "search_center_longitude": (
        "Optional float longitude for search center. Should always be set if latitude is set"
    ),
    "search_radius": "Return properties within this distance (in miles) from the search center",
}


# JSON schema advertised for each tool argument. Arguments reach
# SearchParameters unconverted, so these describe the rules without enforcing them.
FIELD_JSON_SCHEMAS: Dict[str, Dict[str, Any]] = {
    "limit": {"type": "integer", "exclusiveMinimum": 0},
    "max_price": {
        "anyOf": [
            {"type": "number", "exclusiveMinimum": 0},
            {"type": "string", "enum": [UNBOUNDED]},
            {"type": "null"},
        ]
    },
    "min_baths": {"type": "number", "minimum": 0},
    "min_beds": {"type": "number", "minimum": 0},
    "min_sqft": {"type": "number", "minimum": 0},
    "search_center_latitude": {
        "anyOf": [{"type": "number", "minimum": -90, "maximum": 90}, {"type": "null"}]
    },
    "search_center_longitude": {
        "anyOf": [{"type": "number", "minimum": -180, "maximum": 180}, {"type": "null"}]
    },
    "search_radius": {"type": "number", "exclusiveMinimum": 0},
}


class SearchParameters(BaseModel):
    """Validated property search request."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    limit: int = Field(default=DEFAULT_LIMIT, gt=0, description=FIELD_DESCRIPTIONS["limit"])
    max_price: Optional[float] = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description=FIELD_DESCRIPTIONS["max_price"],
    )
    min_baths: float = Field(default=0, ge=0, allow_inf_nan=False, description=FIELD_DESCRIPTIONS["min_baths"])
    min_beds: float = Field(default=0, ge=0, allow_inf_nan=False, description=FIELD_DESCRIPTIONS["min_beds"])
    min_sqft: float = Field(default=0, ge=0, allow_inf_nan=False, description=FIELD_DESCRIPTIONS["min_sqft"])
    query: str = Field(description=FIELD_DESCRIPTIONS["query"])
    search_center_latitude: Optional[float] = Field(
        default=None,
        ge=-90,
        le=90,
        allow_inf_nan=False,
        description=FIELD_DESCRIPTIONS["search_center_latitude"],
    )
    search_center_longitude: Optional[float] = Field(
        default=None,
        ge=-180,
        le=180,
        allow_inf_nan=False,
        description=FIELD_DESCRIPTIONS["search_center_longitude"],
    )
    search_radius: float = Field(
        default=DEFAULT_SEARCH_RADIUS,
        gt=0,
        allow_inf_nan=False,
        description=FIELD_DESCRIPTIONS["search_radius"],
    )

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("Input should be a number, not a boolean")
        return value

    @field_validator("max_price", mode="before")
    @classmethod
    def _normalize_unbounded_price(cls, value: Any) -> Any:
        return normalize_max_price(value)

    @field_validator("query")
    @classmethod
    def _require_query_text(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("query must be a non-empty string")
        return stripped

    @model_validator(mode="after")
    def _check_search_center(self) -> "SearchParameters":
        has_latitude = self.search_center_latitude is not None
        has_longitude = self.search_center_longitude is not None
        if has_latitude != has_longitude:
            raise PydanticCustomError(
                "search_center_pair",
                "Must provide both search_center_latitude and search_center_longitude if either is set",
                {"fields": COORDINATE_FIELDS},
            )
        return self

    @property
    def has_search_center(self) -> bool:
        return self.search_center_latitude is not None and self.search_center_longitude is not None


def _error_fields(error: Mapping[str, Any]) -> List[str]:
    loc = error.get("loc") or ()
    if loc:
        return [str(loc[0])]
    ctx = error.get("ctx") or {}
    return [str(name) for name in ctx.get("fields", ())]


def validate_search_parameters(arguments: Optional[Mapping[str, Any]]) -> SearchParameters:
    """Build :class:`SearchParameters` from caller arguments.

    Raises:
        ValidationError: naming every offending field when the arguments are
            rejected.
    """

    try:
        return SearchParameters.model_validate(dict(arguments or {}))
    except PydanticValidationError as exc:
        fields: List[str] = []
        problems: List[str] = []
        for error in exc.errors():
            error_fields = _error_fields(error)
            for name in error_fields:
                if name not in fields:
                    fields.append(name)
            label = ", ".join(error_fields) or "parameters"
            problems.append(f"{label}: {error.get('msg')}")
        message = "Invalid property search parameters: " + "; ".join(problems)
        raise ValidationError(message, fields) from exc


__all__ = [
    "COORDINATE_FIELDS",
    "DEFAULT_LIMIT",
    "DEFAULT_SEARCH_RADIUS",
    "FIELD_DESCRIPTIONS",
    "FIELD_JSON_SCHEMAS",
    "SearchParameters",
    "validate_search_parameters",
]
