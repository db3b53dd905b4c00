"""Helpers translating validated parameters into the API wire format."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .validation import SearchParameters


UNBOUNDED = "unbounded"

QUERY_PARAM_ORDER = (
    "limit",
    "max_price",
    "min_baths",
    "min_beds",
    "min_sqft",
    "query",
    "search_center_latitude",
    "search_center_longitude",
    "search_radius",
)


def normalize_max_price(value: Optional[Union[str, float, int]]) -> Optional[Union[str, float, int]]:
    """Map the "no upper bound" sentinel (``inf`` or ``"unbounded"``) to None.

    Any other value is returned untouched so that the model validation can
    still reject it.
    """

    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in (UNBOUNDED, "inf", "infinity"):
        return None
    if isinstance(value, float) and math.isinf(value) and value > 0:
        return None
    return value


def _render_number(value: Any) -> Any:
    """Render integral floats as integers (``5.0`` -> ``5``)."""

    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def build_query_params(params: "SearchParameters") -> Dict[str, Any]:
    """Flatten validated parameters into query parameters for ``GET /properties``.

    Keys whose value is None are left out entirely, which is how an absent
    price cap or search center travels over the wire.
    """

    values = params.model_dump()
    values["max_price"] = normalize_max_price(values.get("max_price"))

    query_params: Dict[str, Any] = {}
    for key in QUERY_PARAM_ORDER:
        value = values.get(key)
        if value is None:
            continue
        query_params[key] = _render_number(value)
    return query_params


__all__ = ["UNBOUNDED", "QUERY_PARAM_ORDER", "normalize_max_price", "build_query_params"]
