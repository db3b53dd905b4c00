"""Serialization of property API payloads for MCP responses."""

from __future__ import annotations

import json
from typing import Any


def format_result(payload: Any) -> str:
    """Return the payload as indented JSON text, untouched otherwise."""

    return json.dumps(payload, indent=2, ensure_ascii=False)


__all__ = ["format_result"]
