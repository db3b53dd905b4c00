"""Utility to execute property search payloads using the Realtor MCP server core."""

from __future__ import annotations

import argparse
import functools
import json
import sys
from pathlib import Path
from typing import Any, Dict

import anyio


def _load_payload(payload_path: Path | None) -> Dict[str, Any]:
    """Load search payload from a file or stdin."""

    raw_payload: str | None = None

    if payload_path is not None:
        raw_payload = payload_path.read_text(encoding="utf-8")
    elif not sys.stdin.isatty():
        raw_payload = sys.stdin.read()

    if raw_payload in (None, ""):
        raise SystemExit("Provide a JSON payload via --payload or stdin.")

    try:
        payload = json.loads(raw_payload)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Failed to parse JSON payload: {exc}") from exc

    if not isinstance(payload, dict):
        raise SystemExit("Payload must be a JSON object.")

    return payload


def main(argv: list[str] | None = None) -> int:
    """Run the query runner CLI."""

    parser = argparse.ArgumentParser(
        description=(
            "Execute a property search payload using the realtor_mcp_server property_search tool. "
            "The payload should match the arguments accepted by the `property_search` MCP tool."
        )
    )
    parser.add_argument(
        "--payload",
        type=Path,
        help="Path to a JSON file containing the search payload. If omitted, stdin is used.",
    )
    parser.add_argument(
        "--base-url",
        help="Override REALTOR_API_BASE_URL for this run.",
    )

    args = parser.parse_args(argv)

    payload = _load_payload(args.payload)

    try:
        import realtor_mcp_server as server  # noqa: WPS433 - runtime import for env setup
    except Exception as exc:  # pragma: no cover - defensive import handling
        raise SystemExit(f"Failed to initialize property search tool: {exc}") from exc

    from realtor_mcp_server_core.errors import PropertySearchError

    if args.base_url:
        server.property_client = server.PropertySearchClient(base_url=args.base_url)

    try:
        result = anyio.run(functools.partial(server.property_search, **payload))
    except TypeError as exc:
        raise SystemExit(f"Payload keys do not match property_search signature: {exc}") from exc
    except PropertySearchError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    sys.stdout.write(result)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
