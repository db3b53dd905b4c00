"""HTTP client wrapper for the remote property search API."""

from __future__ import annotations

import math
import os
import sys
from typing import Any, Optional

import httpx  # type: ignore[import]

from .errors import NoResponseError, RemoteApiError, RequestFailedError
from .utils import build_query_params
from .validation import SearchParameters


DEFAULT_BASE_URL = "http://0.0.0.0:3000"
DEFAULT_TIMEOUT = 30.0
PROPERTIES_PATH = "/properties"


def _check_timeout(timeout: float, source: str) -> float:
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise ValueError(f"{source} must be a number, got {timeout!r}")
    if not math.isfinite(timeout) or not timeout > 0:
        raise ValueError(f"{source} must be a positive finite number, got {timeout!r}")
    return float(timeout)


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ValueError(f"REALTOR_API_TIMEOUT must be a number, got {raw!r}") from exc
    return _check_timeout(timeout, "REALTOR_API_TIMEOUT")


class PropertySearchClient:
    """Client for the real-estate property search API.

    Every call to :meth:`search_properties` opens its own ``httpx.AsyncClient``,
    awaits a single GET and closes it again, so one instance can serve
    concurrent tool invocations without blocking the event loop.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client, falling back to environment variables."""

        self.base_url = (base_url or os.getenv("REALTOR_API_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        if timeout is None:
            self.timeout = _parse_timeout(os.getenv("REALTOR_API_TIMEOUT"))
        else:
            self.timeout = _check_timeout(timeout, "timeout")
        self._transport = transport
        print(
            f"Property search client configured for {self.base_url} (timeout {self.timeout:g}s)",
            file=sys.stderr,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{PROPERTIES_PATH}"

    async def search_properties(self, params: SearchParameters) -> Any:
        """Forward validated parameters to ``GET /properties`` and return the decoded JSON body.

        Raises:
            RemoteApiError: the API answered with a non-success status.
            NoResponseError: the connection failed or timed out before a response arrived.
            RequestFailedError: the request could not be built or the body was not JSON.
        """

        query_params = build_query_params(params)
        print(f"Requesting {self.endpoint} with {query_params}", file=sys.stderr)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as http_client:
                response = await http_client.get(self.endpoint, params=query_params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            status_text = exc.response.reason_phrase
            print(f"Property API returned {status_code} {status_text}", file=sys.stderr)
            raise RemoteApiError(status_code, status_text) from exc
        except (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError) as exc:
            print(f"No response from property API: {exc!r}", file=sys.stderr)
            raise NoResponseError() from exc
        except Exception as exc:
            reason = str(exc) or exc.__class__.__name__
            print(f"Property search request failed: {reason}", file=sys.stderr)
            raise RequestFailedError(reason) from exc


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_TIMEOUT", "PROPERTIES_PATH", "PropertySearchClient"]
