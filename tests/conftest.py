import functools
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

import anyio
import httpx  # type: ignore[import]
import pytest
from dotenv import load_dotenv  # type: ignore[import]

from mcp import ClientSession, StdioServerParameters  # type: ignore[import]
from mcp.client.stdio import stdio_client  # type: ignore[import]


ROOT = Path(__file__).resolve().parent.parent
ROOT_STR = str(ROOT)

if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


load_dotenv()


TEST_BASE_URL = "http://realtor.test:3000"


@dataclass
class FakePropertyApi:
    """In-process stand-in for the remote ``/properties`` endpoint."""

    status_code: int = 200
    body: Any = field(default_factory=lambda: {"results": []})
    raw_body: Optional[bytes] = None
    error: Optional[Exception] = None
    requests: list = field(default_factory=list)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_params(self) -> dict:
        return dict(self.requests[-1].url.params)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_api() -> FakePropertyApi:
    return FakePropertyApi()


@pytest.fixture
def property_client(fake_api):
    from realtor_mcp_server_core.client import PropertySearchClient

    return PropertySearchClient(base_url=TEST_BASE_URL, timeout=30, transport=fake_api.transport)


@pytest.fixture
def server(monkeypatch, property_client):
    """The public server module with its client routed to the fake API."""

    import realtor_mcp_server as module

    monkeypatch.setattr(module, "property_client", property_client, raising=False)
    return module


@pytest.fixture
def run_search(server):
    """Run the async property_search tool to completion with keyword arguments."""

    def _run(**kwargs: Any) -> str:
        return anyio.run(functools.partial(server.property_search, **kwargs))

    return _run


@pytest.fixture
def call_tool():
    """Call a tool through a connected in-memory MCP client session."""

    from mcp.shared.memory import create_connected_server_and_client_session  # type: ignore[import]

    def _call(mcp, name: str, arguments: dict[str, Any]):
        async def _run():
            async with create_connected_server_and_client_session(mcp._mcp_server) as session:
                return await session.call_tool(name, arguments)

        return anyio.run(_run)

    return _call


@dataclass
class IntegrationHarness:
    mode: str
    module: Any
    property_client: Any | None
    call_search: Callable[..., Any]


def _resolve_integration_modes() -> list[str]:
    raw = os.getenv("INTEGRATION_TARGETS")
    if raw:
        modes = [entry.strip() for entry in raw.split(",") if entry.strip()]
        return modes or ["manual"]
    return ["manual", "stdio"]


def _call_search_via_stdio(arguments: dict[str, Any]) -> Any:
    server_params = StdioServerParameters(
        command=sys.executable,
        args=[str(ROOT / "realtor_mcp_server.py")],
        env={**os.environ, "MCP_TRANSPORT": "stdio"},
        cwd=ROOT_STR,
    )

    async def _run(payload: dict[str, Any]) -> Any:
        async with stdio_client(server_params) as (read_stream, write_stream):
            async with ClientSession(read_stream, write_stream) as session:
                await session.initialize()
                result = await session.call_tool("property_search", payload)
                texts = [entry.text for entry in result.content or [] if hasattr(entry, "text")]
                if result.isError:
                    raise AssertionError(f"MCP property_search tool returned error: {texts}")
                if not texts:
                    raise AssertionError("MCP property_search tool response missing text content")
                return texts[0]

    return anyio.run(_run, arguments)


@pytest.fixture(scope="module")
def realtor_module():
    load_dotenv()
    if os.getenv("ENABLE_INTEGRATION_TESTS", "false").lower() != "true":
        pytest.skip("Integration tests disabled. Set ENABLE_INTEGRATION_TESTS=true to enable.")
    if not os.getenv("REALTOR_API_BASE_URL"):
        pytest.skip("Missing property API configuration: REALTOR_API_BASE_URL")

    import importlib

    module = importlib.import_module("realtor_mcp_server")
    if module.property_client is None:
        pytest.skip("Property search client failed to initialize; check configuration.")
    return module


@pytest.fixture(scope="module", params=_resolve_integration_modes())
def integration_harness(request, realtor_module):
    mode = request.param
    module = realtor_module

    if mode == "manual":
        return IntegrationHarness(
            mode=mode,
            module=module,
            property_client=module.property_client,
            call_search=lambda **kwargs: anyio.run(functools.partial(module.property_search, **kwargs)),
        )

    if mode == "stdio":
        def _call_search(**kwargs: Any) -> Any:
            arguments = {key: value for key, value in kwargs.items() if value is not None}
            return _call_search_via_stdio(arguments)

        return IntegrationHarness(
            mode=mode,
            module=module,
            property_client=None,
            call_search=_call_search,
        )

    pytest.skip(f"Unknown integration mode: {mode}")
