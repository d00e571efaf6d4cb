"""Tests for the FastMCP wiring: registration, pass-through, error codes."""

import pytest
from fastmcp import Client
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND

from core.catalog import TOOL_CATALOG, get_tool
from core.dispatcher import Dispatcher
from core.models import InternalToolError, InvalidParamsError, MethodNotFoundError, UpstreamError
from core.scrapingdog import ScrapingDogClient
from tools.mcp_server import CatalogTool, _mask, build_server, to_mcp_error

from conftest import BASE_URL, RecordingClient, json_transport


class TestErrorMapping:

    @pytest.mark.parametrize("error,code", [
        (InvalidParamsError("bad"), INVALID_PARAMS),
        (MethodNotFoundError("missing"), METHOD_NOT_FOUND),
        (UpstreamError("ScrapingDog API error (401): bad key", status_code=401), INTERNAL_ERROR),
        (InternalToolError("boom"), INTERNAL_ERROR),
    ])
    def test_codes(self, error, code):
        mcp_error = to_mcp_error(error)
        assert isinstance(mcp_error, McpError)
        assert mcp_error.error.code == code
        assert mcp_error.error.message == error.message

    def test_upstream_status_survives(self):
        mcp_error = to_mcp_error(UpstreamError("ScrapingDog API error (401): bad key", status_code=401))
        assert "401" in mcp_error.error.message
        assert "bad key" in mcp_error.error.message


class TestLogging:

    def test_api_key_masked(self):
        assert _mask({"api_key": "secret", "query": "ai"}) == {"api_key": "***", "query": "ai"}


@pytest.mark.asyncio
class TestCatalogTool:

    async def test_run_returns_single_text_block(self):
        client = RecordingClient(body='{"ok":true}')
        tool = CatalogTool.from_descriptor(get_tool("google_search"), Dispatcher(client=client))

        result = await tool.run({"query": "ai", "api_key": "k", "country": "US"})

        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == '{\n  "ok": true\n}'
        assert client.calls == [("/google", {"api_key": "k", "query": "ai", "country": "US"})]

    async def test_run_raises_protocol_error(self):
        client = RecordingClient()
        tool = CatalogTool.from_descriptor(get_tool("google_search"), Dispatcher(client=client))

        with pytest.raises(McpError) as excinfo:
            await tool.run({"api_key": "k"})

        assert excinfo.value.error.code == INVALID_PARAMS
        assert "query" in excinfo.value.error.message
        assert client.calls == []

    async def test_descriptor_schema_and_tags(self):
        tool = CatalogTool.from_descriptor(get_tool("amazon_reviews"), Dispatcher(client=RecordingClient()))
        assert tool.parameters == get_tool("amazon_reviews").input_schema()
        assert tool.tags == {"ecommerce"}


@pytest.mark.asyncio
class TestServer:

    async def test_lists_catalog_in_order(self):
        server = build_server(Dispatcher(client=RecordingClient()))
        async with Client(server) as client:
            tools = await client.list_tools()

        assert [t.name for t in tools] == [d.name for d in TOOL_CATALOG]
        by_name = {t.name: t for t in tools}
        assert by_name["google_news_search"].inputSchema == get_tool("google_news_search").input_schema()

    async def test_call_through_protocol(self):
        recording = RecordingClient(body='{"reviews": []}')
        server = build_server(Dispatcher(client=recording))
        async with Client(server) as client:
            result = await client.call_tool("amazon_reviews", {"asin": "B08N5WRWNW", "api_key": "k"})

        assert result.content[0].text == '{\n  "reviews": []\n}'
        assert recording.calls == [("/amazon-reviews", {"api_key": "k", "asin": "B08N5WRWNW"})]

    async def test_invalid_params_is_protocol_error(self):
        recording = RecordingClient()
        server = build_server(Dispatcher(client=recording))
        async with Client(server) as client:
            with pytest.raises(McpError) as excinfo:
                await client.call_tool_mcp("google_search", {"api_key": "k"})

        assert excinfo.value.error.code == INVALID_PARAMS
        assert "query" in excinfo.value.error.message
        assert recording.calls == []

    async def test_unknown_tool_is_method_not_found(self):
        recording = RecordingClient()
        server = build_server(Dispatcher(client=recording))
        async with Client(server) as client:
            with pytest.raises(McpError) as excinfo:
                await client.call_tool_mcp("tiktok_scraper", {"api_key": "k"})

        assert excinfo.value.error.code == METHOD_NOT_FOUND
        assert excinfo.value.error.message == "Unknown tool: tiktok_scraper"
        assert recording.calls == []

    async def test_upstream_failure_is_internal_error_with_status(self):
        scrapingdog = ScrapingDogClient(
            base_url=BASE_URL, transport=json_transport({"message": "bad key"}, status_code=401),
        )
        server = build_server(Dispatcher(client=scrapingdog))
        async with Client(server) as client:
            with pytest.raises(McpError) as excinfo:
                await client.call_tool_mcp("bing_search", {"query": "ai", "api_key": "nope"})

        assert excinfo.value.error.code == INTERNAL_ERROR
        assert excinfo.value.error.message == "ScrapingDog API error (401): bad key"
