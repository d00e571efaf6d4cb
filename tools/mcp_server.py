# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (every ScrapingDog tool)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Publishes the tool catalog (core/catalog.py) over MCP.  Each catalog
#   entry becomes one FastMCP tool whose inputSchema is the descriptor's
#   JSON schema.  The tool body does no work of its own: it hands the raw
#   argument bag to the Dispatcher (core/dispatcher.py) and returns whatever
#   comes back.
#
# HOW IT WORKS (the flow):
#   1. The client calls a tool by name via MCP (e.g., "google_search")
#   2. The tools/call handler below passes it straight to the dispatcher
#   3. _dispatch() → Dispatcher.call_tool(name, arguments)
#   4. The dispatcher validates, translates, and calls ScrapingDog
#   5. The client receives one text block, or one MCP error
#
# ERROR CODES AT THE PROTOCOL BOUNDARY:
#     InvalidParams   →  -32602
#     MethodNotFound  →  -32601
#     UpstreamError   →  -32603  (status + upstream message in the text)
#     InternalError   →  -32603
#
# RUNNING THIS SERVER:
#     a) Via the entry point:   python main.py   (or `scrapingdog-mcp`)
#     b) Standalone:            python -m tools.mcp_server
# =============================================================================

import logging
import os
import sys
from typing import Any

from fastmcp import FastMCP
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    CallToolRequest,
    CallToolResult,
    ErrorData,
    ServerResult,
    TextContent,
)
from pydantic import PrivateAttr

from core.catalog import list_tools
from core.dispatcher import Dispatcher
from core.models import ErrorKind, ToolCallError, ToolDescriptor

SERVER_NAME = "scrapingdog-mcp-server"
SERVER_VERSION = "1.0.0"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout IS the MCP transport.  A stray log line on
# stdout would corrupt the JSON-RPC stream and kill the client connection.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for status/progress and errors
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=os.environ.get("MCP_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

# Never echo credentials into the logs.
_SECRET_PARAMS = {"api_key"}


def _mask(params: dict[str, Any]) -> dict[str, Any]:
    return {k: ("***" if k in _SECRET_PARAMS else v) for k, v in params.items()}


def _log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its (masked) parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in _mask(params).items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the size of the response in GREEN, then return it.

    Scraped pages run to megabytes, so only the length is logged.
    """
    logging.info(f"{_GREEN}  ← {tool_name} response: {len(text)} chars{_RESET}")
    return text


# =============================================================================
# Error mapping
# =============================================================================
_ERROR_CODES = {
    ErrorKind.INVALID_PARAMS: INVALID_PARAMS,
    ErrorKind.METHOD_NOT_FOUND: METHOD_NOT_FOUND,
    ErrorKind.UPSTREAM_ERROR: INTERNAL_ERROR,
    ErrorKind.INTERNAL_ERROR: INTERNAL_ERROR,
}


def to_mcp_error(error: ToolCallError) -> McpError:
    """Convert a dispatcher error into the MCP protocol error the client sees."""
    envelope = error.envelope()
    return McpError(ErrorData(code=_ERROR_CODES[envelope.kind], message=envelope.message))


async def _dispatch(dispatcher: Dispatcher, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    """Run one tool call through the dispatcher, logging it on the way."""
    _log_request(name, arguments or {})
    try:
        envelope = await dispatcher.call_tool(name, arguments)
    except ToolCallError as error:
        _log_status(f"{error.kind.value}: {error.message}")
        raise to_mcp_error(error) from error

    text = _log_response(name, envelope.text)
    return [TextContent(type="text", text=text)]


# =============================================================================
# CatalogTool — one FastMCP tool per catalog descriptor
# =============================================================================
# FastMCP normally builds a tool from a decorated Python function and derives
# the schema from its signature.  Here the schema already exists in the
# catalog, so we subclass Tool directly and pass the arguments through
# untouched: validation is the dispatcher's job, not FastMCP's.
# =============================================================================
class CatalogTool(Tool):
    _dispatcher: Dispatcher = PrivateAttr()

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor, dispatcher: Dispatcher) -> "CatalogTool":
        tool = cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=descriptor.input_schema(),
            tags={descriptor.category},
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        return ToolResult(content=await _dispatch(self._dispatcher, self.name, arguments))


# =============================================================================
# tools/call handler
# =============================================================================
# FastMCP's default handler turns tool exceptions into isError results and
# answers unknown names itself.  This one sends every call to the dispatcher
# and lets McpError reach the session, which replies with a JSON-RPC error
# carrying the code from _ERROR_CODES.
# =============================================================================
def _install_call_handler(server: FastMCP, dispatcher: Dispatcher) -> None:
    async def handler(req: CallToolRequest) -> ServerResult:
        content = await _dispatch(dispatcher, req.params.name, req.params.arguments)
        return ServerResult(CallToolResult(content=content, isError=False))

    server._mcp_server.request_handlers[CallToolRequest] = handler


def build_server(dispatcher: Dispatcher | None = None) -> FastMCP:
    """Create the FastMCP server with every catalog tool registered in order."""
    dispatcher = dispatcher or Dispatcher()
    server = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    for descriptor in list_tools():
        server.add_tool(CatalogTool.from_descriptor(descriptor, dispatcher))
    _install_call_handler(server, dispatcher)
    logging.debug("Registered %d tools", len(list_tools()))
    return server


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = build_server()


# =============================================================================
# Server entry point
# =============================================================================
# When run directly (python -m tools.mcp_server), start the MCP server on
# stdio.  FastMCP closes the session cleanly on Ctrl-C.
# =============================================================================
if __name__ == "__main__":
    mcp.run()
