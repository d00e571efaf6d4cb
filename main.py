# =============================================================================
# main.py  —  Entry Point for the ScrapingDog MCP Server
# =============================================================================
#
# HOW TO RUN:
#   python main.py            (or the installed `scrapingdog-mcp` script)
#
# WHAT HAPPENS:
#   1. Loads .env so SCRAPINGDOG_BASE_URL / MCP_LOG_LEVEL can live in a file
#   2. Builds the FastMCP server with every catalog tool (tools/mcp_server.py)
#   3. Serves MCP over stdio until the client disconnects or Ctrl-C
#
# CONNECTING A CLIENT:
#   Any MCP client that can spawn a stdio server works, e.g.:
#
#     {"command": "scrapingdog-mcp"}
#
#   The API key is NOT read from the environment: every tool call carries
#   its own api_key argument.
# =============================================================================

from dotenv import load_dotenv

# Must run BEFORE importing the server module: logging and the ScrapingDog
# client read their settings from the environment at import time.
load_dotenv()

from tools.mcp_server import mcp


def main() -> None:
    """Serve the ScrapingDog tool catalog over stdio."""
    mcp.run()


if __name__ == "__main__":
    main()
