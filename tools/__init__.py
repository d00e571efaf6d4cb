# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  It:
#     1. Registers one FastMCP tool per catalog descriptor
#     2. Forwards every call to core.dispatcher.Dispatcher
#     3. Maps dispatcher errors onto MCP error codes
#     4. Logs calls to stderr (stdout belongs to the protocol)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate arguments (core/operations.py does)
#   - They do NOT build URLs or talk HTTP (core/scrapingdog.py does)
# =============================================================================
