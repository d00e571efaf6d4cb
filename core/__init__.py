# =============================================================================
# core/__init__.py
# =============================================================================
# This package holds the tool registry and dispatch layer: the catalog,
# argument validation, request translation, the ScrapingDog transport and
# the dispatcher that ties them together.
#
# Nothing in this package imports FastMCP or the MCP SDK.  The protocol
# wiring lives in tools/, so everything here can be exercised in a plain
# test with a stubbed HTTP transport.
# =============================================================================
