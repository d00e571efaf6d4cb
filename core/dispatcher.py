# =============================================================================
# core/dispatcher.py  —  Tool Dispatch
# =============================================================================
#
# THE PIPELINE FOR ONE tools/call:
#
#   1. resolve the name       →  MethodNotFoundError if unknown
#   2. validate arguments     →  InvalidParamsError
#   3. translate to a request    (pure, cannot fail after step 2)
#   4. send it to ScrapingDog →  UpstreamError
#   5. anything else          →  InternalToolError
#
# Steps 1 and 2 finish before any network I/O, so a bad call never costs
# ScrapingDog credits.  Each call ends in exactly one ResponseEnvelope or
# exactly one ToolCallError.
# =============================================================================

import logging
from typing import Any, Mapping, Optional

from core.catalog import list_tools
from core.models import (
    InternalToolError,
    InvocationRequest,
    MethodNotFoundError,
    ResponseEnvelope,
    ToolCallError,
    ToolDescriptor,
)
from core.operations import OPERATIONS, Operation
from core.scrapingdog import ScrapingDogClient

logger = logging.getLogger(__name__)


class Dispatcher:
    """Stateless router from tool name to validator, translator and transport."""

    def __init__(
        self,
        client: Optional[ScrapingDogClient] = None,
        operations: Mapping[str, Operation] = OPERATIONS,
    ):
        self.client = client or ScrapingDogClient()
        self.operations = operations

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        return list_tools()

    def resolve(self, name: str) -> Operation:
        operation = self.operations.get(name)
        if operation is None:
            raise MethodNotFoundError(f"Unknown tool: {name}")
        return operation

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ResponseEnvelope:
        """Run one tool end to end.

        Raises:
            ToolCallError: one of its four subclasses, never anything else.
        """
        if arguments is None:
            arguments = {}
        return await self.invoke(InvocationRequest(tool_name=name, arguments=arguments))

    async def invoke(self, request: InvocationRequest) -> ResponseEnvelope:
        operation = self.resolve(request.tool_name)
        try:
            args = operation.validate(request.arguments)
            translated = operation.translate(args)
            raw = await self.client.get(translated.endpoint, translated.params)
            return ResponseEnvelope.from_raw(raw)
        except ToolCallError:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure in %s", request.tool_name)
            raise InternalToolError(f"Tool execution failed: {exc}") from exc
