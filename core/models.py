# =============================================================================
# core/models.py  —  Data Models & Error Taxonomy
# =============================================================================
#
# These dataclasses define the *shape* of everything that flows through the
# dispatch layer:
#
#   ToolDescriptor   →  what a tool is called and which parameters it takes
#   TranslatedRequest →  the endpoint + query string we send to ScrapingDog
#   RawResult        →  what ScrapingDog sent back, untouched
#   ResponseEnvelope →  the single text block handed back to the caller
#   ErrorEnvelope    →  the single error shape handed back on failure
#
# Descriptors and requests are frozen: the catalog is built once at import
# and shared by every call, so nothing here may be mutated after creation.
# =============================================================================

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


# -----------------------------------------------------------------------------
# ParamSpec / ToolDescriptor — the catalog entries
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ParamSpec:
    """One declared parameter of a tool."""

    name: str
    type: str                          # "string", "integer", "number", "boolean"
    description: str
    required: bool = False
    enum: Optional[tuple[str, ...]] = None
    format: Optional[str] = None       # "uri" for URL-typed strings

    def to_json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.format is not None:
            schema["format"] = self.format
        return schema


@dataclass(frozen=True)
class ToolDescriptor:
    """A named operation, its purpose, and its parameter contract.

    ``parameters`` is a tuple so the declared order survives into the
    rendered ``inputSchema`` and nobody can append to it later.
    """

    name: str
    description: str
    category: str
    parameters: tuple[ParamSpec, ...]

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def param(self, name: str) -> Optional[ParamSpec]:
        for spec in self.parameters:
            if spec.name == name:
                return spec
        return None

    def input_schema(self) -> dict[str, Any]:
        """Render the parameter contract as a JSON Schema object."""
        return {
            "type": "object",
            "properties": {p.name: p.to_json_schema() for p in self.parameters},
            "required": self.required,
        }


# -----------------------------------------------------------------------------
# Per-call values
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class InvocationRequest:
    """An incoming tools/call: which tool, and the untyped argument bag."""

    tool_name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TranslatedRequest:
    """Endpoint path (relative to the API base URL) plus query parameters."""

    endpoint: str
    params: dict[str, Any]


@dataclass(frozen=True)
class RawResult:
    """The upstream body exactly as received."""

    body: str


@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"


@dataclass(frozen=True)
class ResponseEnvelope:
    """Successful result: exactly one text content block."""

    content: tuple[TextContent, ...]

    @classmethod
    def from_raw(cls, raw: RawResult) -> "ResponseEnvelope":
        """Wrap an upstream body, pretty-printing it when it is JSON.

        Non-JSON bodies (scraped HTML, plain text) are passed through as-is
        rather than being quoted into a JSON string.
        """
        try:
            data = json.loads(raw.body)
        except ValueError:
            text = raw.body
        else:
            text = json.dumps(data, indent=2, ensure_ascii=False)
        return cls(content=(TextContent(text=text),))

    @property
    def text(self) -> str:
        return self.content[0].text

    def to_dict(self) -> dict[str, Any]:
        return {"content": [{"type": c.type, "text": c.text} for c in self.content]}


# =============================================================================
# Error taxonomy
# =============================================================================
# Every failure path ends in exactly one of these four kinds.  The exception
# classes carry the kind so callers can `except ToolCallError` once and still
# tell the caller which kind occurred.
# =============================================================================
class ErrorKind(str, Enum):
    INVALID_PARAMS = "InvalidParams"
    METHOD_NOT_FOUND = "MethodNotFound"
    UPSTREAM_ERROR = "UpstreamError"
    INTERNAL_ERROR = "InternalError"


@dataclass(frozen=True)
class ErrorEnvelope:
    kind: ErrorKind
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


class ToolCallError(Exception):
    """Base class for every failure the dispatcher reports."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def envelope(self) -> ErrorEnvelope:
        return ErrorEnvelope(kind=self.kind, message=self.message)


class InvalidParamsError(ToolCallError):
    kind = ErrorKind.INVALID_PARAMS


class MethodNotFoundError(ToolCallError):
    kind = ErrorKind.METHOD_NOT_FOUND


class UpstreamError(ToolCallError):
    """ScrapingDog answered with a non-2xx status, timed out, or was unreachable.

    ``status_code`` is None when no HTTP response was received at all.
    """

    kind = ErrorKind.UPSTREAM_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InternalToolError(ToolCallError):
    kind = ErrorKind.INTERNAL_ERROR
