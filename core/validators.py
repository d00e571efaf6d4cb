# =============================================================================
# core/validators.py  —  Reusable Schema Validators
# =============================================================================
#
# The primitive argument shapes every tool is built from.  Each tool's
# argument model (core/operations.py) is assembled out of these, so a rule
# like "an API key may not be empty" lives in exactly one place.
#
#   NonEmptyStr  →  a string with at least one character
#   UrlStr       →  a string that parses as an absolute URL
#
# All argument models run in pydantic STRICT mode: a caller that sends
# "2" for a page number gets an error, not a silent int("2").
# =============================================================================

from typing import Annotated

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

_ABSOLUTE_URL = TypeAdapter(AnyUrl)


def _well_formed_url(value: str) -> str:
    try:
        url = _ABSOLUTE_URL.validate_python(value)
    except ValidationError:
        raise ValueError("Must be a valid URL") from None
    if not url.host:
        raise ValueError("Must be a valid URL")
    # Forward the caller's string untouched; AnyUrl may append a trailing "/".
    return value


UrlStr = Annotated[str, AfterValidator(_well_formed_url)]


class ToolArguments(BaseModel):
    """Base for every per-tool argument model.

    Unknown keys are dropped here, so nothing untyped travels past the
    validator into the query string.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    api_key: NonEmptyStr


def describe_validation_error(tool_name: str, exc: ValidationError) -> str:
    """Flatten a pydantic error into one line naming each offending field."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "arguments"
        problems.append(f"{field}: {error['msg']}")
    return f"Invalid arguments for {tool_name}: " + "; ".join(problems)
