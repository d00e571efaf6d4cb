# =============================================================================
# core/operations.py  —  Argument Validators & Request Translators
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   For every tool in the catalog it pairs:
#     1. an argument model  →  validates the caller's untyped argument bag
#     2. a translator       →  turns validated arguments into an endpoint
#                              path plus query parameters for ScrapingDog
#
# THE FLOW FOR ONE CALL:
#
#     {"query": "ai", "api_key": "k", "country": "US"}       (untyped)
#                 │
#                 ▼  Operation.validate()
#     GoogleSearchArgs(query="ai", api_key="k", country="US") (typed)
#                 │
#                 ▼  Operation.translate()
#     TranslatedRequest("/google", {"api_key": "k", "query": "ai",
#                                   "country": "US"})
#
# OPTIONAL PARAMETERS:
#   An optional parameter is forwarded whenever the caller supplied it with a
#   non-null value.  That includes falsy values: page=0, dynamic=False and
#   wait=0 all reach ScrapingDog.  The same rule holds for every tool.
#
# LOOKUP, NOT BRANCHING:
#   OPERATIONS maps tool name → Operation.  The dispatcher does one dict
#   lookup; adding a tool means adding one model and one table row.
# =============================================================================

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional, Union

from pydantic import ValidationError

from core.models import InvalidParamsError, TranslatedRequest
from core.validators import NonEmptyStr, ToolArguments, UrlStr, describe_validation_error

# Numeric fields accept ints and floats but never bools or numeric strings.
Number = Union[int, float]


# =============================================================================
# Argument models (one per tool)
# =============================================================================
# api_key is declared once on ToolArguments.  Field names are the names the
# caller uses; renames onto ScrapingDog's query names happen in the table.
# =============================================================================
class ScrapeWebpageArgs(ToolArguments):
    url: UrlStr
    dynamic: Optional[bool] = None
    premium: Optional[bool] = None
    country: Optional[str] = None
    wait: Optional[Number] = None
    format: Optional[Literal["html", "json"]] = None


class GoogleSearchArgs(ToolArguments):
    query: NonEmptyStr
    country: Optional[str] = None
    language: Optional[str] = None
    page: Optional[int] = None
    num: Optional[int] = None


class GoogleAiSearchArgs(ToolArguments):
    query: NonEmptyStr
    country: Optional[str] = None
    language: Optional[str] = None


class BingSearchArgs(ToolArguments):
    query: NonEmptyStr
    country: Optional[str] = None
    page: Optional[int] = None


class GoogleMapsSearchArgs(GoogleAiSearchArgs):
    pass


class GoogleNewsSearchArgs(ToolArguments):
    query: NonEmptyStr
    country: Optional[str] = None
    language: Optional[str] = None
    time_range: Optional[Literal["h", "d", "w", "m", "y"]] = None


class AmazonProductSearchArgs(ToolArguments):
    query: NonEmptyStr
    country: Optional[str] = None
    page: Optional[int] = None


class AmazonReviewsArgs(ToolArguments):
    asin: NonEmptyStr
    country: Optional[str] = None
    page: Optional[int] = None


class WalmartProductSearchArgs(ToolArguments):
    query: NonEmptyStr
    page: Optional[int] = None


class LinkedinProfileArgs(ToolArguments):
    profile_url: UrlStr


class LinkedinCompanyArgs(ToolArguments):
    company_url: UrlStr


class LinkedinJobsSearchArgs(ToolArguments):
    query: NonEmptyStr
    location: NonEmptyStr
    page: Optional[int] = None


class TwitterPostArgs(ToolArguments):
    username: NonEmptyStr
    count: Optional[int] = None


class InstagramProfileArgs(ToolArguments):
    username: NonEmptyStr


class InstagramPostsArgs(TwitterPostArgs):
    pass


class FacebookArgs(ToolArguments):
    url: UrlStr


class IndeedJobsSearchArgs(ToolArguments):
    query: NonEmptyStr
    location: NonEmptyStr
    country: Optional[str] = None
    page: Optional[int] = None


# =============================================================================
# Operation — one validator + translator pair
# =============================================================================
@dataclass(frozen=True)
class Operation:
    """How one tool validates its input and what request it produces."""

    name: str
    endpoint: str                          # "" means the API root
    arguments: type[ToolArguments]
    rename: Mapping[str, str] = field(default_factory=dict)

    def validate(self, arguments: Optional[Mapping[str, Any]]) -> ToolArguments:
        """Check the caller's argument bag against this tool's model.

        Raises:
            InvalidParamsError: naming every field that failed.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise InvalidParamsError(
                f"Invalid arguments for {self.name}: expected an object, "
                f"got {type(arguments).__name__}"
            )
        try:
            return self.arguments.model_validate(dict(arguments))
        except ValidationError as exc:
            raise InvalidParamsError(describe_validation_error(self.name, exc)) from exc

    def translate(self, args: ToolArguments) -> TranslatedRequest:
        """Map validated arguments onto ScrapingDog's endpoint and query names.

        api_key always comes first; the rest follow model declaration order.
        """
        params: dict[str, Any] = {"api_key": args.api_key}
        for name, value in args.model_dump(exclude={"api_key"}).items():
            if value is None:
                continue
            params[self.rename.get(name, name)] = value
        return TranslatedRequest(endpoint=self.endpoint, params=params)


def _table(*operations: Operation) -> Mapping[str, Operation]:
    by_name: dict[str, Operation] = {}
    endpoints: set[str] = set()
    for op in operations:
        if op.name in by_name:
            raise ValueError(f"Duplicate operation: {op.name}")
        if op.endpoint in endpoints:
            raise ValueError(f"Endpoint {op.endpoint!r} already claimed (by {op.name})")
        by_name[op.name] = op
        endpoints.add(op.endpoint)
    return MappingProxyType(by_name)


OPERATIONS: Mapping[str, Operation] = _table(
    Operation("scrape_webpage", "", ScrapeWebpageArgs),
    Operation("google_search", "/google", GoogleSearchArgs),
    Operation("google_ai_search", "/google-ai", GoogleAiSearchArgs),
    Operation("bing_search", "/bing", BingSearchArgs),
    Operation("google_maps_search", "/google-maps", GoogleMapsSearchArgs),
    Operation("google_news_search", "/google-news", GoogleNewsSearchArgs),
    Operation("amazon_product_search", "/amazon", AmazonProductSearchArgs),
    Operation("amazon_reviews", "/amazon-reviews", AmazonReviewsArgs),
    Operation("walmart_product_search", "/walmart", WalmartProductSearchArgs),
    Operation("linkedin_profile_scraper", "/linkedin-profile", LinkedinProfileArgs,
              rename={"profile_url": "url"}),
    Operation("linkedin_company_scraper", "/linkedin-company", LinkedinCompanyArgs,
              rename={"company_url": "url"}),
    Operation("linkedin_jobs_search", "/linkedin-jobs", LinkedinJobsSearchArgs),
    Operation("twitter_post_scraper", "/twitter", TwitterPostArgs),
    Operation("instagram_profile_scraper", "/instagram-profile", InstagramProfileArgs),
    Operation("instagram_posts_scraper", "/instagram-posts", InstagramPostsArgs),
    Operation("facebook_scraper", "/facebook", FacebookArgs),
    Operation("indeed_jobs_search", "/indeed", IndeedJobsSearchArgs),
)
