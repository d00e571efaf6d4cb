# =============================================================================
# core/catalog.py  —  The Tool Catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares every ScrapingDog operation we expose: its name, what it does
#   (the LLM reads this to decide WHEN to call it), and its parameters.
#
# ORDER MATTERS:
#   Clients present tools in the order we list them, so TOOL_CATALOG is a
#   tuple in declaration order and list_tools() never re-sorts it.
#
# CREDIT COSTS:
#   ScrapingDog bills per request.  Descriptions carry the credit cost so a
#   model can prefer the cheaper tool when two would do.
# =============================================================================

from core.models import ParamSpec, ToolDescriptor

# Catalog categories, used as FastMCP tags
CATEGORIES = {
    "scraping": "General Web Scraping",
    "search": "Search Engines",
    "ecommerce": "E-commerce",
    "social": "Social Media",
    "jobs": "Job Boards",
}


# -----------------------------------------------------------------------------
# Parameter builders
# -----------------------------------------------------------------------------
# Most tools share api_key/country/language/page.  These keep the
# declarations below short and the descriptions consistent.
# -----------------------------------------------------------------------------
def _api_key() -> ParamSpec:
    return ParamSpec("api_key", "string", "ScrapingDog API key", required=True)


def _query(description: str = "Search query") -> ParamSpec:
    return ParamSpec("query", "string", description, required=True)


def _url(name: str, description: str) -> ParamSpec:
    return ParamSpec(name, "string", description, required=True, format="uri")


def _country(description: str = "Country code (e.g., US, UK, CA)") -> ParamSpec:
    return ParamSpec("country", "string", description)


def _language() -> ParamSpec:
    return ParamSpec("language", "string", "Language code (e.g., en, es, fr)")


def _page() -> ParamSpec:
    return ParamSpec("page", "integer", "Page number")


def _location() -> ParamSpec:
    return ParamSpec("location", "string", "Job location", required=True)


def _username(network: str) -> ParamSpec:
    return ParamSpec("username", "string", f"{network} username (without @)", required=True)


TOOL_CATALOG: tuple[ToolDescriptor, ...] = (
    # --- General web scraping ---
    ToolDescriptor(
        name="scrape_webpage",
        description="Scrape any webpage and return HTML content with proxy rotation and CAPTCHA solving",
        category="scraping",
        parameters=(
            _url("url", "URL to scrape"),
            _api_key(),
            ParamSpec("dynamic", "boolean", "Enable JavaScript rendering (costs 5 credits)"),
            ParamSpec("premium", "boolean", "Use premium residential proxies (costs 25 credits with dynamic)"),
            _country("Country code for geo-targeting (e.g., US, UK, CA)"),
            ParamSpec("wait", "number", "Wait time in seconds for page to load (1-10)"),
            ParamSpec("format", "string", "Response format", enum=("html", "json")),
        ),
    ),

    # --- Search engines ---
    ToolDescriptor(
        name="google_search",
        description="Search Google and get organic results, ads, and related data (5 credits)",
        category="search",
        parameters=(
            _query(),
            _api_key(),
            _country(),
            _language(),
            ParamSpec("page", "integer", "Page number (default: 1)"),
            ParamSpec("num", "integer", "Number of results per page (max: 100)"),
        ),
    ),
    ToolDescriptor(
        name="google_ai_search",
        description="Search Google with AI-powered overview and insights (10 credits)",
        category="search",
        parameters=(_query(), _api_key(), _country(), _language()),
    ),
    ToolDescriptor(
        name="bing_search",
        description="Search Bing and get organic results in JSON format (5 credits)",
        category="search",
        parameters=(_query(), _api_key(), _country(), _page()),
    ),
    ToolDescriptor(
        name="google_maps_search",
        description="Search Google Maps for business listings and location data (5 credits)",
        category="search",
        parameters=(
            _query('Search query (e.g., "restaurants in New York")'),
            _api_key(),
            _country(),
            _language(),
        ),
    ),
    ToolDescriptor(
        name="google_news_search",
        description="Search Google News for latest news articles (5 credits)",
        category="search",
        parameters=(
            _query("News search query"),
            _api_key(),
            _country(),
            _language(),
            ParamSpec(
                "time_range", "string",
                "Time range (h=hour, d=day, w=week, m=month, y=year)",
                enum=("h", "d", "w", "m", "y"),
            ),
        ),
    ),

    # --- E-commerce ---
    ToolDescriptor(
        name="amazon_product_search",
        description="Search Amazon products and get detailed product information (1 credit)",
        category="ecommerce",
        parameters=(
            _query("Product search query or ASIN"),
            _api_key(),
            _country("Amazon country domain (e.g., US, UK, CA, IN)"),
            _page(),
        ),
    ),
    ToolDescriptor(
        name="amazon_reviews",
        description="Get Amazon product reviews and ratings (100 credits)",
        category="ecommerce",
        parameters=(
            ParamSpec("asin", "string", "Amazon Standard Identification Number (ASIN)", required=True),
            _api_key(),
            _country("Amazon country domain"),
            _page(),
        ),
    ),
    ToolDescriptor(
        name="walmart_product_search",
        description="Search Walmart products and get product details (5 credits)",
        category="ecommerce",
        parameters=(_query("Product search query"), _api_key(), _page()),
    ),

    # --- Social media ---
    ToolDescriptor(
        name="linkedin_profile_scraper",
        description="Extract LinkedIn profile information (50-100 credits)",
        category="social",
        parameters=(_url("profile_url", "LinkedIn profile URL"), _api_key()),
    ),
    ToolDescriptor(
        name="linkedin_company_scraper",
        description="Extract LinkedIn company information (50-100 credits)",
        category="social",
        parameters=(_url("company_url", "LinkedIn company URL"), _api_key()),
    ),
    ToolDescriptor(
        name="linkedin_jobs_search",
        description="Search LinkedIn job listings by location and keywords (5 credits)",
        category="jobs",
        parameters=(_query("Job search query"), _location(), _api_key(), _page()),
    ),
    ToolDescriptor(
        name="twitter_post_scraper",
        description="Extract Twitter/X posts, likes, and bookmarks (5 credits)",
        category="social",
        parameters=(
            _username("Twitter"),
            _api_key(),
            ParamSpec("count", "integer", "Number of posts to retrieve (max: 100)"),
        ),
    ),
    ToolDescriptor(
        name="instagram_profile_scraper",
        description="Extract Instagram profile information (15 credits)",
        category="social",
        parameters=(_username("Instagram"), _api_key()),
    ),
    ToolDescriptor(
        name="instagram_posts_scraper",
        description="Extract Instagram posts from a profile (15 credits)",
        category="social",
        parameters=(
            _username("Instagram"),
            _api_key(),
            ParamSpec("count", "integer", "Number of posts to retrieve"),
        ),
    ),
    ToolDescriptor(
        name="facebook_scraper",
        description="Extract Facebook page or profile information (5 credits)",
        category="social",
        parameters=(_url("url", "Facebook page or profile URL"), _api_key()),
    ),

    # --- Job boards ---
    ToolDescriptor(
        name="indeed_jobs_search",
        description="Search Indeed job listings with filters and location",
        category="jobs",
        parameters=(
            _query("Job search query"),
            _location(),
            _api_key(),
            _country(),
            _page(),
        ),
    ),
)


def _index(catalog: tuple[ToolDescriptor, ...]) -> dict[str, ToolDescriptor]:
    index: dict[str, ToolDescriptor] = {}
    for descriptor in catalog:
        if descriptor.name in index:
            raise ValueError(f"Duplicate tool name in catalog: {descriptor.name}")
        if descriptor.category not in CATEGORIES:
            raise ValueError(f"Unknown category {descriptor.category!r} for {descriptor.name}")
        index[descriptor.name] = descriptor
    return index


_BY_NAME = _index(TOOL_CATALOG)


def list_tools() -> tuple[ToolDescriptor, ...]:
    """Return every tool in declaration order."""
    return TOOL_CATALOG


def get_tool(name: str) -> ToolDescriptor | None:
    """Look up a descriptor by name, or None if there is no such tool."""
    return _BY_NAME.get(name)


def tools_in_category(category: str) -> list[ToolDescriptor]:
    """Tools belonging to one of CATEGORIES, in catalog order."""
    return [t for t in TOOL_CATALOG if t.category == category]
