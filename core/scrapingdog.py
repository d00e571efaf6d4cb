# =============================================================================
# core/scrapingdog.py  —  ScrapingDog HTTP Transport
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends exactly one GET to the ScrapingDog API and hands back the body
#   untouched.  Every way that can go wrong is folded into UpstreamError:
#
#     ScrapingDog answered 4xx/5xx   →  UpstreamError(status_code=<status>)
#     no answer within 60 seconds    →  UpstreamError(status_code=None)
#     DNS / refused / TLS failure    →  UpstreamError(status_code=None)
#
#   Redirects are followed, so an http:// base URL that bounces to https
#   still works.  There is no retry here.  ScrapingDog bills per request, so a failed call
#   is reported once and the caller decides what to do.
#
# BASE URL:
#   Defaults to the public API.  Set SCRAPINGDOG_BASE_URL to point the server
#   at a staging host or a local fake.
# =============================================================================

import logging
import os
from typing import Any, Optional

import httpx

from core.models import RawResult, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.scrapingdog.com"
REQUEST_TIMEOUT_SECONDS = 60.0


def _upstream_message(response: httpx.Response) -> str:
    """Pull ScrapingDog's own error message out of a failed response."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return f"Request failed with status code {response.status_code}"


class ScrapingDogClient:
    """Thin async client around one ScrapingDog GET.

    A fresh httpx.AsyncClient is opened per request, so one instance can be
    shared by any number of concurrent calls.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if base_url is None:
            base_url = os.environ.get("SCRAPINGDOG_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def get(self, endpoint: str, params: dict[str, Any]) -> RawResult:
        """GET ``base_url + endpoint`` with ``params`` as the query string.

        Raises:
            UpstreamError: on timeout, transport failure or a non-2xx status.
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug("GET %s (%d params)", url, len(params))

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as exc:
            raise UpstreamError(
                f"ScrapingDog API error: request timed out after {self.timeout:g} seconds"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(
                f"ScrapingDog API error: {str(exc) or type(exc).__name__}"
            ) from exc

        if not response.is_success:
            raise UpstreamError(
                f"ScrapingDog API error ({response.status_code}): {_upstream_message(response)}",
                status_code=response.status_code,
            )

        return RawResult(body=response.text)
