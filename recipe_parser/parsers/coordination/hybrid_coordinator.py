"""
Hybrid recipe parsing coordinator.

This module orchestrates the multi-tiered parsing approach, trying the most
reliable extraction method first before falling back to DOM heuristics:

1. JSON-LD extraction (fastest, most reliable)
2. DOM markup parsing (selector catalog + text heuristics)

The first tier that produces a recipe wins.
"""

import time
from typing import Callable, Optional, Tuple

import httpx
import logfire

from ...config.settings import settings
from ...exceptions import FetchError
from ...models.recipe import NormalizedRecipe, ParseOptions
from ..extraction.dom_extractor import extract_from_markup
from ..extraction.structured_extractor import extract_structured_recipe


ExtractionStrategy = Callable[[str, str], Optional[NormalizedRecipe]]


def _structured_strategy(html: str, source_url: str) -> Optional[NormalizedRecipe]:
    return extract_structured_recipe(html, source_url)


def _markup_strategy(html: str, source_url: str) -> Optional[NormalizedRecipe]:
    return extract_from_markup(html, source_url)


EXTRACTION_STRATEGIES: Tuple[Tuple[str, ExtractionStrategy], ...] = (
    ("json_ld", _structured_strategy),
    ("dom", _markup_strategy),
)


async def fetch_html(url: str, options: Optional[ParseOptions] = None,
                     client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Fetch a recipe page.

    Args:
        url: Recipe URL to fetch
        options: Timeout (ms) and User-Agent; defaults come from settings
        client: Optional shared AsyncClient; a short-lived one is used otherwise

    Returns:
        Response body as text

    Raises:
        FetchError: Malformed URL, network failure, timeout, or non-2xx status
    """
    options = options or ParseOptions()
    headers = {
        'User-Agent': options.user_agent,
        'Accept': settings.accept_header,
    }
    timeout = options.timeout / 1000

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as owned_client:
                response = await owned_client.get(url, headers=headers,
                                                  follow_redirects=settings.follow_redirects)
                response.raise_for_status()
                return response.text

        response = await client.get(url, headers=headers, timeout=timeout,
                                    follow_redirects=settings.follow_redirects)
        response.raise_for_status()
        return response.text

    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        raise FetchError(url, f"HTTP {status} {e.response.reason_phrase}", status_code=status) from e
    except httpx.TimeoutException as e:
        raise FetchError(url, f"timed out after {options.timeout}ms") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(url, str(e) or type(e).__name__) from e


def _run_strategies(html: str, source_url: str) -> Optional[NormalizedRecipe]:
    for tier, strategy in EXTRACTION_STRATEGIES:
        tier_start = time.time()
        recipe = strategy(html, source_url)
        elapsed = time.time() - tier_start

        if recipe:
            logfire.info("recipe_tier_succeeded", tier=tier, source_url=source_url,
                         elapsed_seconds=round(elapsed, 3))
            return recipe

        logfire.debug("recipe_tier_no_data", tier=tier, source_url=source_url,
                      elapsed_seconds=round(elapsed, 3))

    logfire.info("recipe_not_found", source_url=source_url)
    return None


async def parse_recipe_from_url(url: str, options: Optional[ParseOptions] = None,
                                client: Optional[httpx.AsyncClient] = None) -> Optional[NormalizedRecipe]:
    """
    Fetch a page and extract its recipe.

    Args:
        url: Recipe URL to parse
        options: Fetch options (timeout in ms, User-Agent)
        client: Optional shared AsyncClient

    Returns:
        NormalizedRecipe, or None if neither tier found a recipe

    Raises:
        FetchError: The page could not be fetched
    """
    with logfire.span("parse_recipe_from_url", url=url):
        parse_start = time.time()
        try:
            html = await fetch_html(url, options, client=client)
            logfire.debug("recipe_page_fetched", url=url, chars=len(html),
                          elapsed_seconds=round(time.time() - parse_start, 3))
            return _run_strategies(html, url)
        except FetchError as e:
            logfire.warn("recipe_fetch_failed", url=url, reason=e.reason, status_code=e.status_code)
            raise
        except Exception:
            logfire.exception("recipe_parse_exception", url=url,
                              elapsed_seconds=round(time.time() - parse_start, 3))
            raise


def parse_recipe_from_html(html: str, source_url: str) -> Optional[NormalizedRecipe]:
    """
    Extract a recipe from HTML that has already been fetched.

    Unexpected errors during extraction are logged and reported as no recipe.
    """
    try:
        return _run_strategies(html, source_url)
    except Exception:
        logfire.exception("recipe_parse_exception", source_url=source_url)
        return None
