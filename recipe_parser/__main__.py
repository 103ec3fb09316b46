"""
Command line entry point.

Usage:
    python -m recipe_parser URL [--html-file PATH] [--timeout MS] [--user-agent UA]

Prints the extracted recipe as JSON on stdout. Exit status is 1 when no recipe
could be extracted and 2 when the page could not be fetched.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from .config import configure_logging, settings
from .exceptions import FetchError
from .models.recipe import NormalizedRecipe, ParseOptions
from .parsers.coordination.hybrid_coordinator import parse_recipe_from_html, parse_recipe_from_url


EXIT_NO_RECIPE = 1
EXIT_FETCH_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-parser",
        description="Extract a normalized recipe from a recipe web page."
    )
    parser.add_argument("url", help="Recipe page URL (also used as source URL with --html-file)")
    parser.add_argument("--html-file", type=Path,
                        help="Parse this saved HTML file instead of fetching the URL")
    parser.add_argument("--timeout", type=int, default=settings.fetch_timeout_ms,
                        help="Fetch timeout in milliseconds (default: %(default)s)")
    parser.add_argument("--user-agent", default=settings.user_agent,
                        help="User-Agent header (default: %(default)s)")
    return parser


async def run(args: argparse.Namespace) -> Optional[NormalizedRecipe]:
    if args.html_file:
        html = args.html_file.read_text(encoding="utf-8")
        return parse_recipe_from_html(html, args.url)

    options = ParseOptions(timeout=args.timeout, user_agent=args.user_agent)
    return await parse_recipe_from_url(args.url, options)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        recipe = asyncio.run(run(args))
    except FetchError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_FETCH_FAILED

    if recipe is None:
        print(f"❌ No recipe found at {args.url}", file=sys.stderr)
        return EXIT_NO_RECIPE

    print(f"✅ {recipe.title}: {len(recipe.ingredients)} ingredients, {len(recipe.steps)} steps",
          file=sys.stderr)
    print(recipe.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
