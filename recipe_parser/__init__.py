"""
Recipe extraction engine.

Turns a recipe web page into a NormalizedRecipe, reading schema.org JSON-LD
first and falling back to DOM heuristics.
"""

from .exceptions import FetchError, RecipeParserError
from .models.recipe import Ingredient, NormalizedRecipe, ParseOptions, Step
from .parsers.coordination.hybrid_coordinator import (
    fetch_html,
    parse_recipe_from_html,
    parse_recipe_from_url,
)

__version__ = "1.0.0"

__all__ = [
    'FetchError',
    'RecipeParserError',
    'Ingredient',
    'NormalizedRecipe',
    'ParseOptions',
    'Step',
    'fetch_html',
    'parse_recipe_from_html',
    'parse_recipe_from_url',
]
