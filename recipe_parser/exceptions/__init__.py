"""
Exceptions module exports
"""

from .parser_exceptions import (
    RecipeParserError,
    FetchError
)

__all__ = [
    'RecipeParserError',
    'FetchError'
]
