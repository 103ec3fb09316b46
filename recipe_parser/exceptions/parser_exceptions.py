"""
Custom exception classes for the recipe extraction engine
"""

from typing import Optional


class RecipeParserError(Exception):
    """Base exception for recipe extraction"""
    pass


class FetchError(RecipeParserError):
    """Raised when a recipe page cannot be downloaded (network, timeout or non-2xx)"""
    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch URL '{url}': {reason}")
