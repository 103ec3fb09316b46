from .hybrid_coordinator import fetch_html, parse_recipe_from_html, parse_recipe_from_url

__all__ = ['fetch_html', 'parse_recipe_from_html', 'parse_recipe_from_url']
