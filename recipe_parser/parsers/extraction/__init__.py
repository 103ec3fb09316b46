from .structured_extractor import extract_from_document, extract_structured_recipe, map_to_normalized_recipe
from .dom_extractor import extract_from_markup

__all__ = [
    'extract_from_document',
    'extract_structured_recipe',
    'map_to_normalized_recipe',
    'extract_from_markup',
]
