"""
Ingredient parsing utility for structured data extraction.

Parses ingredient strings like "2 lbs chicken breast, boneless skinless" into:
{
    "quantity": "2",
    "unit": "lbs",
    "ingredient_name": "chicken breast",
    "notes": "boneless skinless"
}

Quantities are kept exactly as written ("1/2", "1 1/2", "½") since recipe
amounts include fractions that do not survive a float conversion.
"""

import re
from typing import Any, Iterable, List

from ..models.recipe import Ingredient


# Common measurement units. The first entry that matches as a whole word wins,
# so plural and singular forms are both listed.
UNITS = (
    # Volume
    'cup', 'cups',
    'tablespoon', 'tablespoons', 'tbsp', 'tbs', 'tb',
    'teaspoon', 'teaspoons', 'tsp', 'ts',
    'milliliter', 'milliliters', 'ml',
    'liter', 'liters', 'l',
    'pint', 'pints', 'pt',
    'quart', 'quarts', 'qt',
    'gallon', 'gallons', 'gal',

    # Weight
    'ounce', 'ounces', 'oz',
    'pound', 'pounds', 'lb', 'lbs',
    'gram', 'grams', 'g',
    'kilogram', 'kilograms', 'kg',

    # Count
    'piece', 'pieces', 'pc',
    'slice', 'slices',
    'clove', 'cloves',
    'pinch', 'dash',
    'can', 'cans',
    'package', 'packages', 'pkg',
    'bunch', 'bunches',
)

UNIT_PATTERNS = tuple(
    (unit, re.compile(rf'{re.escape(unit)}\b', re.IGNORECASE)) for unit in UNITS
)

VULGAR_FRACTIONS = '½⅓⅔¼¾⅕⅖⅗⅘⅙⅚⅛⅜⅝⅞'

# Quantity can be: 1, 1.5, 1/2, 1 1/2, ½, 1 ½
QUANTITY_PATTERN = re.compile(
    rf'^(\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?(?:\s*[{VULGAR_FRACTIONS}])?|[{VULGAR_FRACTIONS}])\s*'
)


def parse_ingredient(ingredient_str: Any, order_index: int = 0) -> Ingredient:
    """
    Parse ingredient string into structured components.

    Args:
        ingredient_str: Raw ingredient string like "2 cups all-purpose flour"
        order_index: Position of the line in its list. Tokenizing does not
            depend on it; callers pass it to keep list-driven call sites uniform.

    Returns:
        Ingredient with quantity, unit, ingredient_name and notes
    """
    if not ingredient_str or not isinstance(ingredient_str, str):
        return Ingredient(ingredient_name='')

    main_part, _, notes_part = ingredient_str.strip().partition(',')
    notes = notes_part.strip() or None

    quantity_match = QUANTITY_PATTERN.match(main_part)
    if not quantity_match:
        # No quantity found - "salt", "pepper to taste", ...
        return Ingredient(ingredient_name=main_part.strip(), notes=notes)

    quantity = quantity_match.group(1).strip()
    remaining = main_part[quantity_match.end():].strip()

    unit = None
    for candidate, pattern in UNIT_PATTERNS:
        if pattern.match(remaining):
            unit = candidate
            remaining = remaining[len(candidate):]
            break

    # "1 tbsp. sugar" leaves the abbreviation period behind
    ingredient_name = remaining.lstrip('. ').strip() if unit else remaining

    return Ingredient(
        ingredient_name=ingredient_name,
        quantity=quantity,
        unit=unit,
        notes=notes
    )


def parse_ingredients(ingredients: Iterable[Any]) -> List[Ingredient]:
    """
    Parse a list of ingredient strings into structured format.

    Args:
        ingredients: List of raw ingredient strings

    Returns:
        List of parsed ingredients, empty or non-string lines skipped
    """
    if not isinstance(ingredients, (list, tuple)):
        return []

    lines = [ing for ing in ingredients if isinstance(ing, str) and ing.strip()]
    return [parse_ingredient(line, index) for index, line in enumerate(lines)]
