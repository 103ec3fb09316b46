"""
DOM-based recipe extraction.

Tier 2 of the extraction pipeline, used when a page has no usable JSON-LD
Recipe: walks the page with the selector catalog and the text heuristics to
assemble a recipe from plain markup.
"""

from typing import Dict, List, Optional
from urllib.parse import urljoin

import logfire
from bs4 import BeautifulSoup, Tag

from ...models.recipe import Ingredient, NormalizedRecipe, Step, number_steps
from ..duration_parser import parse_duration
from ..ingredient_parser import parse_ingredient
from ..selector_catalog import (
    DESCRIPTION_SELECTORS,
    GENERIC_INGREDIENT_ITEM_SELECTOR,
    GENERIC_INSTRUCTION_ITEM_SELECTOR,
    IMAGE_SELECTORS,
    INGREDIENT_ITEM_SELECTORS,
    INGREDIENT_SELECTORS,
    INSTRUCTION_ITEM_SELECTORS,
    INSTRUCTION_SELECTORS,
    SERVINGS_SELECTORS,
    TIME_SELECTORS,
    TITLE_META_SELECTORS,
    TITLE_SELECTORS,
)
from ..text_utils import (
    clean_text,
    clean_title,
    extract_servings,
    extract_time_in_minutes,
    is_likely_ingredient,
    is_likely_instruction,
    parse_times_from_text,
    split_into_steps,
)


NON_CONTENT_TAGS = ['script', 'style', 'noscript', 'template']


def _element_text(element: Tag) -> str:
    return element.get_text(' ')


def _is_meta(selector: str) -> bool:
    return selector.startswith('meta')


def _page_text(soup: BeautifulSoup) -> str:
    root = soup.body or soup
    return root.get_text('\n')


def extract_title(soup: BeautifulSoup) -> Optional[str]:
    """Title from heading selectors, then og:title / twitter:title / <title>."""
    for selector in TITLE_SELECTORS:
        element = soup.select_one(selector)
        if element:
            text = clean_title(_element_text(element))
            if text:
                return text

    for selector in TITLE_META_SELECTORS:
        element = soup.select_one(selector)
        if element:
            raw = element.get('content') if _is_meta(selector) else _element_text(element)
            text = clean_title(raw)
            if text:
                return text

    return None


def extract_description(soup: BeautifulSoup) -> Optional[str]:
    for selector in DESCRIPTION_SELECTORS:
        element = soup.select_one(selector)
        if element:
            raw = element.get('content') if _is_meta(selector) else _element_text(element)
            text = clean_text(raw)
            if text:
                return text
    return None


def _ingredients_from(elements: List[Tag]) -> List[Ingredient]:
    ingredients = []
    for element in elements:
        text = clean_text(_element_text(element))
        if is_likely_ingredient(text):
            parsed = parse_ingredient(text, len(ingredients))
            if parsed.ingredient_name:
                ingredients.append(parsed)
    return ingredients


def extract_ingredients(soup: BeautifulSoup) -> List[Ingredient]:
    """
    Ingredients from the first container selector that yields any, falling
    back to every list item on the page.
    """
    item_selector = ', '.join(INGREDIENT_ITEM_SELECTORS)

    for selector in INGREDIENT_SELECTORS:
        container = soup.select_one(selector)
        if container:
            ingredients = _ingredients_from(container.select(item_selector))
            if ingredients:
                return ingredients

    return _ingredients_from(soup.select(GENERIC_INGREDIENT_ITEM_SELECTOR))


def _instructions_from(elements: List[Tag]) -> List[str]:
    texts = (clean_text(_element_text(element)) for element in elements)
    return [text for text in texts if is_likely_instruction(text)]


def extract_instructions(soup: BeautifulSoup) -> List[Step]:
    """
    Steps from the first instruction container that yields any, then from
    every ordered-list item, then by splitting the first container's text.
    """
    item_selector = ', '.join(INSTRUCTION_ITEM_SELECTORS)

    for selector in INSTRUCTION_SELECTORS:
        container = soup.select_one(selector)
        if container:
            instructions = _instructions_from(container.select(item_selector))
            if instructions:
                return number_steps(instructions)

    instructions = _instructions_from(soup.select(GENERIC_INSTRUCTION_ITEM_SELECTOR))
    if instructions:
        return number_steps(instructions)

    # Instructions written as one block of prose
    for selector in INSTRUCTION_SELECTORS:
        container = soup.select_one(selector)
        if container:
            raw = container.get_text('\n')
            if raw.strip():
                return number_steps(split_into_steps(raw))

    return []


def extract_image_url(soup: BeautifulSoup, source_url: str) -> Optional[str]:
    """First image candidate that resolves to an http(s) URL."""
    for selector in IMAGE_SELECTORS:
        element = soup.select_one(selector)
        if not element:
            continue

        if _is_meta(selector):
            src = element.get('content')
        else:
            src = element.get('src') or element.get('data-src')

        if src and src.strip():
            # Convert relative URLs to absolute
            url = urljoin(source_url, src.strip())
            if url.startswith(('http://', 'https://')):
                return url

    return None


def extract_times(soup: BeautifulSoup) -> Dict[str, Optional[int]]:
    """
    Prep and cook minutes from time elements (datetime attribute first, then
    text), falling back to "Prep ... Cook ..." patterns in the page text.
    """
    times: Dict[str, Optional[int]] = {'prep_minutes': None, 'cook_minutes': None}

    for selector in TIME_SELECTORS:
        lowered = selector.lower()
        if 'prep' in lowered:
            key = 'prep_minutes'
        elif 'cook' in lowered:
            key = 'cook_minutes'
        else:
            continue

        if times[key] is not None:
            continue

        element = soup.select_one(selector)
        if not element:
            continue

        datetime_value = element.get('datetime') or element.get('content')
        if datetime_value:
            minutes = parse_duration(datetime_value)
        else:
            minutes = extract_time_in_minutes(clean_text(_element_text(element)))
        if minutes:
            times[key] = minutes

    if times['prep_minutes'] is None and times['cook_minutes'] is None:
        times = parse_times_from_text(_page_text(soup))

    return times


def extract_servings_from_dom(soup: BeautifulSoup) -> Optional[int]:
    for selector in SERVINGS_SELECTORS:
        element = soup.select_one(selector)
        if element:
            servings = extract_servings(clean_text(_element_text(element)))
            if servings:
                return servings

    servings = extract_servings(_page_text(soup))
    return servings if servings else None


def extract_from_markup(html: str, source_url: str) -> Optional[NormalizedRecipe]:
    """
    Tier 2: assemble a recipe from plain markup.

    Args:
        html: Raw page HTML
        source_url: URL the HTML came from

    Returns:
        NormalizedRecipe, or None unless a title, at least one ingredient and
        at least one step were found
    """
    soup = BeautifulSoup(html, 'html.parser')

    # Remove script, style, and other non-content elements
    for element in soup(NON_CONTENT_TAGS):
        element.decompose()

    title = extract_title(soup)
    ingredients = extract_ingredients(soup)
    steps = extract_instructions(soup)

    if not title or not ingredients or not steps:
        logfire.info("dom_extraction_insufficient",
                     source_url=source_url,
                     has_title=bool(title),
                     ingredients=len(ingredients),
                     steps=len(steps))
        return None

    times = extract_times(soup)
    recipe = NormalizedRecipe(
        title=title,
        description=extract_description(soup),
        source_url=source_url,
        image_url=extract_image_url(soup, source_url),
        prep_time_minutes=times['prep_minutes'],
        cook_time_minutes=times['cook_minutes'],
        servings=extract_servings_from_dom(soup),
        ingredients=ingredients,
        steps=steps,
    )

    logfire.info("dom_extraction_succeeded",
                 source_url=source_url,
                 title=recipe.title,
                 ingredients=len(recipe.ingredients),
                 steps=len(recipe.steps))
    return recipe
