"""
Structured data extraction from HTML pages.

Tier 1 of the extraction pipeline: reads schema.org Recipe objects from
JSON-LD <script> blocks. Most recipe sites publish one, and when present it is
the most reliable source.
"""

import json
import re
from typing import Any, List, Optional, Tuple, Union

import logfire
from bs4 import BeautifulSoup
from pydantic import ValidationError

from ...models.recipe import NormalizedRecipe, number_steps
from ...models.schema_org import (
    HowToSection,
    HowToStep,
    ImageObject,
    StructuredRecipeDocument,
    is_recipe_object,
)
from ..duration_parser import reconcile_times
from ..ingredient_parser import parse_ingredients


JSON_LD_TYPE = re.compile(r'application/ld\+json', re.IGNORECASE)
INSTRUCTION_TEXT_SPLIT = re.compile(r'\.\s+|\n+')
DIGITS = re.compile(r'\d+')


def _json_ld_blocks(soup: BeautifulSoup) -> List[str]:
    blocks = []
    for script in soup.find_all('script', attrs={'type': JSON_LD_TYPE}):
        content = script.string or script.get_text()
        if content and content.strip():
            blocks.append(content)
    return blocks


def _recipe_candidates(data: Any) -> List[dict]:
    """Recipe objects at the top level, in a top-level array, or one level inside @graph."""
    items = data if isinstance(data, list) else [data]
    recipes = []
    for item in items:
        if is_recipe_object(item):
            recipes.append(item)
        elif isinstance(item, dict) and isinstance(item.get('@graph'), list):
            recipes.extend(node for node in item['@graph'] if is_recipe_object(node))
    return recipes


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _page_recipe_objects(html: str) -> List[Tuple[int, dict]]:
    """Raw Recipe objects in page order, each with the index of its JSON-LD block."""
    soup = BeautifulSoup(html, 'html.parser')
    objects = []

    for index, block in enumerate(_json_ld_blocks(soup)):
        try:
            # strict=False tolerates raw newlines/tabs inside strings; NaN/Infinity are rejected
            data = json.loads(block, strict=False, parse_constant=_reject_constant)
        except ValueError as e:
            logfire.warn("jsonld_block_parse_failed",
                         block_index=index,
                         error=str(e),
                         preview=block.strip()[:200])
            continue

        objects.extend((index, candidate) for candidate in _recipe_candidates(data))

    return objects


def _validate_document(index: int, candidate: dict) -> Optional[StructuredRecipeDocument]:
    try:
        return StructuredRecipeDocument.model_validate(candidate)
    except ValidationError as e:
        logfire.warn("jsonld_recipe_invalid",
                     block_index=index,
                     error=str(e)[:500])
        return None


def extract_from_document(html: str) -> List[StructuredRecipeDocument]:
    """
    Collect every schema.org Recipe found in the page's JSON-LD blocks.

    A block that is not valid JSON, or a Recipe object that does not fit the
    document model, is logged and skipped; the other blocks are still read.

    Args:
        html: Raw page HTML

    Returns:
        Recipe documents in page order (may be empty)
    """
    documents = []
    for index, candidate in _page_recipe_objects(html):
        document = _validate_document(index, candidate)
        if document is not None:
            documents.append(document)

    logfire.debug("jsonld_recipes_found", count=len(documents))
    return documents


def resolve_image_url(image: Union[str, ImageObject, List[Union[str, ImageObject]], None]) -> Optional[str]:
    """Image URL from a URL string, an ImageObject, or the first entry of a list."""
    if isinstance(image, str):
        return image.strip() or None
    if isinstance(image, ImageObject):
        return image.url or None
    if isinstance(image, list) and image:
        first = image[0]
        # One level only: lists inside lists are not part of the image shapes
        if isinstance(first, (str, ImageObject)):
            return resolve_image_url(first)
    return None


def resolve_servings(recipe_yield: Union[int, float, str, list, None]) -> Optional[int]:
    """Servings from a number, the first number in a string, or the first list entry."""
    servings = None
    if isinstance(recipe_yield, (int, float)):
        servings = int(recipe_yield)
    elif isinstance(recipe_yield, str):
        match = DIGITS.search(recipe_yield)
        if match:
            servings = int(match.group())
    elif isinstance(recipe_yield, list) and recipe_yield:
        return resolve_servings(recipe_yield[0])

    return servings if servings and servings > 0 else None


def _step_text(step: Union[str, HowToStep]) -> str:
    if isinstance(step, HowToStep):
        return (step.text or step.name or '').strip()
    return step.strip()


def resolve_instructions(instructions: Union[str, list, None]) -> List[str]:
    """
    Flatten recipeInstructions into instruction strings.

    A single string is split on sentence ends and line breaks; lists may mix
    plain strings, HowToStep objects (text, falling back to name) and
    HowToSection groups whose steps are inlined.
    """
    if isinstance(instructions, str):
        pieces = (piece.strip() for piece in INSTRUCTION_TEXT_SPLIT.split(instructions))
        return [piece for piece in pieces if piece]

    if not isinstance(instructions, list):
        return []

    texts = []
    for item in instructions:
        if isinstance(item, HowToSection):
            texts.extend(_step_text(step) for step in item.item_list_element)
        else:
            texts.append(_step_text(item))
    return [text for text in texts if text]


def map_to_normalized_recipe(doc: StructuredRecipeDocument, source_url: str) -> Optional[NormalizedRecipe]:
    """
    Map a schema.org Recipe document onto a NormalizedRecipe.

    Args:
        doc: Recipe document from extract_from_document
        source_url: URL of the page the document came from

    Returns:
        NormalizedRecipe, or None if name, ingredients or instructions are missing
    """
    missing = [
        field for field, present in (
            ('name', bool(doc.name and doc.name.strip())),
            ('recipeIngredient', bool(doc.recipe_ingredient)),
            ('recipeInstructions', bool(doc.recipe_instructions)),
        ) if not present
    ]
    if missing:
        logfire.warn("structured_recipe_missing_fields", missing=missing, source_url=source_url)
        return None

    ingredients = parse_ingredients(doc.recipe_ingredient)
    steps = number_steps(resolve_instructions(doc.recipe_instructions))
    if not ingredients or not steps:
        logfire.warn("structured_recipe_empty_after_normalization",
                     ingredients=len(ingredients),
                     steps=len(steps),
                     source_url=source_url)
        return None

    times = reconcile_times(doc.prep_time, doc.cook_time, doc.total_time)

    return NormalizedRecipe(
        title=doc.name.strip(),
        description=doc.description,
        source_url=source_url,
        image_url=resolve_image_url(doc.image),
        prep_time_minutes=times['prep_minutes'],
        cook_time_minutes=times['cook_minutes'],
        servings=resolve_servings(doc.recipe_yield),
        ingredients=ingredients,
        steps=steps,
    )


def extract_structured_recipe(html: str, source_url: str) -> Optional[NormalizedRecipe]:
    """
    Tier 1: map the first schema.org Recipe on the page.

    Only the first recognized Recipe object is used; pages listing several
    recipes yield the first one. If that object does not fit the document
    model the page has no structured recipe, even when a later one would.
    """
    candidates = _page_recipe_objects(html)
    if not candidates:
        return None

    if len(candidates) > 1:
        logfire.info("jsonld_extra_recipes_ignored", count=len(candidates) - 1, source_url=source_url)

    document = _validate_document(*candidates[0])
    if document is None:
        return None

    return map_to_normalized_recipe(document, source_url)
