"""
Text utilities for cleaning and interpreting text pulled out of recipe pages.

Used by the DOM extractor to clean fragments, find times and servings in free
prose, split run-on instructions and tell ingredient lines from page chrome.
"""

import re
from typing import Dict, List, Optional


HTML_ENTITIES = (
    ('&nbsp;', ' '),
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#39;', "'"),
)

# Checkbox and bullet glyphs some sites put in front of list items
BULLET_PREFIX = re.compile(r'^[☐☑☒□■○●•‣⁃]\s*')
# "1. " / "2) " but not the "1." of "1.5 cups"
ORDINAL_PREFIX = re.compile(r'^\d+[.)](?!\d)\s*')
WHITESPACE = re.compile(r'\s+')

SITE_SUFFIX = re.compile(
    r'\s*[-|–—]\s*(?:recipe|allrecipes|food network|bon appétit|serious eats|tasty|epicurious).*$',
    re.IGNORECASE
)

HOUR_MINUTE_PATTERN = re.compile(
    r'(\d+)\s*(?:hours?|hrs?|h)\b(?:\s*(?:and\s+)?(\d+)\s*(?:minutes?|mins?|m)\b)?',
    re.IGNORECASE
)
MINUTE_PATTERN = re.compile(r'(\d+)\s*(?:minutes?|mins?|m)(?!\w)', re.IGNORECASE)
HOUR_PATTERN = re.compile(r'(\d+)\s*(?:hours?|hrs?|h)(?!\w)', re.IGNORECASE)

PREP_SEGMENT = re.compile(r'prep(?:\s+time)?[:\s]+([^\n]+?)(?:\n|cook|total|$)', re.IGNORECASE)
COOK_SEGMENT = re.compile(r'cook(?:\s+time)?[:\s]+([^\n]+?)(?:\n|prep|total|$)', re.IGNORECASE)

SERVINGS_PATTERNS = (
    # "Serves: 4", "Yield: 6 servings", "Makes 8"
    re.compile(r'(?:serves?|yield|makes?)[:\s]+(\d+)', re.IGNORECASE),
    # "6 servings", "4 people" - but not the "6" of "4-6 servings"
    re.compile(r'(?<![\d-])(?<!-\s)(\d+)\s*(?:serving|portion|people)', re.IGNORECASE),
    # "4-6 servings" takes the lower bound
    re.compile(r'(\d+)\s*-\s*\d+\s*(?:serving|portion)', re.IGNORECASE),
)

NUMBERED_STEP_SPLIT = re.compile(r'\d+[.)]\s+')
LINE_SPLIT = re.compile(r'\n+')
SENTENCE_SPLIT = re.compile(r'\.\s+(?=[A-Z])')

# Page chrome and section headers that show up inside recipe lists
UI_CHROME = re.compile(r'^(print|save|share|pin|email|comment|rating|review|subscribe)$', re.IGNORECASE)
SECTION_HEADER = re.compile(r'^(ingredients|instructions|directions|steps|method|preparation)$', re.IGNORECASE)
STAR_RATING = re.compile(r'^\d+\s*star', re.IGNORECASE)
RECIPE_WORD = re.compile(r'\brecipes?\b', re.IGNORECASE)
BYLINE = re.compile(r'^by\s+', re.IGNORECASE)

COMMON_EXCLUDES = (UI_CHROME, SECTION_HEADER, STAR_RATING)
INGREDIENT_EXCLUDES = COMMON_EXCLUDES + (RECIPE_WORD, BYLINE)


def clean_text(text: Optional[str]) -> str:
    """
    Clean text by decoding common HTML entities, dropping a leading bullet or
    "1." / "2)" marker and collapsing whitespace.

    Only one bullet and one ordinal marker are removed per call, so stacked
    markers are not idempotent: "1. 2) Mix" cleans to "2) Mix", which cleans
    again to "Mix".
    """
    if not text:
        return ''

    for entity, replacement in HTML_ENTITIES:
        text = text.replace(entity, replacement)

    text = text.strip()
    text = BULLET_PREFIX.sub('', text)
    text = ORDINAL_PREFIX.sub('', text)
    return WHITESPACE.sub(' ', text).strip()


def clean_title(title: Optional[str]) -> str:
    """Clean a title and remove site suffixes like "| Recipe" or "- Allrecipes"."""
    if not title:
        return ''

    return SITE_SUFFIX.sub('', clean_text(title)).strip()


def extract_time_in_minutes(text: Optional[str]) -> Optional[int]:
    """
    Extract a duration from prose.

    Examples:
        "Prep Time: 15 minutes" → 15
        "Total: 1 hour 15 minutes" → 75
        "45 mins" → 45
        "2 hours" → 120
    """
    if not text:
        return None

    match = HOUR_MINUTE_PATTERN.search(text)
    if match:
        hours = int(match.group(1))
        minutes = int(match.group(2)) if match.group(2) else 0
        return hours * 60 + minutes

    match = MINUTE_PATTERN.search(text)
    if match:
        return int(match.group(1))

    match = HOUR_PATTERN.search(text)
    if match:
        return int(match.group(1)) * 60

    return None


def parse_times_from_text(text: Optional[str]) -> Dict[str, Optional[int]]:
    """Find "Prep ..." and "Cook ..." segments in page text and read their durations."""
    result: Dict[str, Optional[int]] = {'prep_minutes': None, 'cook_minutes': None}
    if not text:
        return result

    prep_match = PREP_SEGMENT.search(text)
    if prep_match:
        result['prep_minutes'] = extract_time_in_minutes(prep_match.group(1))

    cook_match = COOK_SEGMENT.search(text)
    if cook_match:
        result['cook_minutes'] = extract_time_in_minutes(cook_match.group(1))

    return result


def extract_servings(text: Optional[str]) -> Optional[int]:
    """
    Extract a serving count.

    Examples:
        "Serves: 4" → 4
        "Makes 8 portions" → 8
        "4-6 servings" → 4
    """
    if not text:
        return None

    for pattern in SERVINGS_PATTERNS:
        match = pattern.search(text)
        if match:
            return int(match.group(1))

    return None


def split_into_steps(text: Optional[str]) -> List[str]:
    """
    Split a single block of instructions into steps.

    Tries numbered markers, then line breaks, then sentence boundaries (only
    keeping substantial sentences); otherwise the whole text is one step.
    """
    if not text:
        return []

    numbered = [piece for piece in NUMBERED_STEP_SPLIT.split(text) if piece.strip()]
    if len(numbered) > 1:
        return _clean_steps(numbered)

    lines = [piece for piece in LINE_SPLIT.split(text) if piece.strip()]
    if len(lines) > 1:
        return _clean_steps(lines)

    sentences = [piece for piece in SENTENCE_SPLIT.split(text) if len(piece.strip()) > 20]
    if len(sentences) > 1:
        return _clean_steps(sentences)

    cleaned = clean_text(text)
    return [cleaned] if cleaned else []


def _clean_steps(pieces: List[str]) -> List[str]:
    cleaned = (clean_text(piece) for piece in pieces)
    return [piece for piece in cleaned if piece]


def _is_excluded(text: str, patterns) -> bool:
    return any(pattern.search(text) for pattern in patterns)


def is_likely_ingredient(text: Optional[str]) -> bool:
    """Check if text looks like an ingredient (vs navigation, ratings, bylines)."""
    if not text or len(text) < 2:
        return False

    cleaned = text.strip().lower()
    if _is_excluded(cleaned, INGREDIENT_EXCLUDES):
        return False

    return 2 <= len(cleaned) < 200


def is_likely_instruction(text: Optional[str]) -> bool:
    """Check if text looks like an instruction step."""
    if not text or len(text) < 10:
        return False

    cleaned = text.strip().lower()
    if _is_excluded(cleaned, COMMON_EXCLUDES):
        return False

    return 10 <= len(cleaned) < 1000
