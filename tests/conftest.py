"""
Shared fixtures for the recipe parser test suite.
"""

import json

import logfire
import pytest

# Keep events local during tests
logfire.configure(send_to_logfire=False, console=False)


SOURCE_URL = "https://example.com/recipes/lemon-chicken"


def json_ld_page(*documents, title: str = "Lemon Chicken | Recipe") -> str:
    """Wrap JSON-LD documents in a minimal HTML page, one <script> block each."""
    blocks = "\n".join(
        f'<script type="application/ld+json">{json.dumps(doc)}</script>' for doc in documents
    )
    return f"<html><head><title>{title}</title>{blocks}</head><body><p>Hello</p></body></html>"


@pytest.fixture
def source_url():
    return SOURCE_URL


@pytest.fixture
def recipe_document():
    return {
        "@context": "https://schema.org",
        "@type": "Recipe",
        "name": "Lemon Chicken",
        "description": "Bright weeknight chicken.",
        "image": ["https://example.com/images/chicken.jpg", "https://example.com/images/other.jpg"],
        "author": {"@type": "Person", "name": "Sam Cook"},
        "prepTime": "PT15M",
        "totalTime": "PT45M",
        "recipeYield": "4 servings",
        "recipeIngredient": [
            "2 lbs chicken breast, boneless skinless",
            "1/2 cup lemon juice",
            "salt",
        ],
        "recipeInstructions": [
            {"@type": "HowToStep", "text": "Season the chicken with salt."},
            {"@type": "HowToStep", "text": "Roast for 30 minutes."},
        ],
    }


@pytest.fixture
def json_ld_html(recipe_document):
    return json_ld_page(recipe_document)


@pytest.fixture
def markup_html():
    """A recipe page with no structured data, laid out with common class names."""
    return """
    <html>
    <head>
        <title>Grandma's Pancakes - Allrecipes</title>
        <meta name="description" content="Fluffy weekend pancakes.">
        <style>.ingredients { color: red; }</style>
    </head>
    <body>
    <article>
        <h1 class="recipe-title">Grandma's Pancakes</h1>
        <img src="/images/pancakes.jpg" alt="Pancakes">
        <div class="recipe-meta">
            <span class="prep-time">Prep Time: 10 minutes</span>
            <span class="cook-time">Cook Time: 1 hour 15 minutes</span>
            <span class="servings">Serves: 4</span>
        </div>
        <noscript><ul class="ingredients"><li>1 cup hidden syrup</li></ul></noscript>
        <ul class="ingredients">
            <li>Ingredients</li>
            <li>1 1/2 cups flour</li>
            <li>2 tbsp. sugar</li>
            <li>1 egg, beaten</li>
            <li>Print</li>
        </ul>
        <ol class="instructions">
            <li>1. Whisk the dry ingredients together.</li>
            <li>Stir in the egg and the milk.</li>
            <li>Cook on a hot griddle until golden.</li>
        </ol>
    </article>
    </body>
    </html>
    """


@pytest.fixture
def prose_html():
    """A sparse page: title only in <title>, instructions as one paragraph, times in plain text."""
    return """
    <html>
    <head><title>Simple Soup | Recipe</title></head>
    <body>
        <div class="ingredients"><ul><li>4 cups broth</li><li>1 onion, diced</li></ul></div>
        <div itemprop="recipeInstructions">Chop the onion into fine pieces. Simmer everything in the broth until soft.</div>
        <p>Prep: 5 mins</p>
        <p>Cook: 25 mins</p>
        <p>Makes 6</p>
    </body>
    </html>
    """


@pytest.fixture
def empty_html():
    return "<html><head><title>About us</title></head><body><h1>About us</h1><p>We like food.</p></body></html>"
