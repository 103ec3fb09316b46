"""
Tests for the DOM heuristic (tier 2) extractor
"""

from bs4 import BeautifulSoup
from logfire.testing import CaptureLogfire

from recipe_parser.parsers.extraction.dom_extractor import (
    extract_from_markup,
    extract_image_url,
    extract_times,
    extract_title,
)


def _soup(html):
    return BeautifulSoup(html, "html.parser")


class TestExtractFromMarkup:
    """Full-page extraction from common recipe markup"""

    def test_class_based_layout(self, markup_html, source_url):
        recipe = extract_from_markup(markup_html, source_url)

        assert recipe.title == "Grandma's Pancakes"
        assert recipe.description == "Fluffy weekend pancakes."
        assert recipe.source_url == source_url
        assert recipe.image_url == "https://example.com/images/pancakes.jpg"
        assert recipe.prep_time_minutes == 10
        assert recipe.cook_time_minutes == 75
        assert recipe.servings == 4

        assert [(i.quantity, i.unit, i.ingredient_name) for i in recipe.ingredients] == [
            ("1 1/2", "cups", "flour"),
            ("2", "tbsp", "sugar"),
            ("1", None, "egg"),
        ]
        assert recipe.ingredients[2].notes == "beaten"
        assert [s.instruction for s in recipe.steps] == [
            "Whisk the dry ingredients together.",
            "Stir in the egg and the milk.",
            "Cook on a hot griddle until golden.",
        ]
        assert [s.step_number for s in recipe.steps] == [1, 2, 3]

    def test_non_content_elements_ignored(self, markup_html, source_url):
        recipe = extract_from_markup(markup_html, source_url)
        assert "hidden syrup" not in [i.ingredient_name for i in recipe.ingredients]

    def test_sparse_page_uses_fallbacks(self, prose_html, source_url):
        recipe = extract_from_markup(prose_html, source_url)

        assert recipe.title == "Simple Soup"
        assert [i.ingredient_name for i in recipe.ingredients] == ["broth", "onion"]
        assert recipe.ingredients[1].notes == "diced"
        assert [s.instruction for s in recipe.steps] == [
            "Chop the onion into fine pieces",
            "Simmer everything in the broth until soft.",
        ]
        assert recipe.prep_time_minutes == 5
        assert recipe.cook_time_minutes == 25
        assert recipe.servings == 6
        assert recipe.image_url is None

    def test_insufficient_page(self, empty_html, source_url, capfire: CaptureLogfire):
        assert extract_from_markup(empty_html, source_url) is None

        names = [span["name"] for span in capfire.exporter.exported_spans_as_dict()]
        assert "dom_extraction_insufficient" in names

    def test_generic_list_fallback(self, source_url):
        html = """
        <html><body>
            <h1>Plain Salad</h1>
            <ul><li>1 head lettuce</li><li>2 tomatoes</li></ul>
            <ol><li>Tear the lettuce into pieces.</li><li>Slice the tomatoes and toss.</li></ol>
        </body></html>
        """
        recipe = extract_from_markup(html, source_url)
        assert recipe.title == "Plain Salad"
        assert recipe.ingredients[0].ingredient_name == "head lettuce"
        assert len(recipe.steps) == 2


class TestExtractTitle:

    def test_meta_fallback(self):
        soup = _soup('<head><meta property="og:title" content="Fish Tacos | Recipe"><title>Other</title></head>')
        assert extract_title(soup) == "Fish Tacos"

    def test_none(self):
        assert extract_title(_soup("<p>nothing</p>")) is None


class TestExtractImageUrl:

    def test_meta_image_first(self, source_url):
        soup = _soup('<meta property="og:image" content="https://cdn.example.com/a.jpg"><img src="/b.jpg">')
        assert extract_image_url(soup, source_url) == "https://cdn.example.com/a.jpg"

    def test_lazy_loaded_image(self, source_url):
        soup = _soup('<article><img data-src="//cdn.example.com/lazy.jpg"></article>')
        assert extract_image_url(soup, source_url) == "https://cdn.example.com/lazy.jpg"

    def test_non_http_source_skipped(self, source_url):
        soup = _soup('<img src="data:image/png;base64,AAAA">')
        assert extract_image_url(soup, source_url) is None


class TestExtractTimes:

    def test_datetime_attribute(self):
        soup = _soup(
            '<time itemprop="prepTime" datetime="PT20M">20 minutes</time>'
            '<meta itemprop="cookTime" content="PT1H10M">'
        )
        assert extract_times(soup) == {"prep_minutes": 20, "cook_minutes": 70}

    def test_first_value_wins(self):
        soup = _soup(
            '<span itemprop="prepTime">5 minutes</span>'
            '<span class="prep-time">50 minutes</span>'
        )
        assert extract_times(soup)["prep_minutes"] == 5

    def test_no_times(self):
        assert extract_times(_soup("<p>Delicious.</p>")) == {"prep_minutes": None, "cook_minutes": None}
