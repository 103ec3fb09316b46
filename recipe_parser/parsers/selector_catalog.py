"""
Common selector patterns used by recipe websites.

Each catalog is an ordered tuple of CSS selectors (BeautifulSoup select /
select_one syntax), tried in priority order by the DOM extractor.
"""

# Recipe titles
TITLE_SELECTORS = (
    'h1.recipe-title',
    'h1[itemprop="name"]',
    'h1.entry-title',
    'h1.post-title',
    '[class*="recipe"] h1',
    'article h1',
    'h1',
)

# Title fallbacks: content attribute for meta tags, text for <title>
TITLE_META_SELECTORS = (
    'meta[property="og:title"]',
    'meta[name="twitter:title"]',
    'title',
)

# Ingredient list containers
INGREDIENT_SELECTORS = (
    'ul.ingredients',
    'ol.ingredients',
    'ul[class*="ingredient"]',
    'ol[class*="ingredient"]',
    'ul[class*="recipe-ingredient"]',
    '[itemprop="recipeIngredient"]',
    '[class*="ingredient-list"]',
    'div.ingredients ul',
    'div.ingredients ol',
    'section[class*="ingredient"] ul',
    'section[class*="ingredient"] ol',
)

# Ingredient items inside a container
INGREDIENT_ITEM_SELECTORS = (
    'li[itemprop="recipeIngredient"]',
    'li',
    'p[itemprop="recipeIngredient"]',
    'div[itemprop="recipeIngredient"]',
)

# Instruction containers
INSTRUCTION_SELECTORS = (
    'ol.instructions',
    'ol.recipe-instructions',
    'ol[class*="instruction"]',
    'ol[class*="direction"]',
    'ol[class*="step"]',
    '[itemprop="recipeInstructions"]',
    'div.instructions ol',
    'div[class*="instruction"] ol',
    'section[class*="instruction"] ol',
    'section[class*="direction"] ol',
)

# Instruction items inside a container
INSTRUCTION_ITEM_SELECTORS = (
    'li[itemprop="step"]',
    'li[class*="step"]',
    'li',
    'div[class*="step"]',
    'p[class*="step"]',
)

# Last-resort list items when no container selector produced anything
GENERIC_INGREDIENT_ITEM_SELECTOR = 'ul li, ol li'
GENERIC_INSTRUCTION_ITEM_SELECTOR = 'ol li'

# Recipe images
IMAGE_SELECTORS = (
    'meta[property="og:image"]',
    'meta[name="twitter:image"]',
    'img[itemprop="image"]',
    'img[class*="recipe-image"]',
    'img[class*="recipe-photo"]',
    'article img',
    '[class*="recipe"] img',
    'img',
)

# Recipe description
DESCRIPTION_SELECTORS = (
    'meta[property="og:description"]',
    'meta[name="description"]',
    '[itemprop="description"]',
    'div.recipe-description',
    'p.recipe-description',
)

# Time information. Selectors mentioning "prep" feed prep time and those
# mentioning "cook" feed cook time.
TIME_SELECTORS = (
    '[itemprop="prepTime"]',
    '[itemprop="cookTime"]',
    '[itemprop="totalTime"]',
    '[class*="prep-time"]',
    '[class*="cook-time"]',
    '[class*="total-time"]',
    'time[datetime]',
)

# Servings / yield
SERVINGS_SELECTORS = (
    '[itemprop="recipeYield"]',
    '[class*="yield"]',
    '[class*="serving"]',
    'span[class*="servings"]',
)
