from .recipe import Ingredient, NormalizedRecipe, ParseOptions, Step, number_steps
from .schema_org import StructuredRecipeDocument, is_recipe_object

__all__ = [
    'Ingredient',
    'NormalizedRecipe',
    'ParseOptions',
    'Step',
    'number_steps',
    'StructuredRecipeDocument',
    'is_recipe_object',
]
