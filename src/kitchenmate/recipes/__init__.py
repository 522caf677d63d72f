"""Recipe generation: profile -> prompt -> structured suggestions."""

from kitchenmate.recipes.models import Recipe, RecipeSuggestions
from kitchenmate.recipes.prompts import RecipeRequest, build_recipe_request
from kitchenmate.recipes.service import RecipeResult, generate_recipes

__all__ = [
    "Recipe",
    "RecipeSuggestions",
    "RecipeRequest",
    "build_recipe_request",
    "RecipeResult",
    "generate_recipes",
]
