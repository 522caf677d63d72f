"""
Recipe Request Builder.

Formats a UserProfile into the natural-language instruction and output
contract for the recipe generation call.
"""

from dataclasses import dataclass
from typing import Any

from kitchenmate.recipes.models import MAX_SUGGESTIONS, MIN_SUGGESTIONS, RecipeSuggestions
from kitchenmate.wizard.profile import UserProfile, favorite_dish_names


RECIPE_SYSTEM_PROMPT = """You are KitchenMate, a friendly cooking companion app.
Suggest {min_count} to {max_count} distinct recipes for the user profile below.

**User Profile:**
- Ingredients available: {ingredients} (assume basic staples like salt, oil and pepper are on hand)
- Dietary preference: {dietary}
- Food mood: {mood}
- Meal type: {meal_type}
- Difficulty: {difficulty}
- Health goals: {goals}
- Cuisine craving: {cuisine}
{favorites}
**Rules:**
1. Never call yourself a chef. Be a friendly guide.
2. Only suggest dishes that strictly match the dietary preference.
3. Build the dishes around the listed ingredients.
4. Keep instructions concise.
5. Give a match_reason explaining why the dish fits their mood and goals.
6. Give a simple, visual image_keyword (e.g. "Pepperoni Pizza", "Caesar Salad", "Tomato Soup") that could be used to search for a photo of the dish."""

FAVORITES_LINE = (
    "- Previously loved dishes: {dishes}. Suggest something with a similar vibe "
    "if it fits the current criteria.\n"
)

RECIPE_USER_PROMPT = "Suggest recipes for me."


@dataclass(frozen=True)
class RecipeRequest:
    """Everything needed to make one recipe generation call."""

    model: str | None
    system_prompt: str
    user_prompt: str
    response_model: type[RecipeSuggestions] = RecipeSuggestions

    @property
    def response_schema(self) -> dict[str, Any]:
        """JSON schema the provider must satisfy."""
        return self.response_model.model_json_schema()


def _join(values: list[str], fallback: str) -> str:
    return ", ".join(values) if values else fallback


def format_profile_for_prompt(profile: UserProfile) -> str:
    """Render the recipe system prompt for a profile."""
    favorites = favorite_dish_names(profile)
    favorites_line = FAVORITES_LINE.format(dishes=", ".join(favorites)) if favorites else ""

    return RECIPE_SYSTEM_PROMPT.format(
        min_count=MIN_SUGGESTIONS,
        max_count=MAX_SUGGESTIONS,
        ingredients=_join(profile.ingredients, "none listed"),
        dietary=profile.dietary or "No preference",
        mood=profile.mood or "Any",
        meal_type=profile.meal_type or "Any",
        difficulty=profile.difficulty or "Any",
        goals=_join(profile.goals, "No Specific Goal"),
        cuisine=profile.cuisine or "Any",
        favorites=favorites_line,
    )


def build_recipe_request(profile: UserProfile, *, model: str | None = None) -> RecipeRequest:
    """
    Build the recipe generation request for a profile.

    Ingredients are not checked here; the wizard refuses to leave the
    ingredients step with an empty list.
    """
    return RecipeRequest(
        model=model,
        system_prompt=format_profile_for_prompt(profile),
        user_prompt=RECIPE_USER_PROMPT,
    )
