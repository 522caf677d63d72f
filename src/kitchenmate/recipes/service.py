"""
Recipe Service Client.

Sends a built RecipeRequest to the LLM and returns a tagged RecipeResult, so
"no matches" and "the call failed" can never be confused by callers.
"""

import logging
from dataclasses import dataclass, field
from typing import Literal

from kitchenmate.llm.client import call_llm
from kitchenmate.recipes.models import Recipe
from kitchenmate.recipes.prompts import RecipeRequest, build_recipe_request
from kitchenmate.wizard.profile import UserProfile

logger = logging.getLogger(__name__)

ResultStatus = Literal["success", "empty", "failure"]


@dataclass(frozen=True)
class RecipeResult:
    """Outcome of a recipe generation call."""

    status: ResultStatus
    recipes: tuple[Recipe, ...] = field(default_factory=tuple)
    reason: str | None = None

    @classmethod
    def success(cls, recipes: list[Recipe] | tuple[Recipe, ...]) -> "RecipeResult":
        recipes = tuple(recipes)
        return cls(status="success" if recipes else "empty", recipes=recipes)

    @classmethod
    def failure(cls, reason: str) -> "RecipeResult":
        return cls(status="failure", reason=reason)

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def is_empty(self) -> bool:
        return self.status == "empty"

    @property
    def is_failure(self) -> bool:
        return self.status == "failure"


async def request_recipes(request: RecipeRequest) -> RecipeResult:
    """Issue a built request. Any failure becomes RecipeResult.failure."""
    try:
        suggestions = await call_llm(
            response_model=request.response_model,
            system_prompt=request.system_prompt,
            user_prompt=request.user_prompt,
            task="recipes",
            model=request.model,
            max_retries=1,
        )
    except Exception as e:
        logger.error(f"Recipe generation failed: {e}")
        return RecipeResult.failure(str(e) or type(e).__name__)

    if suggestions is None:
        logger.warning("Recipe generation returned no body")
        return RecipeResult.success([])

    logger.info(f"Recipe generation returned {len(suggestions.recipes)} recipes")
    return RecipeResult.success(suggestions.recipes)


async def generate_recipes(profile: UserProfile, *, model: str | None = None) -> RecipeResult:
    """
    Generate recipe suggestions for a profile.

    Returns:
        RecipeResult - success (recipes), empty (call worked, nothing came
        back) or failure (transport/validation error, with reason).
        ``result.recipes`` is always a sequence, empty unless successful.
    """
    return await request_recipes(build_recipe_request(profile, model=model))
