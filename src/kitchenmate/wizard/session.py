"""
Wizard Session.

The controller for one user's run through the wizard. Holds the current
step, the current profile snapshot and the results view; all profile
changes go through the pure functions in .profile.
"""

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable

from kitchenmate.recipes.service import RecipeResult, generate_recipes

from . import profile as profile_ops
from .exceptions import RatingError, ResultsError, StepError, StepNotReadyError
from .options import (
    CUISINE_OPTIONS,
    DIETARY_OPTIONS,
    DIFFICULTY_OPTIONS,
    GOAL_OPTIONS,
    MEAL_TYPE_OPTIONS,
    MOOD_OPTIONS,
    labels,
)
from .profile import Rating, UserProfile
from .results import ResultsStatus, ResultsView
from .steps import (
    AUTO_ADVANCE_STEPS,
    INITIAL_STEP,
    WizardStep,
    includes_meal_type,
    is_step_complete,
    next_step,
    previous_step,
    triggers_fetch,
)

logger = logging.getLogger(__name__)

RecipeGenerator = Callable[[UserProfile], Awaitable[RecipeResult]]

# Single-choice steps: profile field + allowed values
SINGLE_CHOICE_FIELDS: dict[WizardStep, tuple[str, list[str]]] = {
    WizardStep.DIETARY: ("dietary", labels(DIETARY_OPTIONS)),
    WizardStep.MOOD: ("mood", labels(MOOD_OPTIONS)),
    WizardStep.MEAL_TYPE: ("meal_type", labels(MEAL_TYPE_OPTIONS)),
    WizardStep.DIFFICULTY: ("difficulty", labels(DIFFICULTY_OPTIONS)),
    WizardStep.CUISINE: ("cuisine", labels(CUISINE_OPTIONS)),
}

RECENT_RATINGS_SHOWN = 3


@dataclass
class WizardSession:
    """One user's wizard run. Nothing here outlives the process."""

    step: WizardStep = INITIAL_STEP
    profile: UserProfile = field(default_factory=UserProfile)
    results: ResultsView | None = None
    generator: RecipeGenerator = generate_recipes

    # Step PROFILE was opened from
    profile_return_step: WizardStep | None = None

    # Incremented per fetch; only the latest fetch may resolve the view
    fetch_generation: int = 0

    # -------------------------------------------------------------------------
    # Answers
    # -------------------------------------------------------------------------

    def _set(self, **changes) -> UserProfile:
        self.profile = profile_ops.update_profile(self.profile, **changes)
        return self.profile

    def answer(self, value: str) -> bool:
        """
        Record a single-choice answer for the current step.

        Returns:
            True if the step moves on by itself after the pick
        """
        if self.step not in SINGLE_CHOICE_FIELDS:
            raise StepError(f"Step {self.step.value} does not take a single choice")

        field_name, allowed = SINGLE_CHOICE_FIELDS[self.step]
        if value not in allowed:
            raise StepError(f"Unknown {field_name} option: {value}")

        changes = {field_name: value}
        if field_name == "dietary" and not includes_meal_type(value):
            # Meal type is never asked on this branch; don't leak a stale one
            changes["meal_type"] = ""
        self._set(**changes)
        return self.step in AUTO_ADVANCE_STEPS

    def sign_in(self, name: str, age: str, email: str = "") -> UserProfile:
        """LOGIN answer. Name and age are required."""
        name, age, email = name.strip(), str(age).strip(), email.strip()
        if not name or not age:
            raise StepNotReadyError("Name and age are required")
        return self._set(name=name, age=age, email=email)

    def update_details(self, name: str, age: str, email: str) -> UserProfile:
        """Edit personal info from the profile screen."""
        return self._set(name=name, age=str(age), email=email)

    def add_ingredient(self, ingredient: str) -> UserProfile:
        self.profile = profile_ops.add_ingredient(self.profile, ingredient)
        return self.profile

    def toggle_ingredient(self, ingredient: str) -> UserProfile:
        self.profile = profile_ops.toggle_ingredient(self.profile, ingredient)
        return self.profile

    def toggle_goal(self, goal: str) -> UserProfile:
        if goal not in GOAL_OPTIONS:
            raise StepError(f"Unknown goal: {goal}")
        self.profile = profile_ops.toggle_goal(self.profile, goal)
        return self.profile

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    @property
    def can_advance(self) -> bool:
        return is_step_complete(self.step, self.profile)

    async def advance(self) -> WizardStep:
        """Move forward. Entering RESULTS waits for recipe generation."""
        if not self.can_advance:
            raise StepNotReadyError(f"Step {self.step.value} is not complete")

        target = next_step(self.step, self.profile.dietary)
        if target == self.step:
            return self.step

        logger.debug(f"Wizard: {self.step.value} -> {target.value}")
        self.step = target

        if triggers_fetch(target):
            await self.fetch_recommendations()
        return self.step

    def back(self) -> WizardStep:
        target = previous_step(self.step, self.profile.dietary, self.profile_return_step)
        if self.step == WizardStep.PROFILE:
            self.profile_return_step = None
        logger.debug(f"Wizard: {self.step.value} <- back -> {target.value}")
        self.step = target
        return self.step

    def open_profile(self) -> WizardStep:
        if self.step != WizardStep.PROFILE:
            self.profile_return_step = self.step
            self.step = WizardStep.PROFILE
        return self.step

    # -------------------------------------------------------------------------
    # Results
    # -------------------------------------------------------------------------

    async def fetch_recommendations(self) -> ResultsView:
        """
        Generate recipes for the current profile. Also serves as retry.

        A fetch started later wins: if another fetch begins while this one is
        awaiting, this one's result is dropped.
        """
        self.fetch_generation += 1
        generation = self.fetch_generation
        view = ResultsView.loading()
        self.results = view

        result = await self.generator(self.profile)

        if generation != self.fetch_generation:
            logger.info(f"Dropping stale recipe result (fetch {generation})")
            return self.results

        view.resolve(result)
        if result.is_failure:
            logger.warning(f"Recipe fetch failed: {result.reason}")
        return view

    async def retry(self) -> ResultsView:
        if self.step != WizardStep.RESULTS:
            raise ResultsError(f"Nothing to retry on step {self.step.value}")
        if self.results is not None and self.results.is_loading:
            logger.info("Retry while a fetch is in flight; starting a new one")
        return await self.fetch_recommendations()

    def _loaded_results(self) -> ResultsView:
        if self.results is None or self.results.status != ResultsStatus.LOADED:
            raise ResultsError("No recipes loaded")
        return self.results

    def expand_recipe(self, index: int):
        return self._loaded_results().expand(index)

    def collapse_recipe(self) -> None:
        self._loaded_results().collapse()

    def rate_recipe(self, index: int, stars: int, comment: str | None = None) -> Rating:
        """Rate a displayed recipe. Each card accepts one rating per view."""
        view = self._loaded_results()
        if not 1 <= stars <= 5:
            raise RatingError("Pick between 1 and 5 stars")
        recipe = view.mark_rated(index)
        rating = Rating(dish_name=recipe.name, stars=stars, comment=comment or None)
        self.profile = profile_ops.add_rating(self.profile, rating)
        logger.info(f"Rated '{recipe.name}' {stars} stars")
        return rating

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def profile_summary(self) -> dict:
        """Data shown on the profile screen."""
        p = self.profile
        return {
            "name": p.name,
            "email": p.email,
            "age": p.age,
            "dietary": p.dietary or None,
            "rated_dishes": len(p.ratings),
            "favorite_cuisine": p.cuisine or None,
            "recent_ratings": [r.model_dump(mode="json") for r in p.ratings[:RECENT_RATINGS_SHOWN]],
        }

    def to_dict(self) -> dict:
        return {
            "step": self.step.value,
            "can_advance": self.can_advance,
            "auto_advance": self.step in AUTO_ADVANCE_STEPS,
            "profile": self.profile.model_dump(mode="json"),
            "results": self.results.to_dict() if self.results else None,
        }
