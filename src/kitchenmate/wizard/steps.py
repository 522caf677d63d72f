"""
Step Sequencer.

The wizard's step order as explicit transition tables plus pure functions of
(step, dietary). Nothing here touches session state, so every branch can be
tested directly.
"""

from enum import Enum

from .options import NON_VEGETARIAN
from .profile import UserProfile


class WizardStep(Enum):
    """Wizard screens."""
    LANDING = "landing"
    LOGIN = "login"
    DIETARY = "dietary"
    MOOD = "mood"
    INGREDIENTS = "ingredients"
    MEAL_TYPE = "meal_type"        # Non-Vegetarian only
    DIFFICULTY = "difficulty"
    GOALS = "goals"
    CUISINE = "cuisine"
    RESULTS = "results"            # Side state: entering it fetches recipes
    PROFILE = "profile"            # Side state: reachable from any step


INITIAL_STEP = WizardStep.LANDING

# Unconditional forward moves. INGREDIENTS is resolved by _branch_after_ingredients.
FORWARD: dict[WizardStep, WizardStep] = {
    WizardStep.LANDING: WizardStep.LOGIN,
    WizardStep.LOGIN: WizardStep.DIETARY,
    WizardStep.DIETARY: WizardStep.MOOD,
    WizardStep.MOOD: WizardStep.INGREDIENTS,
    WizardStep.MEAL_TYPE: WizardStep.DIFFICULTY,
    WizardStep.DIFFICULTY: WizardStep.GOALS,
    WizardStep.GOALS: WizardStep.CUISINE,
    WizardStep.CUISINE: WizardStep.RESULTS,
}

# Unconditional backward moves. DIFFICULTY and PROFILE are resolved separately.
BACKWARD: dict[WizardStep, WizardStep] = {
    WizardStep.LOGIN: WizardStep.LANDING,
    WizardStep.DIETARY: WizardStep.LOGIN,
    WizardStep.MOOD: WizardStep.DIETARY,
    WizardStep.INGREDIENTS: WizardStep.MOOD,
    WizardStep.MEAL_TYPE: WizardStep.INGREDIENTS,
    WizardStep.GOALS: WizardStep.DIFFICULTY,
    WizardStep.CUISINE: WizardStep.GOALS,
    WizardStep.RESULTS: WizardStep.CUISINE,
}

PROFILE_DEFAULT_RETURN = WizardStep.DIETARY

# Single-choice steps that move on by themselves shortly after a pick.
# CUISINE is single-choice too but waits for an explicit continue.
AUTO_ADVANCE_STEPS = frozenset({
    WizardStep.DIETARY,
    WizardStep.MOOD,
    WizardStep.MEAL_TYPE,
    WizardStep.DIFFICULTY,
})
AUTO_ADVANCE_DELAY_MS = 150


def includes_meal_type(dietary: str) -> bool:
    """Only meat eaters are asked for a meal type."""
    return dietary == NON_VEGETARIAN


def next_step(step: WizardStep, dietary: str) -> WizardStep:
    """Forward transition. Steps without a forward move return themselves."""
    if step == WizardStep.INGREDIENTS:
        return WizardStep.MEAL_TYPE if includes_meal_type(dietary) else WizardStep.DIFFICULTY
    return FORWARD.get(step, step)


def previous_step(
    step: WizardStep,
    dietary: str,
    return_to: WizardStep | None = None,
) -> WizardStep:
    """
    Backward transition, mirroring next_step.

    PROFILE goes back to return_to (the step it was opened from) when known,
    otherwise to DIETARY.
    """
    if step == WizardStep.DIFFICULTY:
        return WizardStep.MEAL_TYPE if includes_meal_type(dietary) else WizardStep.INGREDIENTS
    if step == WizardStep.PROFILE:
        if return_to is None or return_to == WizardStep.PROFILE:
            return PROFILE_DEFAULT_RETURN
        return return_to
    return BACKWARD.get(step, step)


def triggers_fetch(step: WizardStep) -> bool:
    """Entering this step starts recipe generation."""
    return step == WizardStep.RESULTS


def step_path(dietary: str) -> list[WizardStep]:
    """The full forward path from LANDING to RESULTS for a dietary choice."""
    path = [INITIAL_STEP]
    while path[-1] != WizardStep.RESULTS:
        path.append(next_step(path[-1], dietary))
    return path


def is_step_complete(step: WizardStep, profile: UserProfile) -> bool:
    """Whether the continue control for this step is enabled."""
    if step == WizardStep.LOGIN:
        return bool(profile.name and profile.age)
    if step == WizardStep.DIETARY:
        return bool(profile.dietary)
    if step == WizardStep.MOOD:
        return bool(profile.mood)
    if step == WizardStep.INGREDIENTS:
        return len(profile.ingredients) > 0
    if step == WizardStep.MEAL_TYPE:
        return bool(profile.meal_type)
    if step == WizardStep.DIFFICULTY:
        return bool(profile.difficulty)
    if step == WizardStep.GOALS:
        return len(profile.goals) > 0
    if step == WizardStep.CUISINE:
        return bool(profile.cuisine)
    return True
