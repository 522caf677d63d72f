"""
KitchenMate Onboarding Wizard.

Collects a recipe profile through a linear, branching sequence of steps and
hands it to recipe generation at the end.

Steps:
1. Landing / Login - Name, age, email
2. Dietary, Mood - Single choice, auto-advance
3. Ingredients - What's in the kitchen (manual entry + quick adds)
4. Meal Type - Only for Non-Vegetarian diets
5. Difficulty, Goals, Cuisine
6. Results - Generated recipes, expand + rate
"""

from .profile import Rating, UserProfile
from .steps import WizardStep, next_step, previous_step

__all__ = [
    "Rating",
    "UserProfile",
    "WizardStep",
    "next_step",
    "previous_step",
]
