"""
Pytest configuration and fixtures for KitchenMate tests.
"""

import os

import pytest

# Set test environment before importing kitchenmate modules
os.environ["KITCHENMATE_ENV"] = "development"
os.environ.setdefault("OPENAI_API_KEY", "test-key-not-real")

from kitchenmate.llm import client as llm_client
from kitchenmate.llm import prompt_logger
from kitchenmate.recipes.models import Recipe
from kitchenmate.recipes.service import RecipeResult
from kitchenmate.wizard.profile import Rating, UserProfile


@pytest.fixture(autouse=True)
def no_prompt_logging():
    """Keep prompt logs off unless a test turns them on."""
    prompt_logger.enable_prompt_logging(False)
    yield
    prompt_logger.reset_session()


@pytest.fixture(autouse=True)
def fresh_llm_client():
    """Never share a cached client between tests."""
    llm_client.reset_client()
    yield
    llm_client.reset_client()


@pytest.fixture
def sample_recipes():
    """Three recipes as the AI companion would return them."""
    return [
        Recipe(
            name="Chicken Tikka Wrap",
            description="Smoky grilled chicken wrapped with onion and tomato",
            cooking_time_minutes=25,
            ingredients=["Chicken", "Bread", "Onion", "Tomato"],
            steps=["Marinate chicken", "Grill chicken", "Wrap with veg"],
            match_reason="Spicy and quick for a weeknight",
            image_keyword="Chicken Tikka Wrap",
        ),
        Recipe(
            name="Spinach Egg Scramble",
            description="Soft eggs with wilted spinach",
            cooking_time_minutes=10,
            ingredients=["Egg", "Spinach"],
            steps=["Wilt spinach", "Scramble eggs"],
            match_reason="High protein breakfast",
            image_keyword="Spinach Scrambled Eggs",
        ),
        Recipe(
            name="Tomato Rice",
            description="One-pot spiced tomato rice",
            cooking_time_minutes=30,
            ingredients=["Rice", "Tomato", "Onion"],
            steps=["Fry onion", "Add tomato", "Cook rice in sauce"],
            match_reason="Comfort food from pantry staples",
            image_keyword="Tomato Rice",
        ),
    ]


@pytest.fixture
def complete_profile():
    """A profile that has answered every step on the Non-Vegetarian branch."""
    return UserProfile(
        name="Sam",
        age="29",
        email="sam@example.com",
        dietary="Non-Vegetarian",
        mood="Spicy",
        ingredients=["Chicken", "Onion", "Tomato"],
        meal_type="Dinner",
        difficulty="Easy",
        goals=["High Protein"],
        cuisine="Indian",
        ratings=[
            Rating(dish_name="Butter Chicken", stars=5),
            Rating(dish_name="Plain Toast", stars=2),
            Rating(dish_name="Dal Tadka", stars=4, comment="Loved it"),
        ],
    )


class FakeGenerator:
    """Stands in for generate_recipes; records every profile it was called with."""

    def __init__(self, *results: RecipeResult):
        self.results = list(results)
        self.calls: list[UserProfile] = []

    async def __call__(self, profile: UserProfile) -> RecipeResult:
        self.calls.append(profile)
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]


@pytest.fixture
def fake_generator(sample_recipes):
    """Generator that always succeeds with sample_recipes."""
    return FakeGenerator(RecipeResult.success(sample_recipes))


@pytest.fixture
def make_generator():
    """Build a FakeGenerator from a sequence of results."""
    return FakeGenerator
