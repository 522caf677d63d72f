"""
Tests for the wizard session controller.
"""

import asyncio

import pytest

from kitchenmate.recipes.service import RecipeResult
from kitchenmate.wizard.exceptions import RatingError, ResultsError, StepError, StepNotReadyError
from kitchenmate.wizard.results import (
    EMPTY_RESULTS_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    ResultsStatus,
)
from kitchenmate.wizard.session import WizardSession
from kitchenmate.wizard.steps import WizardStep


def run_to_cuisine(session: WizardSession, dietary: str = "Non-Vegetarian") -> None:
    """Drive a session from LANDING up to the CUISINE step."""
    asyncio.run(session.advance())                  # LANDING -> LOGIN
    session.sign_in("Sam", "29", "sam@example.com")
    asyncio.run(session.advance())                  # -> DIETARY
    assert session.answer(dietary)
    asyncio.run(session.advance())                  # -> MOOD
    assert session.answer("Spicy")
    asyncio.run(session.advance())                  # -> INGREDIENTS
    session.toggle_ingredient("Chicken")
    session.add_ingredient("Garlic")
    asyncio.run(session.advance())
    if session.step == WizardStep.MEAL_TYPE:
        assert session.answer("Dinner")
        asyncio.run(session.advance())
    assert session.answer("Easy")
    asyncio.run(session.advance())                  # -> GOALS
    session.toggle_goal("High Protein")
    asyncio.run(session.advance())                  # -> CUISINE
    assert session.step == WizardStep.CUISINE


class TestNavigation:
    """Tests for advance/back/profile."""

    def test_full_run_non_vegetarian(self, fake_generator):
        session = WizardSession(generator=fake_generator)
        run_to_cuisine(session)
        assert session.answer("Indian") is False
        asyncio.run(session.advance())

        assert session.step == WizardStep.RESULTS
        assert session.results.status == ResultsStatus.LOADED
        assert len(fake_generator.calls) == 1
        assert fake_generator.calls[0].meal_type == "Dinner"
        assert fake_generator.calls[0].ingredients == ["Chicken", "Garlic"]

    def test_vegetarian_skips_meal_type(self, fake_generator):
        session = WizardSession(generator=fake_generator)
        visited = []
        original_advance = session.advance

        async def tracking_advance():
            step = await original_advance()
            visited.append(step)
            return step

        session.advance = tracking_advance
        run_to_cuisine(session, dietary="Vegetarian")
        assert WizardStep.MEAL_TYPE not in visited
        assert session.back() == WizardStep.GOALS
        assert session.back() == WizardStep.DIFFICULTY
        assert session.back() == WizardStep.INGREDIENTS

    def test_cannot_advance_incomplete_step(self):
        session = WizardSession(step=WizardStep.INGREDIENTS)
        assert not session.can_advance
        with pytest.raises(StepNotReadyError):
            asyncio.run(session.advance())
        assert session.step == WizardStep.INGREDIENTS

    def test_login_requires_name_and_age(self):
        session = WizardSession(step=WizardStep.LOGIN)
        with pytest.raises(StepNotReadyError):
            session.sign_in("Sam", "")
        with pytest.raises(StepNotReadyError):
            session.sign_in("  ", "30")
        assert session.profile.name == ""

    def test_profile_back_returns_to_origin(self):
        session = WizardSession(step=WizardStep.GOALS)
        assert session.open_profile() == WizardStep.PROFILE
        assert session.back() == WizardStep.GOALS

    def test_profile_opened_twice_keeps_origin(self):
        session = WizardSession(step=WizardStep.MOOD)
        session.open_profile()
        session.open_profile()
        assert session.back() == WizardStep.MOOD

    def test_profile_back_without_origin_goes_to_dietary(self):
        session = WizardSession(step=WizardStep.PROFILE)
        assert session.back() == WizardStep.DIETARY


class TestAnswers:
    """Tests for single-choice answers."""

    def test_answer_outside_single_choice_step(self):
        session = WizardSession(step=WizardStep.GOALS)
        with pytest.raises(StepError):
            session.answer("Weight Loss")

    def test_unknown_option(self):
        session = WizardSession(step=WizardStep.DIETARY)
        with pytest.raises(StepError):
            session.answer("Carnivore")

    def test_switching_away_from_meat_clears_meal_type(self):
        session = WizardSession(step=WizardStep.DIETARY)
        session.answer("Non-Vegetarian")
        session.profile = session.profile.model_copy(update={"meal_type": "Lunch"})
        session.answer("Vegan")
        assert session.profile.meal_type == ""

    def test_update_details_from_profile(self):
        session = WizardSession(step=WizardStep.PROFILE)
        session.update_details("Alex", "41", "alex@example.com")
        assert session.profile.name == "Alex"
        assert session.profile.age == "41"

    def test_profile_summary(self, complete_profile):
        session = WizardSession(profile=complete_profile)
        summary = session.profile_summary()
        assert summary["rated_dishes"] == 3
        assert summary["favorite_cuisine"] == "Indian"
        assert [r["dish_name"] for r in summary["recent_ratings"]] == [
            "Butter Chicken", "Plain Toast", "Dal Tadka",
        ]


class TestResults:
    """Tests for fetch, retry and rating."""

    def test_empty_response_shows_specific_message(self, complete_profile, make_generator):
        session = WizardSession(step=WizardStep.CUISINE, profile=complete_profile,
                                generator=make_generator(RecipeResult.success([])))
        asyncio.run(session.advance())
        assert session.results.status == ResultsStatus.EMPTY
        assert session.results.error == EMPTY_RESULTS_MESSAGE

    def test_failure_then_retry_rebuilds_from_current_profile(
        self, complete_profile, make_generator, sample_recipes
    ):
        generator = make_generator(
            RecipeResult.failure("connection reset"),
            RecipeResult.success(sample_recipes),
        )
        session = WizardSession(step=WizardStep.CUISINE, profile=complete_profile, generator=generator)
        asyncio.run(session.advance())
        assert session.results.status == ResultsStatus.ERROR
        assert session.results.error == GENERIC_ERROR_MESSAGE

        session.add_ingredient("Lime")
        asyncio.run(session.retry())
        assert session.results.status == ResultsStatus.LOADED
        assert len(generator.calls) == 2
        assert "Lime" in generator.calls[1].ingredients

    def test_stale_fetch_is_dropped(self, complete_profile, sample_recipes):
        """A retry started while the first call is pending wins."""

        async def scenario():
            first_gate = asyncio.Event()
            calls = 0

            async def generator(profile):
                nonlocal calls
                calls += 1
                if calls == 1:
                    await first_gate.wait()
                    return RecipeResult.failure("slow and broken")
                return RecipeResult.success(sample_recipes)

            session = WizardSession(step=WizardStep.RESULTS, profile=complete_profile,
                                    generator=generator)
            first = asyncio.create_task(session.fetch_recommendations())
            await asyncio.sleep(0)
            await session.retry()
            first_gate.set()
            await first
            return session

        session = asyncio.run(scenario())
        assert session.results.status == ResultsStatus.LOADED
        assert session.fetch_generation == 2

    def test_rating_prepends_and_locks(self, complete_profile, fake_generator):
        session = WizardSession(step=WizardStep.CUISINE, profile=complete_profile,
                                generator=fake_generator)
        asyncio.run(session.advance())

        rating = session.rate_recipe(0, 5, "So good")
        assert session.profile.ratings[0] == rating
        assert rating.dish_name == "Chicken Tikka Wrap"
        assert len(session.profile.ratings) == 4
        assert session.results.is_rated(0)

        with pytest.raises(RatingError):
            session.rate_recipe(0, 3)
        assert len(session.profile.ratings) == 4

    def test_rating_needs_stars(self, complete_profile, fake_generator):
        session = WizardSession(step=WizardStep.CUISINE, profile=complete_profile,
                                generator=fake_generator)
        asyncio.run(session.advance())
        with pytest.raises(RatingError):
            session.rate_recipe(1, 0)
        assert not session.results.is_rated(1)

    def test_blank_comment_stored_as_none(self, complete_profile, fake_generator):
        session = WizardSession(step=WizardStep.CUISINE, profile=complete_profile,
                                generator=fake_generator)
        asyncio.run(session.advance())
        assert session.rate_recipe(2, 4, "").comment is None

    def test_rating_without_results(self):
        session = WizardSession()
        with pytest.raises(ResultsError):
            session.rate_recipe(0, 5)

    def test_new_ratings_reach_next_prompt(self, complete_profile, make_generator, sample_recipes):
        generator = make_generator(RecipeResult.success(sample_recipes))
        session = WizardSession(step=WizardStep.CUISINE, profile=complete_profile, generator=generator)
        asyncio.run(session.advance())
        session.rate_recipe(1, 5)
        asyncio.run(session.retry())
        assert generator.calls[1].ratings[0].dish_name == "Spinach Egg Scramble"

    def test_advance_on_results_keeps_view(self, complete_profile, fake_generator):
        session = WizardSession(step=WizardStep.CUISINE, profile=complete_profile,
                                generator=fake_generator)
        asyncio.run(session.advance())
        view = session.results
        session.rate_recipe(0, 5)

        assert asyncio.run(session.advance()) == WizardStep.RESULTS
        assert len(fake_generator.calls) == 1
        assert session.results is view
        assert session.results.is_rated(0)

    @pytest.mark.parametrize("step", [WizardStep.LANDING, WizardStep.INGREDIENTS, WizardStep.CUISINE])
    def test_retry_only_on_results(self, step, fake_generator):
        session = WizardSession(step=step, generator=fake_generator)
        with pytest.raises(ResultsError):
            asyncio.run(session.retry())
        assert fake_generator.calls == []
        assert session.results is None


class TestGoals:
    """Tests for goal toggles."""

    def test_unknown_goal_rejected(self):
        session = WizardSession(step=WizardStep.GOALS)
        with pytest.raises(StepError):
            session.toggle_goal("Eat More Cake")
        assert session.profile.goals == []

    def test_catalog_goal_toggles(self):
        session = WizardSession(step=WizardStep.GOALS)
        session.toggle_goal("Low Carb")
        assert session.profile.goals == ["Low Carb"]
