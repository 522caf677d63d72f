"""
Profile Store.

UserProfile is an immutable snapshot. Every change goes through one of the
pure update functions below and yields a new snapshot, so each mutation
point is explicit.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from .options import NO_SPECIFIC_GOAL

FAVORITE_MIN_STARS = 4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Rating(BaseModel):
    """User feedback on a recipe they were shown."""

    model_config = ConfigDict(frozen=True)

    dish_name: str
    stars: int = Field(ge=1, le=5)
    comment: str | None = None
    timestamp: datetime = Field(default_factory=_utcnow)


class UserProfile(BaseModel):
    """Accumulated wizard answers. Lives for one session only."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    age: str = ""
    email: str = ""
    dietary: str = ""
    mood: str = ""
    ingredients: list[str] = Field(default_factory=list)
    meal_type: str = ""
    difficulty: str = ""
    goals: list[str] = Field(default_factory=list)
    cuisine: str = ""
    ratings: list[Rating] = Field(default_factory=list)  # Newest first


def update_profile(profile: UserProfile, **changes) -> UserProfile:
    """Merge a partial update into a new snapshot."""
    unknown = set(changes) - set(UserProfile.model_fields)
    if unknown:
        raise ValueError(f"Unknown profile fields: {sorted(unknown)}")
    return profile.model_copy(update=changes)


def add_ingredient(profile: UserProfile, ingredient: str) -> UserProfile:
    """
    Add a manually entered ingredient.

    Whitespace is stripped and blank input ignored. Adding an ingredient that
    is already present (exact, case-sensitive match) changes nothing.
    """
    ingredient = ingredient.strip()
    if not ingredient or ingredient in profile.ingredients:
        return profile
    return update_profile(profile, ingredients=[*profile.ingredients, ingredient])


def toggle_ingredient(profile: UserProfile, ingredient: str) -> UserProfile:
    """Remove the ingredient if present, otherwise append it."""
    if ingredient in profile.ingredients:
        return update_profile(
            profile, ingredients=[i for i in profile.ingredients if i != ingredient]
        )
    return update_profile(profile, ingredients=[*profile.ingredients, ingredient])


def toggle_goal(profile: UserProfile, goal: str) -> UserProfile:
    """
    Toggle a health goal.

    "No Specific Goal" is exclusive: picking it clears everything else, and
    picking any other goal drops it.
    """
    if goal == NO_SPECIFIC_GOAL:
        return update_profile(profile, goals=[NO_SPECIFIC_GOAL])

    current = [g for g in profile.goals if g != NO_SPECIFIC_GOAL]
    if goal in current:
        current = [g for g in current if g != goal]
    else:
        current = [*current, goal]
    return update_profile(profile, goals=current)


def add_rating(profile: UserProfile, rating: Rating) -> UserProfile:
    """Prepend a rating (newest first)."""
    return update_profile(profile, ratings=[rating, *profile.ratings])


def favorite_dish_names(profile: UserProfile, min_stars: int = FAVORITE_MIN_STARS) -> list[str]:
    """Dishes rated at least min_stars, newest first, without repeats."""
    names: list[str] = []
    for rating in profile.ratings:
        if rating.stars >= min_stars and rating.dish_name not in names:
            names.append(rating.dish_name)
    return names
