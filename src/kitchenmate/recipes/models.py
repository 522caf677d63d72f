"""
Recipe models.

These double as the output contract sent to the LLM: the JSON schema of
RecipeSuggestions is what the provider must fill in.
"""

from pydantic import BaseModel, ConfigDict, Field

MIN_SUGGESTIONS = 3
MAX_SUGGESTIONS = 5


class Recipe(BaseModel):
    """A recipe suggestion returned by the AI companion."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Dish name")
    description: str = Field(description="One or two sentence summary of the dish")
    cooking_time_minutes: int = Field(gt=0, description="Total cooking time in minutes")
    ingredients: list[str] = Field(description="Ingredients with rough quantities, in use order")
    steps: list[str] = Field(description="Concise cooking steps, in order")
    match_reason: str = Field(
        description="Why this dish fits the user's mood and goals"
    )
    image_keyword: str = Field(
        description="A short, descriptive keyword for finding an image of this dish, e.g. 'Spaghetti Bolognese'"
    )


class RecipeSuggestions(BaseModel):
    """LLM output: a list of recipe suggestions."""

    recipes: list[Recipe] = Field(
        default_factory=list,
        max_length=MAX_SUGGESTIONS,
        description=f"{MIN_SUGGESTIONS} to {MAX_SUGGESTIONS} distinct recipes",
    )
