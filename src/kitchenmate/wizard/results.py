"""
Results Presenter state.

Tracks one rendering pass of the results screen: loading, error, empty or
loaded, which card is expanded, and which cards have been rated.
"""

from dataclasses import dataclass, field
from enum import Enum

from kitchenmate.recipes.models import Recipe
from kitchenmate.recipes.service import RecipeResult

from .exceptions import RatingError, ResultsError

GENERIC_ERROR_MESSAGE = "Something went wrong with the AI companion."
EMPTY_RESULTS_MESSAGE = "Couldn't generate recipes. Try changing your ingredients."


class ResultsStatus(Enum):
    LOADING = "loading"
    ERROR = "error"      # Call failed
    EMPTY = "empty"      # Call worked, no recipes
    LOADED = "loaded"


@dataclass
class ResultsView:
    """State of the results screen for one fetch."""

    status: ResultsStatus = ResultsStatus.LOADING
    recipes: tuple[Recipe, ...] = ()
    error: str | None = None
    expanded_index: int | None = None
    rated_indices: set[int] = field(default_factory=set)

    @classmethod
    def loading(cls) -> "ResultsView":
        return cls(status=ResultsStatus.LOADING)

    def resolve(self, result: RecipeResult) -> None:
        """Apply a finished recipe call."""
        self.expanded_index = None
        self.rated_indices = set()
        if result.is_failure:
            self.status = ResultsStatus.ERROR
            self.recipes = ()
            self.error = GENERIC_ERROR_MESSAGE
        elif result.is_empty:
            self.status = ResultsStatus.EMPTY
            self.recipes = ()
            self.error = EMPTY_RESULTS_MESSAGE
        else:
            self.status = ResultsStatus.LOADED
            self.recipes = result.recipes
            self.error = None

    @property
    def is_loading(self) -> bool:
        return self.status == ResultsStatus.LOADING

    @property
    def can_retry(self) -> bool:
        return self.status in (ResultsStatus.ERROR, ResultsStatus.EMPTY)

    def _check_index(self, index: int) -> Recipe:
        if self.status != ResultsStatus.LOADED:
            raise ResultsError(f"No recipes to show (status: {self.status.value})")
        if not 0 <= index < len(self.recipes):
            raise ResultsError(f"No recipe at index {index}")
        return self.recipes[index]

    def expand(self, index: int) -> Recipe:
        """Expand one card; any other expanded card collapses."""
        recipe = self._check_index(index)
        self.expanded_index = index
        return recipe

    def collapse(self) -> None:
        self.expanded_index = None

    def is_rated(self, index: int) -> bool:
        return index in self.rated_indices

    def mark_rated(self, index: int) -> Recipe:
        """Lock a card's rating form. Each card can be rated once per view."""
        recipe = self._check_index(index)
        if index in self.rated_indices:
            raise RatingError(f"'{recipe.name}' was already rated")
        self.rated_indices.add(index)
        return recipe

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "error": self.error,
            "can_retry": self.can_retry,
            "expanded_index": self.expanded_index,
            "rated_indices": sorted(self.rated_indices),
            "recipes": [r.model_dump() for r in self.recipes],
        }
