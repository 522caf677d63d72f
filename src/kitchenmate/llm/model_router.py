"""
KitchenMate - Model Router.

Selects model settings per LLM task. There is a single task today
(recipe generation), but prompts, logs and temperatures are keyed by task
name so new tasks slot in without touching the client.
"""

from typing import TypedDict

from kitchenmate.config import settings


class ModelConfig(TypedDict, total=False):
    """Configuration for model calls."""

    model: str
    temperature: float
    reasoning_effort: str  # "minimal", "low", "medium", "high"


DEFAULT_MODEL = "gpt-4.1-mini"

# Task-specific temperature
# Lower = more deterministic, higher = more creative
TASK_TEMPERATURE: dict[str, float] = {
    "recipes": 0.7,  # Varied suggestions across retries
}

DEFAULT_TEMPERATURE = 0.5


def get_task_config(task: str, *, model: str | None = None) -> ModelConfig:
    """
    Get model configuration for a task.

    Args:
        task: Task name (e.g. "recipes")
        model: Explicit model override; falls back to KITCHENMATE_MODEL

    Returns:
        Model configuration for the call
    """
    config: ModelConfig = {
        "model": model or settings.kitchenmate_model or DEFAULT_MODEL,
        "temperature": TASK_TEMPERATURE.get(task, DEFAULT_TEMPERATURE),
    }
    return config
