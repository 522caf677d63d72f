"""
KitchenMate - LLM Client.

Wraps AsyncOpenAI with Instructor for schema-validated structured outputs.
All LLM calls go through here for consistency and prompt logging.
"""

from typing import TypeVar

import instructor
from openai import AsyncOpenAI
from pydantic import BaseModel

from kitchenmate.config import settings
from kitchenmate.llm.model_router import get_task_config
from kitchenmate.llm.prompt_logger import log_prompt

# Type variable for generic structured output
T = TypeVar("T", bound=BaseModel)

# Singleton client instance
_client: instructor.AsyncInstructor | None = None


def get_client() -> instructor.AsyncInstructor:
    """
    Get the Instructor-wrapped AsyncOpenAI client.

    Uses singleton pattern to reuse the connection pool.
    """
    global _client

    if _client is None:
        openai_client = AsyncOpenAI(api_key=settings.openai_api_key)
        _client = instructor.from_openai(openai_client)

    return _client


def reset_client() -> None:
    """Drop the cached client (tests, key rotation)."""
    global _client
    _client = None


async def call_llm(
    *,
    response_model: type[T],
    system_prompt: str,
    user_prompt: str,
    task: str = "default",
    model: str | None = None,
    max_retries: int = 1,
) -> T:
    """
    Make a structured LLM call with schema validation.

    Args:
        response_model: Pydantic model class for the response
        system_prompt: System message setting context
        user_prompt: User message with the actual request
        task: Task name for model config and prompt logging
        model: Explicit model override
        max_retries: Total attempts; 1 means a single call, no re-asking

    Returns:
        Instance of response_model with validated data

    Raises:
        Whatever the transport or validation layer raises. Callers decide
        how to surface failures.
    """
    client = get_client()

    config = get_task_config(task, model=model)
    model_name = config.pop("model")

    messages = [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]

    api_kwargs = {
        "model": model_name,
        "messages": messages,
        "response_model": response_model,
        "max_retries": max_retries,
    }

    if model_name.startswith(("o1", "o3", "gpt-5")):
        # Reasoning models reject custom temperature
        if "reasoning_effort" in config:
            api_kwargs["reasoning_effort"] = config["reasoning_effort"]
    else:
        api_kwargs["temperature"] = config.get("temperature", 0.5)

    try:
        response = await client.chat.completions.create(**api_kwargs)

        log_prompt(
            task=task,
            model=model_name,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            response_model=response_model.__name__,
            response=response,
            config=config,
        )

        return response

    except Exception as e:
        log_prompt(
            task=task,
            model=model_name,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            response_model=response_model.__name__,
            error=str(e),
            config=config,
        )
        raise
