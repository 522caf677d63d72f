"""KitchenMate LLM integration."""

from kitchenmate.llm.client import call_llm, get_client

__all__ = ["call_llm", "get_client"]
