"""
KitchenMate - A recipe recommendation onboarding wizard.

Flow:
- Wizard: Step-by-step profile collection (diet, mood, ingredients, ...)
- Recipes: Profile -> prompt -> LLM -> structured recipe suggestions
- Surfaces: Terminal wizard (typer) and HTTP API (FastAPI)
"""

__version__ = "1.0.0"
