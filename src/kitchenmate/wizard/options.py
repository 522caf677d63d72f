"""
Wizard option catalogs.

Fixed choices offered at each selection step, with display metadata for
surfaces that render them.
"""

NON_VEGETARIAN = "Non-Vegetarian"
NO_SPECIFIC_GOAL = "No Specific Goal"

DIETARY_OPTIONS = [
    {"label": "Vegetarian", "icon": "🥦"},
    {"label": NON_VEGETARIAN, "icon": "🍗"},
    {"label": "Vegan", "icon": "🌱"},
    {"label": "Eggetarian", "icon": "🥚"},
    {"label": "Gluten-Free", "icon": "🌾"},
    {"label": "Pescatarian", "icon": "🐟"},
]

MOOD_OPTIONS = [
    {"label": "Comfort Food", "icon": "🥘", "sub": "Warm & hearty"},
    {"label": "Spicy", "icon": "🌶️", "sub": "Bring the heat"},
    {"label": "Quick & Easy", "icon": "⚡", "sub": "Ready fast"},
    {"label": "Healthy Vibes", "icon": "🥗", "sub": "Nutritious"},
    {"label": "Indulgent", "icon": "🍔", "sub": "Treat yourself"},
    {"label": "Light & Fresh", "icon": "🍋", "sub": "Low calorie"},
]

QUICK_ADD_INGREDIENTS = [
    "Egg", "Spinach", "Corn", "Chicken", "Bread", "Paneer",
    "Tomato", "Cheese", "Onion", "Pasta", "Rice", "Potato",
]

MEAL_TYPE_OPTIONS = [
    {"label": "Breakfast", "icon": "🍳"},
    {"label": "Lunch", "icon": "🍱"},
    {"label": "Dinner", "icon": "🍽️"},
    {"label": "Snacks", "icon": "🥨"},
    {"label": "Dessert", "icon": "🍰"},
    {"label": "Drinks", "icon": "🍹"},
]

DIFFICULTY_OPTIONS = [
    {"label": "Easy", "icon": "🟢", "description": "Quick & simple prep."},
    {"label": "Medium", "icon": "🟡", "description": "Standard cooking time."},
    {"label": "Expert", "icon": "🔴", "description": "Complex & gourmet."},
]

GOAL_OPTIONS = [
    "Weight Loss",
    "Energy Boost",
    "Muscle Gain",
    "High Protein",
    "Low Carb",
    NO_SPECIFIC_GOAL,
]

CUISINE_OPTIONS = [
    {"label": "Indian", "icon": "🍛"},
    {"label": "Italian", "icon": "🍝"},
    {"label": "Mexican", "icon": "🌮"},
    {"label": "Chinese", "icon": "🥡"},
    {"label": "Thai", "icon": "🍜"},
    {"label": "Mediterranean", "icon": "🥙"},
    {"label": "Continental", "icon": "🥐"},
    {"label": "Fusion", "icon": "🌯"},
]


def labels(options: list[dict]) -> list[str]:
    return [o["label"] for o in options]


def get_wizard_options() -> dict:
    """
    Get all option catalogs for frontend rendering.

    Keys are the profile fields each catalog feeds.
    """
    return {
        "dietary": DIETARY_OPTIONS,
        "mood": MOOD_OPTIONS,
        "ingredients": QUICK_ADD_INGREDIENTS,
        "meal_type": MEAL_TYPE_OPTIONS,
        "difficulty": DIFFICULTY_OPTIONS,
        "goals": GOAL_OPTIONS,
        "cuisine": CUISINE_OPTIONS,
    }
