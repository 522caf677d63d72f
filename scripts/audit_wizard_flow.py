"""Audit the wizard flow: step paths per diet and the prompt they produce."""
import sys
sys.path.insert(0, "src")

from kitchenmate.recipes.prompts import build_recipe_request
from kitchenmate.wizard.options import DIETARY_OPTIONS, labels
from kitchenmate.wizard.profile import Rating, UserProfile
from kitchenmate.wizard.steps import WizardStep, previous_step, step_path


def audit():
    print("=" * 60)
    print("WIZARD FLOW AUDIT")
    print("=" * 60)

    # 1. Forward paths per dietary choice
    print("\n[1] FORWARD PATHS")
    for dietary in labels(DIETARY_OPTIONS):
        path = step_path(dietary)
        print(f"   - {dietary:15} {' -> '.join(s.value for s in path)}")

    # 2. Back navigation must mirror forward
    print("\n[2] BACK NAVIGATION")
    problems = 0
    for dietary in labels(DIETARY_OPTIONS):
        path = step_path(dietary)
        for earlier, later in zip(path, path[1:]):
            if previous_step(later, dietary) != earlier:
                problems += 1
                print(f"   ✗ {dietary}: back from {later.value} != {earlier.value}")
    print(f"   - {problems} mismatches")
    print(f"   - profile back (no origin): {previous_step(WizardStep.PROFILE, '').value}")

    # 3. Prompt for a sample profile
    print("\n[3] SAMPLE PROMPT")
    profile = UserProfile(
        name="Sample",
        age="30",
        dietary="Non-Vegetarian",
        mood="Comfort Food",
        ingredients=["Chicken", "Rice", "Onion"],
        meal_type="Dinner",
        difficulty="Medium",
        goals=["High Protein"],
        cuisine="Indian",
        ratings=[Rating(dish_name="Butter Chicken", stars=5)],
    )
    request = build_recipe_request(profile)
    print(request.system_prompt)
    print(f"\n   - schema fields: {list(request.response_schema['$defs']['Recipe']['properties'])}")

    return problems


if __name__ == "__main__":
    sys.exit(1 if audit() else 0)
