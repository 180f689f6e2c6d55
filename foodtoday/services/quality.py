"""Data-quality report over the stored recipes."""

import json
from sqlalchemy.orm import Session
from foodtoday.models.recipe import Recipe, DEFAULT_RECIPE_IMAGE
from foodtoday.services.external import EXTERNAL_ID_PREFIX

MAX_SAMPLES = 10
EXTERNAL_PREFIXES = (EXTERNAL_ID_PREFIX, "spoonacular_")


def _list_issue(value, label: str):
    """Return (issue, counter key) for a list column, or (None, None)."""
    if value is None or value == "":
        return f"Missing {label}", f"missing{label.capitalize()}"
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return f"Invalid {label} JSON", f"invalid{label.capitalize()}"
    if not isinstance(value, list) or not value:
        return f"Invalid or empty {label} array", f"invalid{label.capitalize()}"
    return None, None


def recipe_quality_report(db: Session) -> dict:
    recipes = db.query(Recipe).all()

    report = {
        "totalRecipes": len(recipes),
        "healthyRecipes": 0,
        "breakdown": {
            "missingTitle": 0,
            "missingDescription": 0,
            "missingIngredients": 0,
            "missingInstructions": 0,
            "missingImage": 0,
            "invalidIngredients": 0,
            "invalidInstructions": 0,
            "missingDifficulty": 0,
            "missingCuisine": 0,
            "missingMealType": 0,
            "externalIds": 0,
        },
        "healthyByDifficulty": {"easy": 0, "medium": 0, "hard": 0},
        "samplesWithIssues": [],
    }
    breakdown = report["breakdown"]

    for recipe in recipes:
        issues = []

        if not recipe.title or not recipe.title.strip():
            issues.append("Missing title")
            breakdown["missingTitle"] += 1
        if not recipe.description or not recipe.description.strip():
            issues.append("Missing description")
            breakdown["missingDescription"] += 1
        if not recipe.difficulty:
            issues.append("Missing difficulty")
            breakdown["missingDifficulty"] += 1
        if not recipe.cuisine:
            issues.append("Missing cuisine")
            breakdown["missingCuisine"] += 1
        if not recipe.meal_type:
            issues.append("Missing meal type")
            breakdown["missingMealType"] += 1
        if not recipe.image or recipe.image == DEFAULT_RECIPE_IMAGE:
            issues.append("Missing or default image")
            breakdown["missingImage"] += 1
        if recipe.id.startswith(EXTERNAL_PREFIXES):
            issues.append("External recipe ID (should be in local DB only)")
            breakdown["externalIds"] += 1

        for column, label in ((recipe.ingredients, "ingredients"), (recipe.instructions, "instructions")):
            issue, key = _list_issue(column, label)
            if issue:
                issues.append(issue)
                breakdown[key] += 1

        if issues:
            if len(report["samplesWithIssues"]) < MAX_SAMPLES:
                report["samplesWithIssues"].append(
                    {"id": recipe.id, "title": recipe.title, "issues": issues}
                )
        else:
            report["healthyRecipes"] += 1
            if recipe.difficulty in report["healthyByDifficulty"]:
                report["healthyByDifficulty"][recipe.difficulty] += 1

    return report
