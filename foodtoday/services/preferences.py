"""Dietary and allergy rules applied to recipe queries."""

import json
from sqlalchemy import String, and_, cast, not_
from foodtoday.models.recipe import Recipe
from foodtoday.models.user import User

MEAT_KEYWORDS = [
    "chicken", "beef", "pork", "lamb", "turkey", "duck", "goose", "veal", "venison",
    "meat", "bacon", "ham", "sausage", "pepperoni", "salami", "chorizo", "prosciutto",
]

SEAFOOD_KEYWORDS = [
    "fish", "salmon", "tuna", "cod", "trout", "bass", "mackerel", "sardines", "anchovies",
    "shrimp", "prawns", "crab", "lobster", "oysters", "mussels", "clams", "scallops",
    "seafood", "shellfish", "calamari", "squid", "octopus", "eel", "shark", "halibut",
]

# Shorter list used on TheMealDB results and on the regular listing
NON_VEG_KEYWORDS = [
    "chicken", "beef", "pork", "fish", "meat", "lamb", "turkey", "seafood", "salmon",
    "tuna", "shrimp",
]

LISTING_NON_VEG_KEYWORDS = ["chicken", "beef", "pork", "fish", "meat"]

DEFAULT_SKILL_LEVEL = "beginner"


def empty_preferences() -> dict:
    return {
        "dietaryRestrictions": [],
        "allergies": [],
        "cuisinePreferences": [],
        "mealTypes": [],
        "skillLevel": DEFAULT_SKILL_LEVEL,
    }


def preferences_for(user: User) -> dict:
    """Preference record of a user as the API exposes it."""
    return {
        "dietaryRestrictions": list(user.dietary_restrictions or []),
        "allergies": list(user.allergies or []),
        "cuisinePreferences": list(user.cuisine_preferences or []),
        "mealTypes": list(user.meal_types or []),
        "skillLevel": user.skill_level or DEFAULT_SKILL_LEVEL,
    }


def apply_preferences(
    user: User,
    dietary_restrictions=None,
    allergies=None,
    cuisine_preferences=None,
    meal_types=None,
    skill_level=None,
) -> User:
    """Overwrite the stored preferences. Missing lists become empty lists."""
    user.dietary_restrictions = list(dietary_restrictions or [])
    user.allergies = list(allergies or [])
    user.cuisine_preferences = list(cuisine_preferences or [])
    user.meal_types = list(meal_types or [])
    user.skill_level = skill_level or DEFAULT_SKILL_LEVEL
    return user


def is_vegetarian(preferences: dict) -> bool:
    return "vegetarian" in (preferences.get("dietaryRestrictions") or [])


LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """LIKE pattern matching `text` anywhere, with its wildcards taken literally."""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _ingredients_text():
    return cast(Recipe.ingredients, String)


def _excludes(keyword: str):
    pattern = contains_pattern(keyword)
    return and_(
        not_(_ingredients_text().ilike(pattern, escape=LIKE_ESCAPE)),
        not_(Recipe.title.ilike(pattern, escape=LIKE_ESCAPE)),
    )


def strict_exclusions(preferences: dict) -> list:
    """SQL clauses removing non-vegetarian dishes and allergens.

    Both the ingredient list and the title are checked, so a dish named after
    a meat is excluded even if its ingredients only list a cut.
    """
    clauses = []
    if not preferences:
        return clauses

    if is_vegetarian(preferences):
        for keyword in MEAT_KEYWORDS + SEAFOOD_KEYWORDS:
            clauses.append(_excludes(keyword))

    for allergy in preferences.get("allergies") or []:
        if allergy and allergy.strip():
            clauses.append(_excludes(allergy.strip()))
    return clauses


def listing_exclusions(preferences: dict) -> list:
    """Lighter vegetarian filter used by the regular recipe listing."""
    if not preferences or not is_vegetarian(preferences):
        return []
    return [
        not_(_ingredients_text().ilike(contains_pattern(keyword), escape=LIKE_ESCAPE))
        for keyword in LISTING_NON_VEG_KEYWORDS
    ]


def external_recipe_allowed(recipe: dict, preferences: dict) -> bool:
    """Apply the vegetarian and allergy rules to a TheMealDB recipe dict."""
    if not preferences:
        return True

    ingredients = recipe.get("ingredients") or []
    if isinstance(ingredients, str):
        text = ingredients.lower()
    else:
        text = json.dumps(ingredients).lower()

    if is_vegetarian(preferences) and any(k in text for k in NON_VEG_KEYWORDS):
        return False

    for allergy in preferences.get("allergies") or []:
        if allergy and allergy.lower() in text:
            return False
    return True
