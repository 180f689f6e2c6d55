from foodtoday.models.user import User
from foodtoday.services.preferences import (
    apply_preferences,
    empty_preferences,
    external_recipe_allowed,
    preferences_for,
)


def _prefs(**overrides):
    prefs = empty_preferences()
    prefs.update(overrides)
    return prefs


def test_user_without_lists_has_no_preferences():
    user = apply_preferences(User(name="Lin", email="lin@example.org"))
    assert not user.has_preferences
    assert preferences_for(user)["skillLevel"] == "beginner"


def test_any_list_counts_as_preferences():
    user = apply_preferences(User(name="Lin", email="lin@example.org"), meal_types=["lunch"])
    assert user.has_preferences


def test_external_recipe_vegetarian_filter():
    prefs = _prefs(dietaryRestrictions=["vegetarian"])
    assert not external_recipe_allowed({"ingredients": ["1 lb Chicken Thighs"]}, prefs)
    assert external_recipe_allowed({"ingredients": ["2 cups Basmati Rice"]}, prefs)


def test_external_recipe_allergy_filter():
    prefs = _prefs(allergies=["Peanuts"])
    assert not external_recipe_allowed({"ingredients": ["3 tbsp peanuts, crushed"]}, prefs)
    assert external_recipe_allowed({"ingredients": ["1 Onion"]}, prefs)


def test_external_recipe_without_preferences():
    assert external_recipe_allowed({"ingredients": ["Beef"]}, {})
