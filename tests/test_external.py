import asyncio
import requests
from foodtoday.schemas.recipe import RecipeQuery
from foodtoday.services import external
from foodtoday.services import recipes as recipe_service
from foodtoday.services.external import _get_json as real_get_json
from foodtoday.services.preferences import empty_preferences

MEAL = {
    "idMeal": "52772",
    "strMeal": "Teriyaki Chicken Casserole",
    "strCategory": "Chicken",
    "strArea": "Japanese",
    "strInstructions": "Preheat oven to 350.\r\nCombine soy sauce and honey.\r\n\r\nBake for 15 minutes.",
    "strMealThumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
    "strIngredient1": "soy sauce",
    "strMeasure1": "3/4 cup",
    "strIngredient2": "chicken breasts",
    "strMeasure2": "",
    "strIngredient3": "",
    "strMeasure3": "",
}

VEGGIE_MEAL = {
    **MEAL,
    "idMeal": "52807",
    "strMeal": "Baingan Bharta",
    "strCategory": "Vegetarian",
    "strArea": "Indian",
    "strIngredient2": "aubergine",
}


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def json(self):
        return self.payload


def test_meal_to_recipe():
    recipe = external.meal_to_recipe(MEAL)
    assert recipe["id"] == "themealdb_52772"
    assert recipe["ingredients"] == ["3/4 cup soy sauce", "chicken breasts"]
    assert recipe["instructions"] == [
        "Preheat oven to 350.",
        "Combine soy sauce and honey.",
        "Bake for 15 minutes.",
    ]
    assert recipe["tags"] == ["Chicken", "Japanese"]
    assert recipe["mealType"] == "dinner"
    assert recipe["description"].endswith("...")
    assert 4.0 <= recipe["rating"] <= 5.0
    assert recipe["source"] == "themealdb"


def test_category_to_meal_type():
    assert external.category_to_meal_type("Breakfast") == "breakfast"
    assert external.category_to_meal_type("Starter") == "breakfast"
    assert external.category_to_meal_type("Dessert") == "dessert"
    assert external.category_to_meal_type("Side") == "lunch"
    assert external.category_to_meal_type(None) == "dinner"


def test_get_json_handles_network_errors(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(requests, "get", boom)
    assert real_get_json("random.php", {}) is None


def test_get_json_handles_error_status(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda *a, **kw: FakeResponse({}, status_code=503))
    assert real_get_json("random.php", {}) is None


def test_search_by_ingredient_expands_lookups(monkeypatch):
    calls = []

    def fake_get_json(path, params):
        calls.append((path, params))
        if path == "filter.php":
            return {"meals": [{"idMeal": "52772"}]}
        return {"meals": [MEAL]}

    monkeypatch.setattr(external, "_get_json", fake_get_json)
    recipes = asyncio.run(external.search_by_ingredient("chicken"))
    assert [r["id"] for r in recipes] == ["themealdb_52772"]
    assert calls == [("filter.php", {"i": "chicken"}), ("lookup.php", {"i": "52772"})]


def test_search_returns_empty_list_when_offline():
    assert asyncio.run(external.search_by_cuisine("Italian")) == []


def test_ingredient_search_merges_external_results(client, seeded, monkeypatch):
    monkeypatch.setattr(
        external,
        "_get_json",
        lambda path, params: {"meals": [{"idMeal": "52772"}]} if path == "filter.php" else {"meals": [MEAL]},
    )
    resp = client.get("/api/recipes", params={"ingredients": "chicken", "includeExternal": "true"})
    data = resp.json()
    ids = [r["id"] for r in data["recipes"]]
    assert "themealdb_52772" in ids
    assert data["total"] == len(ids)
    assert data["includesExternal"] is True


def test_suggestions_fill_gaps_from_external(db_session, monkeypatch):
    picks = iter([MEAL, VEGGIE_MEAL, VEGGIE_MEAL])

    async def fake_random(count=1):
        return [external.meal_to_recipe(next(picks))]

    monkeypatch.setattr(external, "random_recipes", fake_random)
    prefs = empty_preferences()
    prefs.update(dietaryRestrictions=["vegetarian"])

    query = RecipeQuery(suggestions=True, include_external=True)
    result = asyncio.run(recipe_service.daily_suggestions(db_session, query, prefs))

    # The chicken pick is filtered out and the repeated pick is already taken
    assert [r["id"] for r in result["recipes"]] == ["themealdb_52807"]
    assert result["recipes"][0]["difficulty"] == "medium"
    assert result["difficulty_breakdown"] == {"easy": 0, "medium": 1, "hard": 0}
