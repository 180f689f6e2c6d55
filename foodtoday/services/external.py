"""TheMealDB client used to widen search results and fill suggestion gaps."""

import asyncio
import logging
import random
from datetime import datetime
from typing import Optional
import requests
from foodtoday.config import THEMEALDB_BASE_URL, EXTERNAL_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

EXTERNAL_ID_PREFIX = "themealdb_"
MAX_INGREDIENT_SLOTS = 20
MAX_INSTRUCTION_LINES = 10


def category_to_meal_type(category: Optional[str]) -> str:
    value = (category or "").lower()
    if "breakfast" in value or "starter" in value:
        return "breakfast"
    if "dessert" in value or "sweet" in value:
        return "dessert"
    if "side" in value:
        return "lunch"
    return "dinner"


def meal_to_recipe(meal: dict) -> dict:
    """Convert a TheMealDB lookup payload to the local recipe shape."""
    ingredients = []
    for i in range(1, MAX_INGREDIENT_SLOTS + 1):
        ingredient = (meal.get(f"strIngredient{i}") or "").strip()
        measure = (meal.get(f"strMeasure{i}") or "").strip()
        if ingredient:
            ingredients.append(f"{measure} {ingredient}" if measure else ingredient)

    raw_instructions = meal.get("strInstructions") or ""
    instructions = [line.strip() for line in raw_instructions.splitlines() if line.strip()]
    instructions = instructions[:MAX_INSTRUCTION_LINES]

    if raw_instructions:
        description = raw_instructions[:150] + "..."
    else:
        description = "Delicious recipe from TheMealDB"

    now = datetime.utcnow()
    return {
        "id": f"{EXTERNAL_ID_PREFIX}{meal.get('idMeal')}",
        "title": meal.get("strMeal"),
        "description": description,
        "image": meal.get("strMealThumb"),
        "cookTime": 30,
        "servings": 4,
        "difficulty": "medium",
        "cuisine": meal.get("strArea") or "International",
        "mealType": category_to_meal_type(meal.get("strCategory")),
        "calories": random.randint(300, 700),
        "protein": None,
        "carbs": None,
        "fat": None,
        "ingredients": ingredients,
        "instructions": instructions,
        "tags": [t for t in (meal.get("strCategory"), meal.get("strArea")) if t],
        "rating": round(4.0 + random.random(), 1),
        "isPublic": True,
        "authorId": None,
        "author": None,
        "createdAt": now,
        "updatedAt": now,
        "_count": {"likes": 0, "savedBy": 0, "comments": 0},
        "isLiked": False,
        "isSaved": False,
        "source": "themealdb",
    }


def _get_json(path: str, params: dict) -> Optional[dict]:
    try:
        resp = requests.get(
            f"{THEMEALDB_BASE_URL}/{path}",
            params=params,
            timeout=EXTERNAL_TIMEOUT_SECONDS,
        )
        if resp.status_code >= 400:
            logger.error(f"[THEMEALDB] {path} returned {resp.status_code}")
            return None
        return resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"[THEMEALDB] {path} failed: {e}")
        return None


def _lookup(meal_id: str) -> Optional[dict]:
    data = _get_json("lookup.php", {"i": meal_id})
    if not data or not data.get("meals"):
        return None
    return meal_to_recipe(data["meals"][0])


def _filter_and_expand(params: dict, max_results: int) -> list[dict]:
    data = _get_json("filter.php", params)
    if not data or not data.get("meals"):
        return []

    recipes = []
    for meal in data["meals"][:max_results]:
        recipe = _lookup(meal.get("idMeal"))
        if recipe:
            recipes.append(recipe)
    return recipes


def search_by_ingredient_sync(ingredient: str, max_results: int = 20) -> list[dict]:
    return _filter_and_expand({"i": ingredient}, max_results)


def search_by_cuisine_sync(cuisine: str, max_results: int = 10) -> list[dict]:
    return _filter_and_expand({"a": cuisine}, max_results)


def random_recipes_sync(count: int = 1) -> list[dict]:
    recipes = []
    for _ in range(count):
        data = _get_json("random.php", {})
        if data and data.get("meals"):
            recipes.append(meal_to_recipe(data["meals"][0]))
    return recipes


async def search_by_ingredient(ingredient: str, max_results: int = 20) -> list[dict]:
    """Async wrapper to avoid blocking the event loop during lookups."""
    return await asyncio.to_thread(search_by_ingredient_sync, ingredient, max_results)


async def search_by_cuisine(cuisine: str, max_results: int = 10) -> list[dict]:
    return await asyncio.to_thread(search_by_cuisine_sync, cuisine, max_results)


async def random_recipes(count: int = 1) -> list[dict]:
    return await asyncio.to_thread(random_recipes_sync, count)
