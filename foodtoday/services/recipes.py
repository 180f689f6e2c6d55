"""Recipe queries, serialization and the comment/rating workflow."""

import json
import logging
import math
from typing import Optional
from sqlalchemy import String, cast, func, or_
from sqlalchemy.orm import Session
from foodtoday.models.notification import Notification
from foodtoday.models.recipe import Recipe, Comment
from foodtoday.models.user import User
from foodtoday.schemas.recipe import RecipeQuery, RecipeCreateRequest
from foodtoday.services import external
from foodtoday.services.preferences import (
    LIKE_ESCAPE,
    contains_pattern,
    strict_exclusions,
    listing_exclusions,
    external_recipe_allowed,
)

logger = logging.getLogger(__name__)

DIFFICULTIES = ["easy", "medium", "hard"]

SORT_ORDERS = {
    "newest": Recipe.created_at.desc(),
    "oldest": Recipe.created_at.asc(),
    "rating": Recipe.rating.desc(),
    "cookTime": Recipe.cook_time.asc(),
}

# Range filters applied after the query: (query attribute, recipe key, bound)
RANGE_FILTERS = [
    ("calories_min", "calories", "min"),
    ("calories_max", "calories", "max"),
    ("protein_min", "protein", "min"),
    ("protein_max", "protein", "max"),
    ("carbs_min", "carbs", "min"),
    ("carbs_max", "carbs", "max"),
    ("fat_min", "fat", "min"),
    ("fat_max", "fat", "max"),
    ("cook_time_min", "cookTime", "min"),
    ("cook_time_max", "cookTime", "max"),
]

# The advanced search treats these slider values as "no limit"
MAX_COOK_TIME_SLIDER = 120
MAX_CALORIES_SLIDER = 2000


def as_list(value, field: str = "", recipe_id: str = "") -> list:
    """Decode a list column that may hold legacy JSON text."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            logger.error(f"[RECIPES] Could not parse {field} for recipe {recipe_id}")
            return []
        return decoded if isinstance(decoded, list) else []
    return []


def recipe_counts(recipe: Recipe) -> dict:
    return {
        "likes": len(recipe.likes),
        "savedBy": len(recipe.saved_by),
        "comments": len(recipe.comments),
    }


def serialize_recipe(recipe: Recipe, viewer: Optional[User] = None) -> dict:
    author = None
    if recipe.author:
        author = {"id": recipe.author.id, "name": recipe.author.name}

    viewer_id = viewer.id if viewer else None
    return {
        "id": recipe.id,
        "title": recipe.title,
        "description": recipe.description,
        "image": recipe.image,
        "cookTime": recipe.cook_time,
        "servings": recipe.servings,
        "difficulty": recipe.difficulty,
        "cuisine": recipe.cuisine,
        "mealType": recipe.meal_type,
        "calories": recipe.calories,
        "protein": recipe.protein,
        "carbs": recipe.carbs,
        "fat": recipe.fat,
        "fiber": recipe.fiber,
        "sugar": recipe.sugar,
        "sodium": recipe.sodium,
        "ingredients": as_list(recipe.ingredients, "ingredients", recipe.id),
        "instructions": as_list(recipe.instructions, "instructions", recipe.id),
        "tags": as_list(recipe.tags, "tags", recipe.id),
        "rating": recipe.rating,
        "isPublic": recipe.is_public,
        "authorId": recipe.author_id,
        "createdAt": recipe.created_at,
        "updatedAt": recipe.updated_at,
        "author": author,
        "_count": recipe_counts(recipe),
        "isLiked": bool(viewer_id) and any(l.user_id == viewer_id for l in recipe.likes),
        "isSaved": bool(viewer_id) and any(s.user_id == viewer_id for s in recipe.saved_by),
    }


def normalize_ingredients(ingredients: list) -> list[dict]:
    """Detail view shape: every entry becomes {name, amount, inPantry}."""
    normalized = []
    for ing in ingredients:
        if isinstance(ing, dict):
            normalized.append(
                {
                    "name": ing.get("name") or ing.get("ingredient") or "",
                    "amount": ing.get("amount") or "1 unit",
                    "inPantry": bool(ing.get("inPantry", False)),
                }
            )
        else:
            normalized.append({"name": str(ing), "amount": "1 unit", "inPantry": False})
    return normalized


def _passes_ranges(recipe: dict, query: RecipeQuery) -> bool:
    for attr, key, bound in RANGE_FILTERS:
        limit = getattr(query, attr)
        if limit is None:
            continue
        value = recipe.get(key)
        if value is None:
            return False
        if bound == "min" and value < limit:
            return False
        if bound == "max" and value > limit:
            return False
    return True


def _has_any_tag(recipe: dict, tags: list[str]) -> bool:
    if not tags:
        return True
    return any(tag in recipe["tags"] for tag in tags)


def list_recipes(
    db: Session,
    query: RecipeQuery,
    preferences: Optional[dict] = None,
    viewer: Optional[User] = None,
) -> dict:
    """Regular discovery listing with column filters, free text and sort."""
    q = db.query(Recipe)

    if query.meal_type and query.meal_type != "all":
        q = q.filter(Recipe.meal_type == query.meal_type)
    if query.cuisine and query.cuisine != "all":
        q = q.filter(Recipe.cuisine == query.cuisine)
    if query.difficulty and query.difficulty != "all":
        q = q.filter(Recipe.difficulty == query.difficulty)

    if query.search:
        pattern = contains_pattern(query.search)
        q = q.filter(
            or_(
                Recipe.title.ilike(pattern, escape=LIKE_ESCAPE),
                Recipe.description.ilike(pattern, escape=LIKE_ESCAPE),
                Recipe.cuisine.ilike(pattern, escape=LIKE_ESCAPE),
                cast(Recipe.ingredients, String).ilike(pattern, escape=LIKE_ESCAPE),
                cast(Recipe.tags, String).ilike(pattern, escape=LIKE_ESCAPE),
            )
        )

    if query.personalized and preferences:
        q = q.filter(*listing_exclusions(preferences))

    order = SORT_ORDERS.get(query.sort_by, SORT_ORDERS["newest"])
    # Over-fetch so the post-query range filters can still fill a page
    rows = q.order_by(order).offset(query.offset).limit(query.limit * 3).all()

    recipes = [serialize_recipe(r, viewer) for r in rows]
    recipes = [
        r for r in recipes if _passes_ranges(r, query) and _has_any_tag(r, query.tags)
    ]
    recipes = recipes[: query.limit]

    logger.info(f"[RECIPES] Returning {len(recipes)} regular search results")
    return {
        "recipes": recipes,
        "total": len(recipes),
        "personalized": query.personalized,
    }


async def search_by_ingredients(
    db: Session,
    query: RecipeQuery,
    preferences: Optional[dict] = None,
    viewer: Optional[User] = None,
) -> dict:
    """Recipes containing every listed ingredient, optionally widened by TheMealDB."""
    personalized = query.personalized and bool(preferences)

    q = db.query(Recipe)
    for ingredient in query.ingredients:
        q = q.filter(
            cast(Recipe.ingredients, String).ilike(contains_pattern(ingredient), escape=LIKE_ESCAPE)
        )
    if personalized:
        q = q.filter(*strict_exclusions(preferences))

    total = q.count()
    rows = (
        q.order_by(Recipe.rating.desc())
        .offset(query.offset)
        .limit(query.limit)
        .all()
    )
    recipes = [serialize_recipe(r, viewer) for r in rows]
    local_count = len(recipes)

    if query.include_external:
        for ingredient in query.ingredients:
            found = await external.search_by_ingredient(ingredient)
            if personalized:
                found = [r for r in found if external_recipe_allowed(r, preferences)]
            recipes.extend(found)
            total += len(found)
            logger.info(f"[RECIPES] Added {len(found)} external recipes for {ingredient}")

    logger.info(
        f"[RECIPES] Found {len(recipes)} recipes "
        f"({local_count} local, {len(recipes) - local_count} external)"
    )
    return {
        "recipes": recipes,
        "total": total,
        "hasMore": query.offset + len(recipes) < total,
        "personalized": query.personalized,
        "searched_ingredients": query.ingredients,
        "includesExternal": query.include_external,
    }


async def _external_suggestion(preferences: dict, excluded: list[str]) -> Optional[dict]:
    for candidate in await external.random_recipes(1):
        if candidate["id"] in excluded:
            continue
        if external_recipe_allowed(candidate, preferences):
            return candidate
    return None


async def daily_suggestions(
    db: Session,
    query: RecipeQuery,
    preferences: dict,
    viewer: Optional[User] = None,
) -> dict:
    """The best rated easy, medium and hard dish the user can eat."""
    excluded = [i for i in query.exclude_ids if i]
    base = strict_exclusions(preferences)

    suggested = []
    for difficulty in DIFFICULTIES:
        q = db.query(Recipe).filter(*base).filter(Recipe.difficulty == difficulty)
        if excluded:
            q = q.filter(Recipe.id.notin_(excluded))
        recipe = q.order_by(Recipe.rating.desc()).first()

        if recipe:
            suggested.append(serialize_recipe(recipe, viewer))
            excluded.append(recipe.id)
        elif query.include_external:
            logger.info(f"[RECIPES] Getting external {difficulty} recipe")
            candidate = await _external_suggestion(preferences, excluded)
            if candidate:
                candidate["difficulty"] = difficulty
                suggested.append(candidate)
                excluded.append(candidate["id"])

    logger.info(f"[RECIPES] Returning {len(suggested)} personalized suggestions")
    return {
        "recipes": suggested,
        "total": len(suggested),
        "personalized": True,
        "suggestions": True,
        "includesExternal": query.include_external,
        "difficulty_breakdown": {
            d: len([r for r in suggested if r["difficulty"] == d]) for d in DIFFICULTIES
        },
    }


def advanced_search(
    db: Session,
    search: str = "",
    cuisine: str = "",
    meal_type: str = "",
    difficulty: str = "",
    max_cook_time: Optional[int] = None,
    min_rating: Optional[float] = None,
    max_calories: Optional[int] = None,
    ingredients: Optional[list[str]] = None,
    tags: Optional[list[str]] = None,
    limit: int = 24,
    offset: int = 0,
) -> dict:
    """Case-insensitive search backing the search page."""
    q = db.query(Recipe)

    if search:
        pattern = contains_pattern(search)
        q = q.filter(
            or_(
                Recipe.title.ilike(pattern, escape=LIKE_ESCAPE),
                Recipe.description.ilike(pattern, escape=LIKE_ESCAPE),
                Recipe.cuisine.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )
    if ingredients:
        q = q.filter(
            or_(
                *[
                    cast(Recipe.ingredients, String).ilike(contains_pattern(i), escape=LIKE_ESCAPE)
                    for i in ingredients
                ]
            )
        )
    if cuisine:
        q = q.filter(Recipe.cuisine == cuisine)
    if meal_type:
        q = q.filter(Recipe.meal_type == meal_type)
    if difficulty:
        q = q.filter(Recipe.difficulty == difficulty)
    if max_cook_time is not None and max_cook_time < MAX_COOK_TIME_SLIDER:
        q = q.filter(Recipe.cook_time <= max_cook_time)
    if min_rating is not None and min_rating > 0:
        q = q.filter(Recipe.rating >= min_rating)
    if max_calories is not None and max_calories < MAX_CALORIES_SLIDER:
        q = q.filter(Recipe.calories <= max_calories)
    if tags:
        q = q.filter(
            or_(
                *[
                    cast(Recipe.tags, String).ilike(contains_pattern(t), escape=LIKE_ESCAPE)
                    for t in tags
                ]
            )
        )

    total_count = q.count()
    rows = (
        q.order_by(Recipe.rating.desc(), Recipe.created_at.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )

    recipes = []
    for row in rows:
        data = serialize_recipe(row)
        data["likesCount"] = data["_count"]["likes"]
        data["savedCount"] = data["_count"]["savedBy"]
        data["commentsCount"] = data["_count"]["comments"]
        recipes.append(data)

    return {
        "recipes": recipes,
        "totalCount": total_count,
        "page": offset // limit + 1,
        "totalPages": math.ceil(total_count / limit),
    }


def validate_new_recipe(data: RecipeCreateRequest) -> Optional[str]:
    """Return the first validation problem, or None."""
    if not data.title.strip():
        return "Recipe title is required"
    if not data.description.strip():
        return "Recipe description is required"
    if not data.ingredients:
        return "At least one ingredient is required"
    if any(not i.name.strip() or not i.amount.strip() for i in data.ingredients):
        return "All ingredients must have a name and amount"
    if not data.instructions:
        return "At least one instruction step is required"
    if any(not step.strip() for step in data.instructions):
        return "All instruction steps must be filled out"
    if data.difficulty not in DIFFICULTIES:
        return f"Difficulty must be one of {', '.join(DIFFICULTIES)}"
    return None


def create_recipe(db: Session, author: User, data: RecipeCreateRequest) -> Recipe:
    recipe = Recipe(
        title=data.title.strip(),
        description=data.description.strip(),
        cook_time=data.cook_time,
        servings=data.servings,
        difficulty=data.difficulty,
        cuisine=data.cuisine.lower(),
        meal_type=data.meal_type.lower(),
        calories=data.calories,
        protein=data.protein,
        carbs=data.carbs,
        fat=data.fat,
        fiber=data.fiber,
        ingredients=[i.model_dump() for i in data.ingredients],
        instructions=[step.strip() for step in data.instructions],
        tags=data.tags,
        author_id=author.id,
    )
    if data.image:
        recipe.image = data.image
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    logger.info(f"[RECIPES] User {author.id} created recipe {recipe.id}")
    return recipe


def add_comment(
    db: Session,
    recipe: Recipe,
    user: User,
    content: str,
    rating: Optional[int] = None,
) -> Comment:
    """Store a comment and refresh the recipe's average rating when rated."""
    comment = Comment(
        content=content.strip(),
        rating=rating or None,
        user_id=user.id,
        recipe_id=recipe.id,
    )
    db.add(comment)
    db.flush()

    if rating:
        average = (
            db.query(func.avg(Comment.rating))
            .filter(Comment.recipe_id == recipe.id, Comment.rating.isnot(None))
            .scalar()
        )
        recipe.rating = float(average or 0)

    if recipe.author_id and recipe.author_id != user.id:
        db.add(
            Notification(
                user_id=recipe.author_id,
                type="comment",
                message=f"{user.name} commented on {recipe.title}",
                data=recipe.id,
                is_read=False,
            )
        )

    db.commit()
    db.refresh(comment)
    return comment
