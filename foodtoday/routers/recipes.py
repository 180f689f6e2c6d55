import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from foodtoday.database import get_db
from foodtoday.dependencies import get_current_user, get_current_user_optional
from foodtoday.models.recipe import Recipe, Like, SavedRecipe, Comment
from foodtoday.models.user import User
from foodtoday.schemas.recipe import (
    RecipeQuery,
    RecipeCreateRequest,
    CommentCreateRequest,
    CommentResponse,
    StatusMessage,
    LikeStatus,
    SaveStatus,
    PreferencesRedirect,
)
from foodtoday.services import recipes as recipe_service
from foodtoday.services.preferences import empty_preferences, preferences_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _split(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _get_recipe_or_404(db: Session, recipe_id: str) -> Recipe:
    recipe = db.query(Recipe).filter(Recipe.id == recipe_id).first()
    if not recipe:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


@router.get("")
async def list_recipes(
    limit: int = Query(24, ge=1, le=100),
    offset: int = Query(0, ge=0),
    meal_type: str = Query("all", alias="mealType"),
    cuisine: str = "all",
    difficulty: str = "all",
    sort_by: str = Query("rating", alias="sortBy"),
    search: str = "",
    personalized: bool = False,
    suggestions: bool = False,
    exclude_ids: str = Query("", alias="excludeIds"),
    ingredients: Optional[str] = None,
    tags: Optional[str] = None,
    calories_min: Optional[float] = Query(None, alias="caloriesMin"),
    calories_max: Optional[float] = Query(None, alias="caloriesMax"),
    protein_min: Optional[float] = Query(None, alias="proteinMin"),
    protein_max: Optional[float] = Query(None, alias="proteinMax"),
    carbs_min: Optional[float] = Query(None, alias="carbsMin"),
    carbs_max: Optional[float] = Query(None, alias="carbsMax"),
    fat_min: Optional[float] = Query(None, alias="fatMin"),
    fat_max: Optional[float] = Query(None, alias="fatMax"),
    cook_time_min: Optional[int] = Query(None, alias="cookTimeMin"),
    cook_time_max: Optional[int] = Query(None, alias="cookTimeMax"),
    include_external: bool = Query(False, alias="includeExternal"),
    current_user: Optional[User] = Depends(get_current_user_optional),
    db: Session = Depends(get_db),
):
    """Discovery listing, ingredient search and daily suggestions."""
    query = RecipeQuery(
        limit=limit,
        offset=offset,
        meal_type=meal_type,
        cuisine=cuisine,
        difficulty=difficulty,
        sort_by=sort_by,
        search=search,
        personalized=personalized,
        suggestions=suggestions,
        exclude_ids=_split(exclude_ids),
        ingredients=_split(ingredients),
        tags=_split(tags),
        calories_min=calories_min,
        calories_max=calories_max,
        protein_min=protein_min,
        protein_max=protein_max,
        carbs_min=carbs_min,
        carbs_max=carbs_max,
        fat_min=fat_min,
        fat_max=fat_max,
        cook_time_min=cook_time_min,
        cook_time_max=cook_time_max,
        include_external=include_external,
    )

    preferences = None
    if query.personalized or query.suggestions:
        if current_user is None:
            if query.suggestions:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Authentication required for suggestions",
                )
            # Continue without personalization
            preferences = empty_preferences()
        elif current_user.has_preferences:
            preferences = preferences_for(current_user)
        elif query.suggestions:
            return PreferencesRedirect().model_dump()
        else:
            preferences = preferences_for(current_user)

    if query.suggestions:
        return await recipe_service.daily_suggestions(db, query, preferences, current_user)

    if query.ingredients:
        return await recipe_service.search_by_ingredients(db, query, preferences, current_user)

    return recipe_service.list_recipes(db, query, preferences, current_user)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    recipe_data: RecipeCreateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a recipe authored by the current user."""
    problem = recipe_service.validate_new_recipe(recipe_data)
    if problem:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=problem)

    recipe = recipe_service.create_recipe(db, current_user, recipe_data)
    return recipe_service.serialize_recipe(recipe, current_user)


@router.get("/search")
async def search_recipes(
    search: str = "",
    cuisine: str = "",
    meal_type: str = Query("", alias="mealType"),
    difficulty: str = "",
    max_cook_time: Optional[int] = Query(None, alias="maxCookTime"),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    max_calories: Optional[int] = Query(None, alias="maxCalories"),
    ingredients: Optional[str] = None,
    tags: Optional[str] = None,
    limit: int = Query(24, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """Advanced search with filters and pagination."""
    return recipe_service.advanced_search(
        db,
        search=search,
        cuisine=cuisine,
        meal_type=meal_type,
        difficulty=difficulty,
        max_cook_time=max_cook_time,
        min_rating=min_rating,
        max_calories=max_calories,
        ingredients=_split(ingredients),
        tags=_split(tags),
        limit=limit,
        offset=offset,
    )


@router.get("/saved")
async def get_saved_recipes(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get the current user's saved recipes, most recently saved first."""
    saved = (
        db.query(SavedRecipe)
        .filter(SavedRecipe.user_id == current_user.id)
        .order_by(SavedRecipe.saved_at.desc())
        .all()
    )
    results = []
    for entry in saved:
        data = recipe_service.serialize_recipe(entry.recipe, current_user)
        data["savedAt"] = entry.saved_at
        results.append(data)
    return results


@router.get("/{recipe_id}")
async def get_recipe(
    recipe_id: str,
    current_user: Optional[User] = Depends(get_current_user_optional),
    db: Session = Depends(get_db),
):
    """Get a single recipe with author and counts."""
    recipe = _get_recipe_or_404(db, recipe_id)
    data = recipe_service.serialize_recipe(recipe, current_user)
    data["ingredients"] = recipe_service.normalize_ingredients(data["ingredients"])
    return data


@router.get("/{recipe_id}/like", response_model=LikeStatus)
async def get_like_status(
    recipe_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    existing = (
        db.query(Like)
        .filter(Like.user_id == current_user.id, Like.recipe_id == recipe_id)
        .first()
    )
    return LikeStatus(isLiked=existing is not None)


@router.post("/{recipe_id}/like", response_model=StatusMessage)
async def like_recipe(
    recipe_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    _get_recipe_or_404(db, recipe_id)
    existing = (
        db.query(Like)
        .filter(Like.user_id == current_user.id, Like.recipe_id == recipe_id)
        .first()
    )
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Recipe already liked")

    db.add(Like(user_id=current_user.id, recipe_id=recipe_id))
    db.commit()
    logger.info(f"[LIKE] User {current_user.id} liked recipe {recipe_id}")
    return StatusMessage(message="Recipe liked successfully")


@router.delete("/{recipe_id}/like", response_model=StatusMessage)
async def unlike_recipe(
    recipe_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    existing = (
        db.query(Like)
        .filter(Like.user_id == current_user.id, Like.recipe_id == recipe_id)
        .first()
    )
    if not existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Recipe not liked")

    db.delete(existing)
    db.commit()
    return StatusMessage(message="Recipe unliked successfully")


@router.get("/{recipe_id}/save", response_model=SaveStatus)
async def get_save_status(
    recipe_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    existing = (
        db.query(SavedRecipe)
        .filter(SavedRecipe.user_id == current_user.id, SavedRecipe.recipe_id == recipe_id)
        .first()
    )
    return SaveStatus(isSaved=existing is not None)


@router.post("/{recipe_id}/save", response_model=StatusMessage)
async def save_recipe(
    recipe_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    _get_recipe_or_404(db, recipe_id)
    existing = (
        db.query(SavedRecipe)
        .filter(SavedRecipe.user_id == current_user.id, SavedRecipe.recipe_id == recipe_id)
        .first()
    )
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Recipe already saved")

    db.add(SavedRecipe(user_id=current_user.id, recipe_id=recipe_id))
    db.commit()
    logger.info(f"[SAVE] User {current_user.id} saved recipe {recipe_id}")
    return StatusMessage(message="Recipe saved successfully")


@router.delete("/{recipe_id}/save", response_model=StatusMessage)
async def unsave_recipe(
    recipe_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    existing = (
        db.query(SavedRecipe)
        .filter(SavedRecipe.user_id == current_user.id, SavedRecipe.recipe_id == recipe_id)
        .first()
    )
    if not existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Recipe not saved")

    db.delete(existing)
    db.commit()
    return StatusMessage(message="Recipe unsaved successfully")


@router.get("/{recipe_id}/comments", response_model=list[CommentResponse])
async def get_comments(recipe_id: str, db: Session = Depends(get_db)):
    """Get all comments for a recipe, newest first."""
    return (
        db.query(Comment)
        .filter(Comment.recipe_id == recipe_id)
        .order_by(Comment.created_at.desc())
        .all()
    )


@router.post(
    "/{recipe_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    recipe_id: str,
    comment_data: CommentCreateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Add a comment, optionally with a 1-5 rating."""
    if not comment_data.content or not comment_data.content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment content is required",
        )
    if comment_data.rating is not None and not 1 <= comment_data.rating <= 5:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Rating must be between 1 and 5",
        )

    recipe = _get_recipe_or_404(db, recipe_id)
    return recipe_service.add_comment(
        db, recipe, current_user, comment_data.content, comment_data.rating
    )
