from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from foodtoday.database import get_db
from foodtoday.dependencies import get_current_user, ensure_owner
from foodtoday.models.recipe import Recipe
from foodtoday.models.user import User
from foodtoday.services.recipes import serialize_recipe

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}/recipes")
async def get_user_recipes(
    user_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get recipes authored by a user. Users may only list their own."""
    ensure_owner(current_user, user_id)

    recipes = (
        db.query(Recipe)
        .filter(Recipe.author_id == user_id)
        .order_by(Recipe.created_at.desc())
        .all()
    )
    return [serialize_recipe(recipe, current_user) for recipe in recipes]
