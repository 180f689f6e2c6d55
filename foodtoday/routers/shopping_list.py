import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from foodtoday.database import get_db
from foodtoday.dependencies import get_current_user
from foodtoday.models.shopping import ShoppingListItem
from foodtoday.models.user import User
from foodtoday.schemas.recipe import StatusMessage
from foodtoday.schemas.shopping import (
    ShoppingItemIn,
    ShoppingListAddRequest,
    ShoppingItemUpdateRequest,
    ShoppingItemResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/shopping-list", tags=["shopping-list"])


def _get_item_or_404(db: Session, item_id: str, user: User) -> ShoppingListItem:
    item = (
        db.query(ShoppingListItem)
        .filter(ShoppingListItem.id == item_id)
        .filter(ShoppingListItem.user_id == user.id)
        .first()
    )
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item


@router.get("", response_model=List[ShoppingItemResponse])
async def get_shopping_list(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return (
        db.query(ShoppingListItem)
        .filter(ShoppingListItem.user_id == current_user.id)
        .order_by(ShoppingListItem.created_at.desc())
        .all()
    )


@router.post("", response_model=List[ShoppingItemResponse], status_code=status.HTTP_201_CREATED)
async def add_to_shopping_list(
    payload: ShoppingListAddRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Add a batch of items, usually the missing ingredients of a recipe."""
    if not isinstance(payload.items, list):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Items array is required",
        )

    try:
        entries = [ShoppingItemIn.model_validate(raw) for raw in payload.items]
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Each item needs a name",
        )

    created = []
    for entry in entries:
        item = ShoppingListItem(
            user_id=current_user.id,
            item=entry.name,
            amount=entry.amount,
            recipe_id=entry.recipe_id,
        )
        db.add(item)
        created.append(item)
    db.commit()
    for item in created:
        db.refresh(item)

    logger.info(f"[SHOPPING] User {current_user.id} added {len(created)} items")
    return created


@router.delete("", response_model=StatusMessage)
async def clear_shopping_list(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    db.query(ShoppingListItem).filter(ShoppingListItem.user_id == current_user.id).delete()
    db.commit()
    return StatusMessage(message="Shopping list cleared")


@router.put("/{item_id}", response_model=ShoppingItemResponse)
async def update_shopping_item(
    item_id: str,
    payload: ShoppingItemUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    item = _get_item_or_404(db, item_id, current_user)
    item.completed = payload.completed
    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", response_model=StatusMessage)
async def delete_shopping_item(
    item_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    item = _get_item_or_404(db, item_id, current_user)
    db.delete(item)
    db.commit()
    return StatusMessage(message="Item deleted")
