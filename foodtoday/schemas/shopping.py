from datetime import datetime
from pydantic import BaseModel
from typing import Optional, Any
from foodtoday.schemas.user import CamelModel


class ShoppingItemIn(CamelModel):
    name: str
    amount: Optional[str] = None
    recipe_id: Optional[str] = None


class ShoppingListAddRequest(BaseModel):
    items: Optional[Any] = None


class ShoppingItemUpdateRequest(BaseModel):
    completed: bool


class ShoppingItemResponse(CamelModel):
    id: str
    user_id: str
    item: str
    amount: Optional[str]
    recipe_id: Optional[str]
    completed: bool
    created_at: datetime
