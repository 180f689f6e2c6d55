from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional, List
from foodtoday.schemas.user import CamelModel


class IngredientIn(BaseModel):
    name: str = ""
    amount: str = ""
    inPantry: bool = False


class RecipeCreateRequest(CamelModel):
    title: str = ""
    description: str = ""
    image: Optional[str] = None
    cook_time: int = 30
    servings: int = 4
    difficulty: str = "medium"
    cuisine: str = "international"
    meal_type: str = "dinner"
    calories: Optional[int] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    fiber: Optional[float] = None
    ingredients: List[IngredientIn] = []
    instructions: List[str] = []
    tags: List[str] = []


class CommentCreateRequest(BaseModel):
    content: Optional[str] = None
    rating: Optional[int] = None


class CommentAuthor(CamelModel):
    name: str


class CommentResponse(CamelModel):
    id: str
    content: str
    rating: Optional[int]
    user_id: str
    recipe_id: str
    created_at: datetime
    user: CommentAuthor


class StatusMessage(BaseModel):
    message: str


class LikeStatus(BaseModel):
    isLiked: bool


class SaveStatus(BaseModel):
    isSaved: bool


class PreferencesRedirect(BaseModel):
    needsPreferences: bool = True
    message: str = "Please set your preferences first"
    redirectTo: str = "/preferences"


class RecipeQuery(BaseModel):
    """Query parameters for the recipe discovery listing."""

    limit: int = Field(24, ge=1, le=100)
    offset: int = Field(0, ge=0)
    meal_type: str = "all"
    cuisine: str = "all"
    difficulty: str = "all"
    sort_by: str = "rating"
    search: str = ""
    personalized: bool = False
    suggestions: bool = False
    exclude_ids: List[str] = []
    ingredients: List[str] = []
    tags: List[str] = []
    calories_min: Optional[float] = None
    calories_max: Optional[float] = None
    protein_min: Optional[float] = None
    protein_max: Optional[float] = None
    carbs_min: Optional[float] = None
    carbs_max: Optional[float] = None
    fat_min: Optional[float] = None
    fat_max: Optional[float] = None
    cook_time_min: Optional[int] = None
    cook_time_max: Optional[int] = None
    include_external: bool = False
