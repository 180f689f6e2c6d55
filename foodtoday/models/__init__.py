from foodtoday.models.user import User
from foodtoday.models.recipe import Recipe, Like, SavedRecipe, Comment
from foodtoday.models.shopping import ShoppingListItem
from foodtoday.models.notification import Notification

__all__ = [
    "User",
    "Recipe",
    "Like",
    "SavedRecipe",
    "Comment",
    "ShoppingListItem",
    "Notification",
]
