from foodtoday.routers.auth import router as auth_router
from foodtoday.routers.recipes import router as recipes_router
from foodtoday.routers.users import router as users_router
from foodtoday.routers.shopping_list import router as shopping_list_router
from foodtoday.routers.onboarding import router as onboarding_router
from foodtoday.routers.social import notifications_router, messages_router
from foodtoday.routers.admin import router as admin_router

__all__ = [
    "auth_router",
    "recipes_router",
    "users_router",
    "shopping_list_router",
    "onboarding_router",
    "notifications_router",
    "messages_router",
    "admin_router",
]
