from foodtoday.schemas.user import (
    RegisterRequest,
    LoginRequest,
    PreferencesUpdateRequest,
    UserResponse,
    AuthResponse,
    UserUpdateResponse,
)
from foodtoday.schemas.recipe import (
    RecipeCreateRequest,
    CommentCreateRequest,
    CommentResponse,
    RecipeQuery,
)
from foodtoday.schemas.shopping import (
    ShoppingItemIn,
    ShoppingListAddRequest,
    ShoppingItemUpdateRequest,
    ShoppingItemResponse,
)
from foodtoday.schemas.onboarding import (
    QuizQuestionResponse,
    QuizCompleteRequest,
    QuizCompleteResponse,
)
from foodtoday.schemas.social import NotificationResponse, NotificationListResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "PreferencesUpdateRequest",
    "UserResponse",
    "AuthResponse",
    "UserUpdateResponse",
    "RecipeCreateRequest",
    "CommentCreateRequest",
    "CommentResponse",
    "RecipeQuery",
    "ShoppingItemIn",
    "ShoppingListAddRequest",
    "ShoppingItemUpdateRequest",
    "ShoppingItemResponse",
    "QuizQuestionResponse",
    "QuizCompleteRequest",
    "QuizCompleteResponse",
    "NotificationResponse",
    "NotificationListResponse",
]
