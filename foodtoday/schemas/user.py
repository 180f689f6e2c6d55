from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List

SKILL_LEVELS = ["beginner", "intermediate", "advanced"]


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class PreferencesUpdateRequest(CamelModel):
    dietary_restrictions: Optional[List[str]] = None
    allergies: Optional[List[str]] = None
    cuisine_preferences: Optional[List[str]] = None
    meal_types: Optional[List[str]] = None
    skill_level: Optional[str] = None

    @field_validator("skill_level")
    @classmethod
    def check_skill_level(cls, value):
        if value is not None and value not in SKILL_LEVELS:
            raise ValueError(f"skillLevel must be one of {', '.join(SKILL_LEVELS)}")
        return value


class UserResponse(CamelModel):
    id: str
    name: str
    email: str
    dietary_restrictions: List[str] = []
    allergies: List[str] = []
    cuisine_preferences: List[str] = []
    meal_types: List[str] = []
    skill_level: str = "beginner"

    @field_validator(
        "dietary_restrictions", "allergies", "cuisine_preferences", "meal_types",
        mode="before",
    )
    @classmethod
    def none_to_list(cls, value):
        return value or []


class AuthResponse(BaseModel):
    message: str
    user: UserResponse
    token: str


class UserUpdateResponse(BaseModel):
    message: str
    user: UserResponse
