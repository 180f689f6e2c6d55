import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import relationship
from foodtoday.database import Base


def generate_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)

    # Preferences written by the onboarding quiz and the preferences page
    dietary_restrictions = Column(JSON, default=list, nullable=False)
    allergies = Column(JSON, default=list, nullable=False)
    cuisine_preferences = Column(JSON, default=list, nullable=False)
    meal_types = Column(JSON, default=list, nullable=False)
    skill_level = Column(String(20), default="beginner", nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    recipes = relationship("Recipe", back_populates="author")
    likes = relationship("Like", back_populates="user", cascade="all, delete-orphan")
    saved_recipes = relationship(
        "SavedRecipe", back_populates="user", cascade="all, delete-orphan"
    )
    comments = relationship("Comment", back_populates="user", cascade="all, delete-orphan")
    shopping_items = relationship(
        "ShoppingListItem", back_populates="user", cascade="all, delete-orphan"
    )
    notifications = relationship(
        "Notification", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def has_preferences(self) -> bool:
        return any(
            [
                self.dietary_restrictions,
                self.allergies,
                self.cuisine_preferences,
                self.meal_types,
            ]
        )
