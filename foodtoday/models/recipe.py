from datetime import datetime
from sqlalchemy import (
    Column,
    String,
    Integer,
    Float,
    Text,
    Boolean,
    DateTime,
    ForeignKey,
    JSON,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from foodtoday.database import Base
from foodtoday.models.user import generate_id


DEFAULT_RECIPE_IMAGE = "/images/dishes/default-recipe.jpg"


class Recipe(Base):
    __tablename__ = "recipes"

    id = Column(String(64), primary_key=True, default=generate_id)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    image = Column(String(500), default=DEFAULT_RECIPE_IMAGE)

    cook_time = Column(Integer, default=30)
    servings = Column(Integer, default=4)
    difficulty = Column(String(20), default="medium", index=True)  # easy, medium, hard
    cuisine = Column(String(100), default="international", index=True)
    meal_type = Column(String(50), default="dinner", index=True)

    # Nutrition per serving
    calories = Column(Integer, nullable=True)
    protein = Column(Float, nullable=True)
    carbs = Column(Float, nullable=True)
    fat = Column(Float, nullable=True)
    fiber = Column(Float, nullable=True)
    sugar = Column(Float, nullable=True)
    sodium = Column(Float, nullable=True)

    ingredients = Column(JSON, default=list)  # [{name, amount, inPantry}]
    instructions = Column(JSON, default=list)  # [str]
    tags = Column(JSON, default=list)  # [str]

    rating = Column(Float, default=0.0)
    is_public = Column(Boolean, default=True)

    author_id = Column(String(32), ForeignKey("users.id"), nullable=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    author = relationship("User", back_populates="recipes")
    likes = relationship("Like", back_populates="recipe", cascade="all, delete-orphan")
    saved_by = relationship(
        "SavedRecipe", back_populates="recipe", cascade="all, delete-orphan"
    )
    comments = relationship("Comment", back_populates="recipe", cascade="all, delete-orphan")


class Like(Base):
    __tablename__ = "likes"
    __table_args__ = (UniqueConstraint("user_id", "recipe_id", name="uq_like_user_recipe"),)

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    recipe_id = Column(String(64), ForeignKey("recipes.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="likes")
    recipe = relationship("Recipe", back_populates="likes")


class SavedRecipe(Base):
    __tablename__ = "saved_recipes"
    __table_args__ = (UniqueConstraint("user_id", "recipe_id", name="uq_saved_user_recipe"),)

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    recipe_id = Column(String(64), ForeignKey("recipes.id"), nullable=False, index=True)
    saved_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="saved_recipes")
    recipe = relationship("Recipe", back_populates="saved_by")


class Comment(Base):
    __tablename__ = "comments"

    id = Column(String(32), primary_key=True, default=generate_id)
    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=True)  # 1-5
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    recipe_id = Column(String(64), ForeignKey("recipes.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="comments")
    recipe = relationship("Recipe", back_populates="comments")
