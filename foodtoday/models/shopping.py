from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from foodtoday.database import Base
from foodtoday.models.user import generate_id


class ShoppingListItem(Base):
    __tablename__ = "shopping_list_items"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    item = Column(String(255), nullable=False)
    amount = Column(String(100), nullable=True)
    # Recipes from TheMealDB are never stored, so this is a loose reference
    recipe_id = Column(String(64), nullable=True)
    completed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="shopping_items")
