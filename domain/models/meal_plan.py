"""
Meal planning and shopping list models.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Integer,
    Date,
    Boolean,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class PlannedMeal(Base):
    """One planned meal in a (day, meal type) calendar cell"""

    __tablename__ = "planned_meal"
    __table_args__ = (
        UniqueConstraint("user_id", "plan_date", "meal_type", name="uq_planned_meal_cell"),
    )

    planned_meal_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    plan_date = Column(Date, nullable=False)
    meal_type = Column(String(20), nullable=False)  # breakfast, lunch, dinner, snack
    recipe_id = Column(Uuid, ForeignKey("recipe.recipe_id", ondelete="CASCADE"), nullable=True)
    custom_meal = Column(String(255))
    servings = Column(Integer, nullable=False, default=1)
    notes = Column(Text)
    is_cooked = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    recipe = relationship("Recipe", back_populates="planned_meals")


class ShoppingListItem(Base):
    """Individual item on a user's shopping list"""

    __tablename__ = "shopping_list_item"

    list_item_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    ingredient_name = Column(String(255), nullable=False)
    amount = Column(String(50))
    unit = Column(String(50))
    category = Column(String(50))
    recipe_id = Column(Uuid, ForeignKey("recipe.recipe_id", ondelete="SET NULL"), nullable=True)
    planned_meal_id = Column(
        Uuid, ForeignKey("planned_meal.planned_meal_id", ondelete="SET NULL"), nullable=True
    )
    is_checked = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    recipe = relationship("Recipe")
