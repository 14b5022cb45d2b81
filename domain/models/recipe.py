"""
Recipe model.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Integer, Date, JSON, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Recipe(Base):
    """A saved recipe that meal plan entries can reference"""

    __tablename__ = "recipe"

    recipe_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    title = Column(Text, nullable=False)
    image_url = Column(Text)
    servings = Column(Integer)
    ingredients = Column(JSON, nullable=False, default=list)  # [{name, amount, unit}]
    times_cooked = Column(Integer, nullable=False, default=0)
    last_cooked_at = Column(Date)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    planned_meals = relationship(
        "PlannedMeal", back_populates="recipe", cascade="all, delete-orphan"
    )
