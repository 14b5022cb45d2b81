"""
Recipe Repository - Data access layer for recipe operations
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Recipe


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def get_by_id(self, recipe_id: UUID) -> Optional[Recipe]:
        """Get recipe by ID"""
        return self.db.query(Recipe).filter(Recipe.recipe_id == recipe_id).first()

    def get_by_id_and_user(self, recipe_id: UUID, user_id: UUID) -> Optional[Recipe]:
        """Get recipe by ID for specific user"""
        return (
            self.db.query(Recipe)
            .filter(Recipe.recipe_id == recipe_id, Recipe.user_id == user_id)
            .first()
        )

    def search(
        self, user_id: UUID, query: Optional[str] = None, limit: int = 20
    ) -> List[Recipe]:
        """Search a user's recipes by title (case-insensitive substring)"""
        q = self.db.query(Recipe).filter(Recipe.user_id == user_id)
        if query:
            q = q.filter(func.lower(Recipe.title).contains(query.lower()))
        return q.order_by(Recipe.title.asc()).limit(limit).all()
