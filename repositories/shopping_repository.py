"""
Shopping List Repository - Data access layer for shopping list operations
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, joinedload

from repositories.base import BaseRepository
from domain.models import ShoppingListItem


class ShoppingListItemRepository(BaseRepository[ShoppingListItem]):
    """Repository for shopping list item data access"""

    def __init__(self, db: Session):
        super().__init__(db, ShoppingListItem)

    def get_by_id(self, list_item_id: UUID) -> Optional[ShoppingListItem]:
        """Get shopping list item by ID"""
        return (
            self.db.query(ShoppingListItem)
            .filter(ShoppingListItem.list_item_id == list_item_id)
            .first()
        )

    def get_by_user_id(self, user_id: UUID) -> List[ShoppingListItem]:
        """Get a user's shopping list, unchecked items first"""
        return (
            self.db.query(ShoppingListItem)
            .options(joinedload(ShoppingListItem.recipe))
            .filter(ShoppingListItem.user_id == user_id)
            .order_by(
                ShoppingListItem.is_checked.asc(),
                ShoppingListItem.sort_order.asc(),
                ShoppingListItem.created_at.asc(),
            )
            .all()
        )

    def bulk_create(self, items: List[ShoppingListItem]) -> List[ShoppingListItem]:
        """Create multiple shopping list items"""
        self.db.add_all(items)
        self.db.commit()
        return items

    def delete_checked(self, user_id: UUID) -> int:
        """Delete all checked items of a user, returning how many were removed"""
        result = (
            self.db.query(ShoppingListItem)
            .filter(
                ShoppingListItem.user_id == user_id,
                ShoppingListItem.is_checked.is_(True),
            )
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return result
