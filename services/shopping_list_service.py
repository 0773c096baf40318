"""
Shopping list store for Burger Book application.

Items are kept in the order they were added. Ticking an item off marks it
completed; completed items stay on the list until cleared.
"""

import uuid
from dataclasses import replace
from typing import List, Optional

from models import ShoppingItem
from models.user_models import SHOPPING_CATEGORIES, now_iso
from services.entity_store import EntityStore
from services.storage_service import SHOPPING_LIST_KEY
from utils import get_logger

logger = get_logger(__name__)


class ShoppingListService(EntityStore[ShoppingItem]):
    """Grocery items with a completed flag"""

    storage_key = SHOPPING_LIST_KEY
    entity_name = "shopping item"

    def _decode(self, data) -> ShoppingItem:
        return ShoppingItem.from_dict(data)

    @property
    def shopping_list(self) -> List[ShoppingItem]:
        return self.items

    @property
    def completed_count(self) -> int:
        return sum(1 for item in self._items if item.completed)

    def get_item(self, item_id: str) -> Optional[ShoppingItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    async def add_item(self, name: str, quantity: str = "", category: str = "Meat") -> Optional[ShoppingItem]:
        """Append an item; returns None when the name is blank"""
        name = (name or "").strip()
        if not name:
            logger.warning("Rejected shopping item without a name")
            return None

        if category not in SHOPPING_CATEGORIES:
            logger.warning(f"Unknown shopping category '{category}', filed under Other")
            category = "Other"

        item = ShoppingItem(
            id=uuid.uuid4().hex,
            name=name,
            quantity=(quantity or "").strip() or "1",
            category=category,
            completed=False,
            added_at=now_iso()
        )
        await self._commit(self._items + [item])
        logger.info(f"Added {item.name} to the shopping list")
        return item

    async def toggle_item(self, item_id: str) -> Optional[bool]:
        """Flip the completed flag; returns the new flag or None when not found"""
        target = self.get_item(item_id)
        if target is None:
            return None

        flipped = replace(target, completed=not target.completed)
        await self._commit([flipped if item.id == item_id else item for item in self._items])
        return flipped.completed

    async def delete_item(self, item_id: str) -> bool:
        if self.get_item(item_id) is None:
            return False
        await self._commit([item for item in self._items if item.id != item_id])
        return True

    async def clear_completed(self) -> int:
        """Drop ticked-off items; returns how many were removed"""
        remaining = [item for item in self._items if not item.completed]
        removed = len(self._items) - len(remaining)
        if removed == 0:
            return 0

        await self._commit(remaining)
        logger.info(f"Cleared {removed} completed shopping item(s)")
        return removed

    async def clear_shopping_list(self) -> None:
        await self._commit([])
