"""
Notification store for Burger Book application.

Notifications are kept newest first. On first launch (nothing stored yet) the
starter notifications are loaded and written to storage; a corrupt stored
value also falls back to the starter set.
"""

import uuid
from dataclasses import replace
from typing import Any, Dict, List, Optional, Union

from data import get_seed_notifications
from models import Notification, NotificationType
from models.user_models import now_iso
from services.entity_store import EntityStore
from services.storage_service import NOTIFICATIONS_KEY
from utils import get_logger

logger = get_logger(__name__)


class NotificationService(EntityStore[Notification]):
    """In-app notifications with read state"""

    storage_key = NOTIFICATIONS_KEY
    entity_name = "notification"

    def _decode(self, data) -> Notification:
        return Notification.from_dict(data)

    def _default_items(self) -> List[Notification]:
        return get_seed_notifications()

    async def _on_missing(self, items: List[Notification]) -> None:
        await self.persist()

    @property
    def notifications(self) -> List[Notification]:
        return self.items

    @property
    def unread_count(self) -> int:
        return sum(1 for notification in self._items if not notification.read)

    def get_notification(self, notification_id: str) -> Optional[Notification]:
        for notification in self._items:
            if notification.id == notification_id:
                return notification
        return None

    async def add_notification(self, title: str, message: str,
                               type: Union[NotificationType, str] = NotificationType.UPDATE,
                               icon: str = "", action_url: Optional[str] = None,
                               data: Optional[Dict[str, Any]] = None) -> Notification:
        """Create a notification and put it at the top of the list"""
        notification = Notification(
            id=uuid.uuid4().hex,
            title=title,
            message=message,
            type=type,
            timestamp=now_iso(),
            read=False,
            icon=icon,
            action_url=action_url,
            data=data
        )
        await self._commit([notification] + self._items)
        logger.info(f"Added {notification.type.value} notification: {title}")
        return notification

    async def mark_as_read(self, notification_id: str) -> bool:
        target = self.get_notification(notification_id)
        if target is None:
            return False
        if target.read:
            return True

        await self._commit([
            self._with_read(notification) if notification.id == notification_id else notification
            for notification in self._items
        ])
        return True

    async def mark_all_as_read(self) -> None:
        await self._commit([self._with_read(notification) for notification in self._items])

    async def delete_notification(self, notification_id: str) -> bool:
        if self.get_notification(notification_id) is None:
            return False
        await self._commit([n for n in self._items if n.id != notification_id])
        return True

    async def clear_all_notifications(self) -> None:
        await self._commit([])
        logger.info("Cleared all notifications")

    @staticmethod
    def _with_read(notification: Notification) -> Notification:
        # New objects so previously handed-out lists keep their old state
        return replace(notification, read=True)
