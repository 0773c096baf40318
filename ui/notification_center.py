"""
Notification center UI for Burger Book application.
"""

import streamlit as st
from datetime import datetime

from services import AppServices
from utils import AsyncRunner, get_logger

logger = get_logger(__name__)


def _time_ago(timestamp: str) -> str:
    try:
        delta = datetime.now() - datetime.fromisoformat(timestamp)
    except ValueError:
        return ""
    if delta.days > 0:
        return f"{delta.days}d ago"
    hours = delta.seconds // 3600
    if hours > 0:
        return f"{hours}h ago"
    return f"{delta.seconds // 60}m ago"


class NotificationCenter:
    """Notification list with read, delete and clear actions"""

    def __init__(self, services: AppServices, runner: AsyncRunner):
        self.services = services
        self.runner = runner

    def badge_label(self) -> str:
        unread = self.services.notifications.unread_count
        return f"🔔 Notifications ({unread})" if unread else "🔔 Notifications"

    def render_notifications_page(self):
        store = self.services.notifications
        st.header(self.badge_label())

        notifications = store.notifications
        if not notifications:
            st.info("You're all caught up.")
            return

        col1, col2 = st.columns(2)
        with col1:
            if st.button("Mark all as read", disabled=store.unread_count == 0):
                self.runner.run(store.mark_all_as_read())
                st.rerun()
        with col2:
            if st.button("🗑️ Clear all"):
                self.runner.run(store.clear_all_notifications())
                st.rerun()

        for notification in notifications:
            with st.container(border=True):
                col1, col2, col3 = st.columns([6, 1, 1])
                with col1:
                    title = notification.title if notification.read else f"**{notification.title}**"
                    st.markdown(f"{notification.icon} {title}")
                    st.caption(f"{notification.message} · {_time_ago(notification.timestamp)}")
                with col2:
                    if not notification.read and st.button("✓", key=f"read_{notification.id}",
                                                          help="Mark as read"):
                        self.runner.run(store.mark_as_read(notification.id))
                        st.rerun()
                with col3:
                    if st.button("🗑️", key=f"delete_{notification.id}", help="Delete"):
                        self.runner.run(store.delete_notification(notification.id))
                        st.rerun()


def create_notification_center(services: AppServices, runner: AsyncRunner) -> NotificationCenter:
    """Factory function to create notification center"""
    return NotificationCenter(services, runner)
