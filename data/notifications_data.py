"""
Starter notifications shown on first launch.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from models import Notification, NotificationType


def get_seed_notifications(now: Optional[datetime] = None) -> List[Notification]:
    """Build the welcome notifications with timestamps relative to ``now``"""
    now = now or datetime.now()

    def ago(**delta) -> str:
        return (now - timedelta(**delta)).isoformat()

    return [
        Notification(
            id="1", title="New Recipe Added! 🍔",
            message="Try the amazing Blue Cheese Burger - a gourmet delight!",
            type=NotificationType.RECIPE, timestamp=ago(hours=2), read=False, icon="🍔",
            action_url="BurgerDetail", data={"recipe_id": "11"},
        ),
        Notification(
            id="2", title="Achievement Unlocked! 🏆",
            message="Burger Explorer - You've viewed 10 different burger recipes!",
            type=NotificationType.ACHIEVEMENT, timestamp=ago(hours=5), read=False, icon="🏆",
        ),
        Notification(
            id="3", title="Cooking Tip 💡",
            message="Let your patties rest for 5 minutes after cooking for juicier results!",
            type=NotificationType.TIP, timestamp=ago(days=1), read=True, icon="💡",
        ),
        Notification(
            id="4", title="Weekly Challenge 🎯",
            message="This week's challenge: try cooking a vegetarian burger!",
            type=NotificationType.ACHIEVEMENT, timestamp=ago(days=2), read=True, icon="🎯",
        ),
        Notification(
            id="5", title="App Update Available 📱",
            message="A new version adds meal planning and nutrition tracking.",
            type=NotificationType.UPDATE, timestamp=ago(days=3), read=False, icon="📱",
        ),
        Notification(
            id="6", title="Cooking Reminder ⏰",
            message="Check your shopping list before your next grocery trip!",
            type=NotificationType.REMINDER, timestamp=ago(days=4), read=True, icon="⏰",
        ),
        Notification(
            id="7", title="Featured Recipe 🌟",
            message="The BBQ Bacon Burger is trending this week.",
            type=NotificationType.RECIPE, timestamp=ago(days=5), read=True, icon="🌟",
            action_url="BurgerDetail", data={"recipe_id": "5"},
        ),
        Notification(
            id="8", title="Ingredient Spotlight 🥬",
            message="Fresh arugula adds a peppery bite to any burger.",
            type=NotificationType.TIP, timestamp=ago(days=6), read=True, icon="🥬",
        ),
    ]
