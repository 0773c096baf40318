"""
User data models for the Burger Book application.

Ratings, cooking sessions, notifications, usage stats and the shopping list are
all owned by one local user and persisted as JSON in the device key-value store.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Optional


def now_iso() -> str:
    return datetime.now().isoformat()


@dataclass
class Rating:
    """A user's star rating for a recipe, one per recipe"""
    recipe_id: str
    rating: int
    date: str = field(default_factory=now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Rating':
        return cls(
            recipe_id=str(data['recipe_id']),
            rating=int(data['rating']),
            date=data.get('date') or now_iso()
        )


class CookingState(Enum):
    """Lifecycle of the current cooking session"""
    IDLE = "idle"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class CookingSession:
    """One cooking run of a recipe; cooking_time is in seconds"""
    recipe_id: str
    recipe_name: str
    cooking_time: int = 0
    date: str = field(default_factory=now_iso)
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CookingSession':
        return cls(
            recipe_id=str(data['recipe_id']),
            recipe_name=data.get('recipe_name', ""),
            cooking_time=int(data.get('cooking_time', 0)),
            date=data.get('date') or now_iso(),
            completed=bool(data.get('completed', False))
        )


class NotificationType(Enum):
    RECIPE = "recipe"
    ACHIEVEMENT = "achievement"
    TIP = "tip"
    UPDATE = "update"
    REMINDER = "reminder"

    @property
    def default_icon(self) -> str:
        return {
            NotificationType.RECIPE: "🍔",
            NotificationType.ACHIEVEMENT: "🏆",
            NotificationType.TIP: "💡",
            NotificationType.UPDATE: "📱",
            NotificationType.REMINDER: "⏰",
        }[self]


@dataclass
class Notification:
    """In-app notification"""
    id: str
    title: str
    message: str
    type: NotificationType
    timestamp: str = field(default_factory=now_iso)
    read: bool = False
    icon: str = ""
    action_url: Optional[str] = None  # screen to open, e.g. "BurgerDetail"
    data: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if isinstance(self.type, str):
            self.type = NotificationType(self.type)
        if not self.icon:
            self.icon = self.type.default_icon

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['type'] = self.type.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Notification':
        return cls(
            id=str(data['id']),
            title=data['title'],
            message=data.get('message', ""),
            type=NotificationType(data['type']),
            timestamp=data.get('timestamp') or now_iso(),
            read=bool(data.get('read', False)),
            icon=data.get('icon', ""),
            action_url=data.get('action_url'),
            data=data.get('data')
        )


@dataclass
class UserStats:
    """Usage counters shown on the profile page"""
    burgers_viewed: int = 0
    recipes_cooked: int = 0
    total_cook_time: int = 0  # seconds

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UserStats':
        return cls(
            burgers_viewed=int(data.get('burgers_viewed', 0)),
            recipes_cooked=int(data.get('recipes_cooked', 0)),
            total_cook_time=int(data.get('total_cook_time', 0))
        )


SHOPPING_CATEGORIES = ["Meat", "Vegetables", "Dairy", "Condiments", "Bread", "Spices", "Other"]

_SHOPPING_ICONS = {
    "Meat": "🥩",
    "Vegetables": "🥬",
    "Dairy": "🥛",
    "Condiments": "🍯",
    "Bread": "🍞",
    "Spices": "🧂",
}


@dataclass
class ShoppingItem:
    """One line on the shopping list"""
    id: str
    name: str
    quantity: str = "1"
    category: str = "Other"
    completed: bool = False
    added_at: str = field(default_factory=now_iso)

    @property
    def icon(self) -> str:
        return _SHOPPING_ICONS.get(self.category, "📦")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ShoppingItem':
        return cls(
            id=str(data['id']),
            name=data['name'],
            quantity=str(data.get('quantity') or "1"),
            category=data.get('category') or "Other",
            completed=bool(data.get('completed', False)),
            added_at=data.get('added_at') or now_iso()
        )
