"""
Bundled reference data for Burger Book application.
"""

from .burgers_data import BUILTIN_IMAGE_KEYS, get_builtin_recipes
from .notifications_data import get_seed_notifications

__all__ = [
    'BUILTIN_IMAGE_KEYS',
    'get_builtin_recipes',
    'get_seed_notifications'
]
