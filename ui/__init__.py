"""
UI components for Burger Book application.

Contains Streamlit-based pages for browsing and filtering recipes, the cooking
timer, notifications, the shopping list, the add-a-burger form and the
profile page.
"""

from .recipe_browser import RecipeBrowser, create_recipe_browser
from .cooking_timer import CookingTimerInterface, create_cooking_timer_interface
from .notification_center import NotificationCenter, create_notification_center
from .profile import ProfileInterface, create_profile_interface
from .recipe_form import RecipeFormInterface, create_recipe_form_interface
from .shopping_list import ShoppingListInterface, create_shopping_list_interface

__all__ = [
    'RecipeBrowser',
    'create_recipe_browser',
    'CookingTimerInterface',
    'create_cooking_timer_interface',
    'NotificationCenter',
    'create_notification_center',
    'ProfileInterface',
    'create_profile_interface',
    'RecipeFormInterface',
    'create_recipe_form_interface',
    'ShoppingListInterface',
    'create_shopping_list_interface'
]
