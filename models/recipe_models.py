"""
Recipe data models for the Burger Book application.

Recipes are plain dataclasses that serialize to JSON-friendly dicts so they can
be kept in the local key-value store alongside the rest of the user data.
"""

import re
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Optional, Dict, Any, Iterable


_LEADING_INT = re.compile(r"^\s*(\d+)")


class Difficulty(Enum):
    """Recipe difficulty levels"""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


def parse_cook_time_minutes(cook_time: Optional[str]) -> int:
    """
    Parse the leading integer of a cook-time string such as "15 mins".

    Strings without a leading integer ("about ten", "", None) parse to 0, so
    they land in the "Under 15 minutes" bucket and sort as the shortest.
    """
    if not cook_time:
        return 0
    match = _LEADING_INT.match(str(cook_time))
    return int(match.group(1)) if match else 0


@dataclass
class NutritionData:
    """Nutritional information per serving"""
    calories: Optional[int] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None


@dataclass
class Recipe:
    """
    Burger recipe.

    Built-in recipes reference an image key from the bundled catalogue; recipes
    added by the user carry an image URI and ``is_user_added=True``.
    """
    id: str
    name: str
    category: str
    description: str = ""
    image: str = ""
    ingredients: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)
    cook_time: str = "0 mins"
    prep_time: str = ""
    total_time: str = ""
    servings: int = 1
    calories: int = 0
    rating: float = 0.0
    difficulty: str = Difficulty.EASY.value
    is_recommended: bool = False
    is_user_added: bool = False
    nutrition: Optional[NutritionData] = None

    def __post_init__(self):
        """Normalize loosely typed input"""
        if isinstance(self.difficulty, Difficulty):
            self.difficulty = self.difficulty.value
        if isinstance(self.ingredients, str):
            self.ingredients = [ing.strip() for ing in self.ingredients.split(',') if ing.strip()]
        if isinstance(self.nutrition, dict):
            self.nutrition = NutritionData(**self.nutrition)
        self.id = str(self.id) if self.id is not None else ""
        self.rating = round(float(self.rating or 0), 1)

    @property
    def cook_time_minutes(self) -> int:
        return parse_cook_time_minutes(self.cook_time)

    def has_valid_image(self, known_image_keys: Iterable[str]) -> bool:
        """Check the image reference the way the recipe card will resolve it"""
        if self.is_user_added:
            return isinstance(self.image, str) and len(self.image) > 0
        return bool(self.image) and self.image in set(known_image_keys)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize recipe for local storage"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Recipe':
        """Deserialize recipe from local storage, ignoring unknown keys"""
        known = {name for name in cls.__dataclass_fields__}
        return cls(**{key: value for key, value in data.items() if key in known})
