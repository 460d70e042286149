"""ActivityCategory value object - kinds of emitting activity."""

from enum import Enum
from typing import Any


class ActivityCategory(str, Enum):
    """Category of a carbon-emitting activity.

    - TRANSPORTATION: travel distance (km, mile)
    - ENERGY: electricity / fuel consumption (kwh, ...)
    - FOOD: food consumed by weight (kg)
    - CONSUMPTION: goods purchased
    """

    TRANSPORTATION = "transportation"
    ENERGY = "energy"
    FOOD = "food"
    CONSUMPTION = "consumption"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """All category values in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def is_known(cls, value: Any) -> bool:
        """Check whether value names a declared category.

        Args:
            value: Raw type (str or ActivityCategory)

        Returns:
            bool: True if value is one of the declared categories
        """
        return isinstance(value, str) and category_key(value) in cls.values()

    @classmethod
    def zero_breakdown(cls) -> dict[str, float]:
        """Build a category -> 0.0 mapping with one entry per category.

        Example:
            >>> ActivityCategory.zero_breakdown()["food"]
            0.0
        """
        return {member.value: 0.0 for member in cls}


def category_key(value: Any) -> Any:
    """Plain string key for a category value."""
    if isinstance(value, ActivityCategory):
        return value.value
    return value
