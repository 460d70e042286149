"""CreateActivityCommand - record a new carbon-emitting activity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class CreateActivityCommand:
    """Command to create a new activity.

    Values are carried as received; validation happens on the entity.

    Attributes:
        user_id: Owner of the activity
        type: Activity category (transportation/energy/food/consumption)
        value: Measured quantity
        unit: Unit symbol
        date: When the activity happened (defaults to now)
    """

    user_id: Any
    type: Any
    value: Any
    unit: Any
    date: Optional[datetime] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CreateActivityCommand":
        """Build from raw activity data (``userId`` or ``user_id`` keys)."""
        return cls(
            user_id=data.get("user_id", data.get("userId")),
            type=data.get("type"),
            value=data.get("value"),
            unit=data.get("unit"),
            date=data.get("date"),
        )
