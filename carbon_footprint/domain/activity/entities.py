"""Activity entity - one recorded carbon-emitting action of a user."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from numbers import Real
from typing import Any, Optional

from ..shared.errors import NotFoundError, PreconditionError
from .category import ActivityCategory, category_key
from .value_objects import AverageEmissions, EmissionComparison, EmissionFactors


@dataclass
class Activity:
    """Single activity with its emission once computed.

    Unlike value objects, an Activity may be built from raw, unchecked
    input: ``is_valid()`` is the gate every persisting workflow must pass
    before ``calculate_emission()``.

    Attributes:
        id: Persistent identifier (None until saved)
        user_id: Owner of the activity
        type: Activity category value (see ActivityCategory)
        value: Measured quantity, expressed in ``unit``
        unit: Unit-of-measure symbol (e.g. "km", "kwh")
        date: When the activity happened
        carbon_emission: kg CO2, None until calculated
    """

    id: Optional[str]
    user_id: Any
    type: Any
    value: Any
    unit: Any
    date: Any
    carbon_emission: Optional[float] = None

    @staticmethod
    def create(
        user_id: str,
        type: str,
        value: float,
        unit: str,
        date: datetime,
    ) -> "Activity":
        """Factory method for a new, not yet persisted activity.

        Args:
            user_id: Owner of the activity
            type: Activity category
            value: Measured quantity
            unit: Unit symbol
            date: When the activity happened (supplied by the caller);
                naive datetimes are taken as UTC

        Returns:
            Activity: New activity with ``id=None`` and no emission
        """
        return Activity(
            id=None,
            user_id=user_id,
            type=category_key(type),
            value=value,
            unit=unit,
            date=as_utc(date),
        )

    def is_valid(self) -> bool:
        """Check the activity data is complete and correct.

        Returns:
            bool: True if user, type, value, unit and date are all acceptable
        """
        return (
            _non_empty_str(self.user_id)
            and ActivityCategory.is_known(self.type)
            and _positive_number(self.value)
            and _non_empty_str(self.unit)
            and isinstance(self.date, datetime)
        )

    def calculate_emission(self, emission_factors: Optional[EmissionFactors]) -> float:
        """Calculate carbon emission from the factor table.

        Args:
            emission_factors: activity type -> unit -> kg CO2 per unit

        Returns:
            float: Calculated emission in kg CO2

        Raises:
            NotFoundError: If no factor exists for the type or the unit

        Example:
            >>> activity.value, activity.unit
            (100, 'km')
            >>> activity.calculate_emission({"transportation": {"km": 0.2}})
            20.0
        """
        type_key = category_key(self.type)
        if not emission_factors or type_key not in emission_factors:
            raise NotFoundError(f"Emission factor for {type_key} not found")

        unit_factors = emission_factors[type_key]
        if self.unit not in unit_factors:
            raise NotFoundError(f"Emission factor for {type_key}/{self.unit} not found")

        self.carbon_emission = self.value * unit_factors[self.unit]
        return self.carbon_emission

    def compare_to_average(
        self, average_emissions: Optional[AverageEmissions]
    ) -> EmissionComparison:
        """Compare this activity's emission with the average for its type.

        Args:
            average_emissions: Average emissions by activity type

        Returns:
            EmissionComparison: Difference, percentage and verdict

        Raises:
            PreconditionError: If emission not calculated, no average for
                this type, or the average is zero
        """
        if self.carbon_emission is None:
            raise PreconditionError("Cannot compare: emission not calculated")

        average = average_emissions.for_category(self.type) if average_emissions else None
        if average is None:
            raise PreconditionError(f"Cannot compare: no average emission for {self.type}")

        return EmissionComparison.between(self.carbon_emission, average)

    def with_id(self, activity_id: str) -> "Activity":
        """Copy of this activity carrying its persistent identifier."""
        return replace(self, id=activity_id)

    def __repr__(self) -> str:
        return (
            f"Activity(id={self.id}, user_id={self.user_id}, type={self.type}, "
            f"value={self.value}{self.unit}, carbon_emission={self.carbon_emission})"
        )


def as_utc(value: Any) -> Any:
    """Naive datetimes as UTC; anything else unchanged."""
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _positive_number(value: Any) -> bool:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value > 0
