"""Value objects for the activity domain.

Immutable reference data (emission factors, averages) and derived
results (comparison, per-category statistics).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..shared.errors import PreconditionError
from .category import category_key

# activity type -> unit -> kg CO2 per unit
EmissionFactors = Mapping[str, Mapping[str, float]]


@dataclass(frozen=True)
class AverageEmissions:
    """Average kg CO2 reference used for comparisons.

    Attributes:
        by_category: Average emission per activity type
        total: Aggregate average for a whole footprint (None if unknown)
    """

    by_category: Mapping[str, float] = field(default_factory=dict)
    total: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "by_category",
            MappingProxyType({category_key(k): v for k, v in self.by_category.items()}),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AverageEmissions":
        """Build from the flat ``{"transportation": 25.0, "total": 120.0}`` shape.

        Args:
            data: Per-type averages plus optional ``total`` key

        Returns:
            AverageEmissions: Parsed reference
        """
        by_category = {k: v for k, v in data.items() if k != "total"}
        return cls(by_category=by_category, total=data.get("total"))

    def for_category(self, category: str) -> Optional[float]:
        """Average for one category, or None if not registered."""
        return self.by_category.get(category_key(category))


@dataclass(frozen=True)
class EmissionComparison:
    """Comparison of an emission against an average.

    Attributes:
        difference: emission - average (kg CO2)
        percentage_diff: difference / average * 100
        is_better_than_average: True when below the average
    """

    difference: float
    percentage_diff: float
    is_better_than_average: bool

    @classmethod
    def between(cls, emission: float, average: float) -> "EmissionComparison":
        """Compare emission against average.

        Args:
            emission: Observed emission in kg CO2
            average: Reference average in kg CO2

        Returns:
            EmissionComparison: Difference, percentage and verdict

        Raises:
            PreconditionError: If average is zero

        Example:
            >>> EmissionComparison.between(20.0, 25.0).percentage_diff
            -20.0
        """
        if average == 0:
            raise PreconditionError("Cannot compare: average emission is zero")

        difference = emission - average
        return cls(
            difference=difference,
            percentage_diff=(difference / average) * 100,
            is_better_than_average=difference < 0,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "difference": self.difference,
            "percentage_diff": self.percentage_diff,
            "is_better_than_average": self.is_better_than_average,
        }


@dataclass(frozen=True)
class CategoryStats:
    """Activity statistics for one category of a user.

    Attributes:
        count: Number of activities
        total_emission: Summed kg CO2
        average_emission: Mean kg CO2 per activity
    """

    count: int
    total_emission: float
    average_emission: float
