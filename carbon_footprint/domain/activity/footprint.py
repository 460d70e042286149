"""Footprint aggregation.

Turns a user's activities into a per-category and total summary,
compared against the average footprint.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

from ..shared.errors import PreconditionError
from .category import ActivityCategory, category_key
from .entities import Activity
from .value_objects import AverageEmissions, EmissionComparison


@dataclass(frozen=True)
class FootprintPeriod:
    """Date range of a footprint; None means unbounded on that side."""

    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


@dataclass(frozen=True)
class FootprintSummary:
    """Aggregated footprint of a user over a period (not persisted).

    Attributes:
        user_id: Owner of the footprint
        period: Requested date range
        total_emission: Sum of all activity emissions (kg CO2)
        by_category: Summed emission per category, every category present
        comparison: Total compared against the average footprint
        activity_count: Number of activities aggregated
    """

    user_id: str
    period: FootprintPeriod
    total_emission: float
    by_category: Mapping[str, float]
    comparison: EmissionComparison
    activity_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "period": {
                "start_date": self.period.start_date,
                "end_date": self.period.end_date,
            },
            "total_emission": self.total_emission,
            "by_category": dict(self.by_category),
            "comparison": self.comparison.to_dict(),
            "activity_count": self.activity_count,
        }


class FootprintAggregator:
    """Aggregates activities into a FootprintSummary.

    Flow:
    1. Seed one bucket per category at 0.0
    2. Sum each activity's emission into total and its bucket
    3. Compare total with ``average_emissions.total``
    """

    def aggregate(
        self,
        user_id: str,
        activities: Sequence[Activity],
        average_emissions: AverageEmissions,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> FootprintSummary:
        """Build the footprint summary.

        Args:
            user_id: Owner of the activities
            activities: Activities with computed emissions
            average_emissions: Average reference (``total`` required)
            start_date: Requested range start (inclusive), if any
            end_date: Requested range end (inclusive), if any

        Returns:
            FootprintSummary: Totals, breakdown and comparison

        Raises:
            PreconditionError: If an activity has no emission or an unknown
                category, or the average total is missing or zero
        """
        by_category = ActivityCategory.zero_breakdown()
        total_emission = 0.0

        for activity in activities:
            key = category_key(activity.type)
            if key not in by_category:
                raise PreconditionError(f"Cannot aggregate: unknown activity type {key}")
            if activity.carbon_emission is None:
                raise PreconditionError(
                    f"Cannot aggregate: emission not calculated for activity {activity.id}"
                )
            total_emission += activity.carbon_emission
            by_category[key] += activity.carbon_emission

        if average_emissions is None or average_emissions.total is None:
            raise PreconditionError("Cannot compare: average total emission not available")

        return FootprintSummary(
            user_id=user_id,
            period=FootprintPeriod(start_date=start_date, end_date=end_date),
            total_emission=total_emission,
            by_category=MappingProxyType(by_category),
            comparison=EmissionComparison.between(total_emission, average_emissions.total),
            activity_count=len(activities),
        )
