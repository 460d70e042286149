"""In-memory implementation of IActivityRepository for testing."""

from copy import deepcopy
from datetime import datetime
from typing import Optional
from uuid import uuid4

from carbon_footprint.domain.activity.entities import Activity, as_utc
from carbon_footprint.domain.activity.value_objects import CategoryStats


class InMemoryActivityRepository:
    """
    In-memory implementation of activity repository.

    Uses a dictionary to store activities in memory. Suitable for testing
    and development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._activities: dict[str, Activity] = {}

    async def save(self, activity: Activity) -> Activity:
        """
        Store activity under a new identifier.

        Args:
            activity: Activity to save

        Returns:
            Copy of activity carrying the generated ID
        """
        saved = activity.with_id(str(uuid4()))
        # Deep copy to prevent external mutations
        self._activities[saved.id] = deepcopy(saved)
        return deepcopy(saved)

    async def find_by_user_and_date_range(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Activity]:
        """
        Find activities of a user, newest first.

        Args:
            user_id: User ID
            start_date: Inclusive lower bound (optional, naive = UTC)
            end_date: Inclusive upper bound (optional, naive = UTC)

        Returns:
            Deep copies of matching activities ordered by date descending
        """
        start_date = as_utc(start_date)
        end_date = as_utc(end_date)
        matches = [
            activity
            for activity in self._activities.values()
            if activity.user_id == user_id
            and (start_date is None or as_utc(activity.date) >= start_date)
            and (end_date is None or as_utc(activity.date) <= end_date)
        ]
        matches.sort(key=lambda a: as_utc(a.date), reverse=True)
        return [deepcopy(activity) for activity in matches]

    async def get_user_stats(self, user_id: str) -> dict[str, CategoryStats]:
        """
        Per-category statistics of a user's activities.

        Returns:
            Mapping category -> CategoryStats (categories with activities only)
        """
        emissions: dict[str, list[float]] = {}
        for activity in self._activities.values():
            if activity.user_id != user_id:
                continue
            emissions.setdefault(activity.type, []).append(activity.carbon_emission or 0.0)

        return {
            category: CategoryStats(
                count=len(values),
                total_emission=sum(values),
                average_emission=sum(values) / len(values),
            )
            for category, values in emissions.items()
        }

    def clear(self) -> None:
        """
        Clear all activities from memory.

        Useful for test cleanup.
        """
        self._activities.clear()

    def count(self) -> int:
        return len(self._activities)
