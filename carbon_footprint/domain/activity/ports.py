"""
Activity domain ports.

Protocols the application layer depends on; infrastructure
adapters implement them (Dependency Inversion Principle).
"""

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from .entities import Activity
from .events import DomainEvent
from .value_objects import AverageEmissions, CategoryStats, EmissionFactors


@runtime_checkable
class IUserLookup(Protocol):
    """Port answering whether a referenced user exists."""

    async def exists(self, user_id: str) -> bool:
        """
        Check if user exists.

        Args:
            user_id: User identifier

        Returns:
            bool: True if the user exists

        Raises:
            CollaboratorError: On lookup failure
        """
        ...


@runtime_checkable
class IEmissionFactorLookup(Protocol):
    """
    Port for emission reference data.

    Implementations return read-only tables; the core never mutates them.
    """

    async def get_emission_factors(self) -> EmissionFactors:
        """
        Current emission-factor table.

        Returns:
            EmissionFactors: activity type -> unit -> kg CO2 per unit
        """
        ...

    async def get_average_emissions(self) -> AverageEmissions:
        """
        Average emissions reference.

        Returns:
            AverageEmissions: Per-type averages plus aggregate total
        """
        ...


@runtime_checkable
class IActivityRepository(Protocol):
    """
    Repository interface for activities.

    Implementations must provide:
    - Atomic single-call save that assigns the identifier
    - Inclusive date-range queries, newest first
    - Per-category statistics

    Example:
        >>> saved = await repository.save(activity)
        >>> assert saved.id is not None
    """

    async def save(self, activity: Activity) -> Activity:
        """
        Persist a new activity.

        Args:
            activity: Validated activity with computed emission

        Returns:
            Activity: New instance carrying the assigned ``id``

        Raises:
            CollaboratorError: On storage failure
        """
        ...

    async def find_by_user_and_date_range(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Activity]:
        """
        Activities of a user within an optional date range.

        Args:
            user_id: Owner of the activities
            start_date: Inclusive lower bound (None = unbounded)
            end_date: Inclusive upper bound (None = unbounded)

        Returns:
            List of Activity ordered by date descending (may be empty)

        Raises:
            CollaboratorError: On query failure
        """
        ...

    async def get_user_stats(self, user_id: str) -> dict[str, CategoryStats]:
        """
        Per-category activity statistics for a user.

        Returns:
            Mapping category -> CategoryStats (only categories with activities)
        """
        ...


@runtime_checkable
class IObservabilitySink(Protocol):
    """Port receiving structured domain events (audit, failures)."""

    def emit(self, event: DomainEvent) -> None:
        """
        Record an event.

        Args:
            event: Domain event to record
        """
        ...
