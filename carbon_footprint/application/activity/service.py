"""
Activity Service.

Orchestrates user lookup, emission factors, the Activity entity
and persistence; aggregates footprints on the read side.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

import structlog

from carbon_footprint.domain.activity.entities import Activity, as_utc
from carbon_footprint.domain.activity.events import (
    ActivityCreated,
    ActivityCreationFailed,
    DomainEvent,
    FootprintCalculationFailed,
)
from carbon_footprint.domain.activity.footprint import (
    FootprintAggregator,
    FootprintSummary,
)
from carbon_footprint.domain.activity.ports import (
    IActivityRepository,
    IEmissionFactorLookup,
    IObservabilitySink,
    IUserLookup,
)
from carbon_footprint.domain.activity.value_objects import CategoryStats
from carbon_footprint.domain.shared.errors import (
    CreationError,
    FootprintError,
    NotFoundError,
    StatsError,
    ValidationError,
)

from .commands import CreateActivityCommand

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ActivityService:
    """Application service for carbon activities.

    Flow (create):
    1. Check user exists
    2. Load emission factors
    3. Build, validate and compute the activity
    4. Save (single call) and emit audit event

    Flow (footprint):
    1. Load activities in range
    2. Load averages
    3. Aggregate via FootprintAggregator
    """

    def __init__(
        self,
        repository: IActivityRepository,
        factor_lookup: IEmissionFactorLookup,
        user_lookup: IUserLookup,
        sink: IObservabilitySink,
        aggregator: Optional[FootprintAggregator] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize service.

        Args:
            repository: Activity persistence port
            factor_lookup: Emission factors / averages port
            user_lookup: User existence port
            sink: Observability sink for audit and failure events
            aggregator: Footprint aggregator (default instance if None)
            clock: Source of "now" for activities without a date
        """
        self._repository = repository
        self._factor_lookup = factor_lookup
        self._user_lookup = user_lookup
        self._sink = sink
        self._aggregator = aggregator or FootprintAggregator()
        self._clock = clock

    async def create_activity(self, command: CreateActivityCommand) -> Activity:
        """Create a new activity and calculate its emission.

        Args:
            command: Raw activity data

        Returns:
            Activity: Persisted activity with ``id`` and ``carbon_emission``

        Raises:
            CreationError: If any step fails (original message preserved)
        """
        try:
            if not await self._user_lookup.exists(command.user_id):
                raise NotFoundError("User does not exist")

            emission_factors = await self._factor_lookup.get_emission_factors()

            activity = Activity.create(
                user_id=command.user_id,
                type=command.type,
                value=command.value,
                unit=command.unit,
                date=command.date or self._clock(),
            )

            if not activity.is_valid():
                raise ValidationError("Invalid activity data")

            activity.calculate_emission(emission_factors)

            saved = await self._repository.save(activity)
        except Exception as e:
            self._emit(
                ActivityCreationFailed.create(
                    user_id=command.user_id,
                    error_type=type(e).__name__,
                    reason=str(e),
                )
            )
            raise CreationError(str(e)) from None

        # Persisted: from here on nothing may report the creation as failed
        self._emit(
            ActivityCreated.create(
                activity_id=saved.id,
                user_id=saved.user_id,
                activity_type=saved.type,
                carbon_emission=saved.carbon_emission,
            )
        )
        return saved

    async def get_user_footprint(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> FootprintSummary:
        """Get a user's carbon footprint for a date range.

        Args:
            user_id: User ID
            start_date: Inclusive range start (None = unbounded, naive = UTC)
            end_date: Inclusive range end (None = unbounded, naive = UTC)

        Returns:
            FootprintSummary: Total, per-category breakdown and comparison

        Raises:
            FootprintError: If a collaborator fails or averages are missing
        """
        start_date = as_utc(start_date)
        end_date = as_utc(end_date)

        try:
            activities = await self._repository.find_by_user_and_date_range(
                user_id, start_date, end_date
            )
            average_emissions = await self._factor_lookup.get_average_emissions()

            return self._aggregator.aggregate(
                user_id=user_id,
                activities=activities,
                average_emissions=average_emissions,
                start_date=start_date,
                end_date=end_date,
            )
        except Exception as e:
            self._emit(
                FootprintCalculationFailed.create(
                    user_id=user_id,
                    error_type=type(e).__name__,
                    reason=str(e),
                )
            )
            raise FootprintError(str(e)) from None

    async def get_user_stats(self, user_id: str) -> dict[str, CategoryStats]:
        """Per-category activity statistics for a user.

        Raises:
            StatsError: If the repository query fails
        """
        try:
            return await self._repository.get_user_stats(user_id)
        except Exception as e:
            raise StatsError(str(e)) from None

    def _emit(self, event: DomainEvent) -> None:
        """Hand an event to the sink; a failing sink is logged, never raised."""
        try:
            self._sink.emit(event)
        except Exception as e:
            logger.error(
                "Observability sink failed",
                event_type=type(event).__name__,
                error=str(e),
                exc_info=True,
            )
