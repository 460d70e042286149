"""Activity domain events.

Facts emitted to the observability sink by the application service.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique event identifier
        occurred_at: When the event occurred (UTC)
    """

    event_id: UUID
    occurred_at: datetime

    @staticmethod
    def _generate_event_id() -> UUID:
        return uuid4()

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ActivityCreated(DomainEvent):
    """Audit record emitted once per successfully persisted activity.

    Attributes:
        activity_id: Identifier assigned by persistence
        user_id: Owner of the activity
        activity_type: Activity category value
        carbon_emission: Computed emission in kg CO2
    """

    activity_id: str
    user_id: str
    activity_type: str
    carbon_emission: float

    @staticmethod
    def create(
        activity_id: str, user_id: str, activity_type: str, carbon_emission: float
    ) -> "ActivityCreated":
        return ActivityCreated(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            activity_id=activity_id,
            user_id=user_id,
            activity_type=activity_type,
            carbon_emission=carbon_emission,
        )


@dataclass(frozen=True)
class ActivityCreationFailed(DomainEvent):
    """Emitted when create_activity aborts.

    Attributes:
        user_id: Requested owner (may be missing in raw input)
        error_type: Class name of the error that aborted creation
        reason: Original error message
    """

    user_id: Optional[str]
    error_type: str
    reason: str

    @staticmethod
    def create(user_id: Optional[str], error_type: str, reason: str) -> "ActivityCreationFailed":
        return ActivityCreationFailed(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            user_id=user_id,
            error_type=error_type,
            reason=reason,
        )


@dataclass(frozen=True)
class FootprintCalculationFailed(DomainEvent):
    """Emitted when get_user_footprint aborts."""

    user_id: str
    error_type: str
    reason: str

    @staticmethod
    def create(user_id: str, error_type: str, reason: str) -> "FootprintCalculationFailed":
        return FootprintCalculationFailed(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            user_id=user_id,
            error_type=error_type,
            reason=reason,
        )
