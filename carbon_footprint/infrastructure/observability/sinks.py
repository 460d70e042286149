"""Observability sinks.

Adapters for IObservabilitySink: a structlog-backed sink for runtime
and an in-memory sink that records events for tests and development.
"""

from dataclasses import asdict
from typing import Any, List, Type, TypeVar

import structlog

from carbon_footprint.domain.activity.events import (
    ActivityCreated,
    DomainEvent,
)

logger = structlog.get_logger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)


def _event_fields(event: DomainEvent) -> dict[str, Any]:
    fields = asdict(event)
    fields["event_id"] = str(event.event_id)
    fields["occurred_at"] = event.occurred_at.isoformat()
    return fields


class StructlogObservabilitySink:
    """Logs each domain event as one structured record.

    ActivityCreated is logged at info level (audit); failure events
    at warning level.

    Example:
        >>> sink = StructlogObservabilitySink()
        >>> sink.emit(ActivityCreated.create("a1", "user123", "food", 1.2))
    """

    def __init__(self, logger_name: str = "carbon_footprint.audit") -> None:
        self._logger = structlog.get_logger(logger_name)

    def emit(self, event: DomainEvent) -> None:
        event_name = type(event).__name__
        fields = _event_fields(event)

        if isinstance(event, ActivityCreated):
            self._logger.info(event_name, **fields)
        else:
            self._logger.warning(event_name, **fields)


class InMemoryObservabilitySink:
    """
    Records events in memory.

    Thread safety: NOT thread-safe
    Persistence: Events lost on process restart
    """

    def __init__(self) -> None:
        self._events: List[DomainEvent] = []

    def emit(self, event: DomainEvent) -> None:
        self._events.append(event)
        logger.debug("Event recorded", event_type=type(event).__name__)

    @property
    def events(self) -> List[DomainEvent]:
        return list(self._events)

    def of_type(self, event_type: Type[TEvent]) -> List[TEvent]:
        """Recorded events of one type, in emission order."""
        return [event for event in self._events if isinstance(event, event_type)]

    def clear(self) -> None:
        self._events.clear()
