"""Unit tests for observability sinks."""

import pytest
from structlog.testing import capture_logs

from carbon_footprint.domain.activity.events import (
    ActivityCreated,
    ActivityCreationFailed,
    FootprintCalculationFailed,
)
from carbon_footprint.domain.activity.ports import IObservabilitySink
from carbon_footprint.infrastructure.observability.sinks import (
    InMemoryObservabilitySink,
    StructlogObservabilitySink,
)


@pytest.fixture
def created() -> ActivityCreated:
    return ActivityCreated.create(
        activity_id="act-1",
        user_id="user123",
        activity_type="food",
        carbon_emission=1.2,
    )


@pytest.fixture
def failed() -> ActivityCreationFailed:
    return ActivityCreationFailed.create(
        user_id="user123",
        error_type="NotFoundError",
        reason="User does not exist",
    )


class TestStructlogObservabilitySink:
    """Test StructlogObservabilitySink."""

    def test_implements_port(self) -> None:
        assert isinstance(StructlogObservabilitySink(), IObservabilitySink)

    def test_activity_created_logged_at_info(self, created: ActivityCreated) -> None:
        sink = StructlogObservabilitySink()

        with capture_logs() as logs:
            sink.emit(created)

        assert len(logs) == 1
        entry = logs[0]
        assert entry["event"] == "ActivityCreated"
        assert entry["log_level"] == "info"
        assert entry["activity_id"] == "act-1"
        assert entry["carbon_emission"] == 1.2
        assert entry["event_id"] == str(created.event_id)
        assert entry["occurred_at"] == created.occurred_at.isoformat()

    def test_failure_logged_at_warning(self, failed: ActivityCreationFailed) -> None:
        sink = StructlogObservabilitySink()

        with capture_logs() as logs:
            sink.emit(failed)

        assert logs[0]["event"] == "ActivityCreationFailed"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["reason"] == "User does not exist"

    def test_footprint_failure_logged_at_warning(self) -> None:
        sink = StructlogObservabilitySink()
        event = FootprintCalculationFailed.create(
            user_id="user123", error_type="CollaboratorError", reason="timeout"
        )

        with capture_logs() as logs:
            sink.emit(event)

        assert logs[0]["log_level"] == "warning"
        assert logs[0]["error_type"] == "CollaboratorError"


class TestInMemoryObservabilitySink:
    """Test InMemoryObservabilitySink."""

    def test_records_in_order(self, created, failed) -> None:
        sink = InMemoryObservabilitySink()

        sink.emit(created)
        sink.emit(failed)

        assert sink.events == [created, failed]

    def test_of_type(self, created, failed) -> None:
        sink = InMemoryObservabilitySink()
        sink.emit(failed)
        sink.emit(created)

        assert sink.of_type(ActivityCreated) == [created]
        assert sink.of_type(ActivityCreationFailed) == [failed]
        assert sink.of_type(FootprintCalculationFailed) == []

    def test_events_is_a_copy(self, created) -> None:
        sink = InMemoryObservabilitySink()
        sink.emit(created)

        sink.events.clear()

        assert len(sink.events) == 1

    def test_clear(self, created) -> None:
        sink = InMemoryObservabilitySink()
        sink.emit(created)

        sink.clear()

        assert sink.events == []
