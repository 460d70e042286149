"""
Shared fixtures for carbon footprint tests.
"""

from datetime import datetime, timezone

import pytest

from carbon_footprint.domain.activity.entities import Activity
from carbon_footprint.domain.activity.value_objects import AverageEmissions


@pytest.fixture
def emission_factors() -> dict[str, dict[str, float]]:
    """Factor table: kg CO2 per unit."""
    return {
        "transportation": {"km": 0.2, "mile": 0.32},
        "energy": {"kwh": 0.5},
        "food": {"kg": 1.2},
    }


@pytest.fixture
def average_emissions() -> AverageEmissions:
    return AverageEmissions.from_mapping(
        {
            "transportation": 25.0,
            "energy": 40.0,
            "food": 30.0,
            "consumption": 25.0,
            "total": 120.0,
        }
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_activity() -> Activity:
    """Unsaved 100 km transportation activity."""
    return Activity.create(
        user_id="user123",
        type="transportation",
        value=100,
        unit="km",
        date=datetime(2023, 1, 1, tzinfo=timezone.utc),
    )
