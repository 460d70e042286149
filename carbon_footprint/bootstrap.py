"""Composition root: wire adapters into an ActivityService."""

from typing import Optional

from carbon_footprint.application.activity.service import ActivityService
from carbon_footprint.domain.activity.ports import IEmissionFactorLookup, IObservabilitySink
from carbon_footprint.infrastructure.config import get_emission_factors_path, load_environment
from carbon_footprint.infrastructure.emission_factors.static_lookup import (
    StaticEmissionFactorLookup,
)
from carbon_footprint.infrastructure.logging_config import configure_logging
from carbon_footprint.infrastructure.observability.sinks import StructlogObservabilitySink
from carbon_footprint.infrastructure.persistence.factory import (
    create_activity_repository,
    create_user_lookup,
)


def create_emission_factor_lookup() -> IEmissionFactorLookup:
    """Built-in tables, or the JSON table named by EMISSION_FACTORS_PATH."""
    path = get_emission_factors_path()
    if path is None:
        return StaticEmissionFactorLookup()
    return StaticEmissionFactorLookup.from_file(path)


def build_activity_service(
    sink: Optional[IObservabilitySink] = None,
    configure: bool = True,
) -> ActivityService:
    """Build an ActivityService from environment configuration.

    Args:
        sink: Observability sink (structlog-backed if None)
        configure: Load .env and configure logging first

    Returns:
        ActivityService: Fully wired service
    """
    if configure:
        load_environment()
        configure_logging()

    return ActivityService(
        repository=create_activity_repository(),
        factor_lookup=create_emission_factor_lookup(),
        user_lookup=create_user_lookup(),
        sink=sink or StructlogObservabilitySink(),
    )
