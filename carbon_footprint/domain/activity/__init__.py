"""Activity domain: emission calculation and footprint aggregation."""

from .category import ActivityCategory
from .entities import Activity
from .events import (
    ActivityCreated,
    ActivityCreationFailed,
    DomainEvent,
    FootprintCalculationFailed,
)
from .footprint import FootprintAggregator, FootprintPeriod, FootprintSummary
from .ports import (
    IActivityRepository,
    IEmissionFactorLookup,
    IObservabilitySink,
    IUserLookup,
)
from .value_objects import (
    AverageEmissions,
    CategoryStats,
    EmissionComparison,
    EmissionFactors,
)

__all__ = [
    "Activity",
    "ActivityCategory",
    "ActivityCreated",
    "ActivityCreationFailed",
    "AverageEmissions",
    "CategoryStats",
    "DomainEvent",
    "EmissionComparison",
    "EmissionFactors",
    "FootprintAggregator",
    "FootprintCalculationFailed",
    "FootprintPeriod",
    "FootprintSummary",
    "IActivityRepository",
    "IEmissionFactorLookup",
    "IObservabilitySink",
    "IUserLookup",
]
