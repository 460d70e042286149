"""
Static emission factor lookup.

Serves built-in or file-provided reference tables through the
IEmissionFactorLookup port.
"""

from copy import deepcopy
from pathlib import Path
from typing import Mapping, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from carbon_footprint.domain.activity.value_objects import AverageEmissions
from carbon_footprint.domain.shared.errors import CollaboratorError

from .defaults import DEFAULT_AVERAGE_EMISSIONS, DEFAULT_EMISSION_FACTORS
from .models import EmissionFactorTable

logger = structlog.get_logger(__name__)


class StaticEmissionFactorLookup:
    """In-process emission reference data.

    Returns copies so callers can never alter the served tables.
    """

    def __init__(
        self,
        factors: Optional[Mapping[str, Mapping[str, float]]] = None,
        averages: Optional[Mapping[str, float]] = None,
    ) -> None:
        """Initialize lookup.

        Args:
            factors: type -> unit -> kg CO2 per unit (defaults built in)
            averages: Flat per-type averages with optional ``total`` key
        """
        source = DEFAULT_EMISSION_FACTORS if factors is None else factors
        self._factors = {k: dict(v) for k, v in source.items()}
        self._averages = dict(DEFAULT_AVERAGE_EMISSIONS if averages is None else averages)

    @classmethod
    def from_file(cls, path: Path) -> "StaticEmissionFactorLookup":
        """Load tables from a JSON file.

        Args:
            path: JSON file matching EmissionFactorTable

        Returns:
            StaticEmissionFactorLookup: Lookup serving the file's tables

        Raises:
            CollaboratorError: If the file is missing or invalid
        """
        try:
            table = EmissionFactorTable.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, PydanticValidationError) as e:
            logger.error("Emission factor table load failed", path=str(path), error=str(e))
            raise CollaboratorError(f"Emission factor table error: {e}") from e

        averages: dict[str, float] = dict(table.averages)
        if table.average_total is not None:
            averages["total"] = table.average_total

        logger.info(
            "Emission factor table loaded",
            path=str(path),
            categories=sorted(table.factors),
        )
        return cls(factors=table.factors, averages=averages)

    async def get_emission_factors(self) -> dict[str, dict[str, float]]:
        return deepcopy(self._factors)

    async def get_average_emissions(self) -> AverageEmissions:
        return AverageEmissions.from_mapping(self._averages)
