"""
Emission factor table file model.

Validates JSON tables loaded from EMISSION_FACTORS_PATH.
"""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from carbon_footprint.domain.activity.category import ActivityCategory


class EmissionFactorTable(BaseModel):
    """
    Emission reference data file.

    Example:
        >>> table = EmissionFactorTable.model_validate_json(
        ...     '{"factors": {"food": {"kg": 1.2}},'
        ...     ' "averages": {"food": 30.0}, "average_total": 120.0}'
        ... )
        >>> table.factors["food"]["kg"]
        1.2
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    factors: dict[str, dict[str, float]] = Field(..., description="type -> unit -> kg CO2/unit")
    averages: dict[str, float] = Field(default_factory=dict, description="type -> kg CO2")
    average_total: Optional[float] = Field(
        default=None, ge=0, description="Whole-footprint average"
    )

    @field_validator("factors")
    @classmethod
    def factors_known_and_finite(
        cls, v: dict[str, dict[str, float]]
    ) -> dict[str, dict[str, float]]:
        for category, units in v.items():
            if not ActivityCategory.is_known(category):
                raise ValueError(f"Unknown activity type: {category}")
            for unit, factor in units.items():
                if not unit.strip():
                    raise ValueError(f"Empty unit for {category}")
                if not math.isfinite(factor) or factor < 0:
                    raise ValueError(f"Invalid factor for {category}/{unit}: {factor}")
        return v

    @field_validator("averages")
    @classmethod
    def averages_known_and_finite(cls, v: dict[str, float]) -> dict[str, float]:
        for category, average in v.items():
            if not ActivityCategory.is_known(category):
                raise ValueError(f"Unknown activity type: {category}")
            if not math.isfinite(average) or average < 0:
                raise ValueError(f"Invalid average for {category}: {average}")
        return v
