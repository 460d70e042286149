"""Built-in emission factor and average tables.

Factors are kg CO2 per unit. Replace them with a regional table via
EMISSION_FACTORS_PATH for production use.
"""

DEFAULT_EMISSION_FACTORS: dict[str, dict[str, float]] = {
    "transportation": {
        "km": 0.2,
        "mile": 0.32,
    },
    "energy": {
        "kwh": 0.5,
        "therm": 5.3,
    },
    "food": {
        "kg": 1.2,
    },
    "consumption": {
        "usd": 0.4,
        "item": 2.5,
    },
}

# Monthly kg CO2 per category, plus whole-footprint total
DEFAULT_AVERAGE_EMISSIONS: dict[str, float] = {
    "transportation": 25.0,
    "energy": 40.0,
    "food": 30.0,
    "consumption": 25.0,
    "total": 120.0,
}
