"""Carbon footprint tracking: activity emissions and footprint aggregation."""

__version__ = "0.1.0"
