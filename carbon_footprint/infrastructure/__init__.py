"""Infrastructure adapters: persistence, reference data, observability."""
