"""Aggregation BFF implementations: fan-out coordination and result merging."""
