"""Aggregation BFF clients module.

Contains the HTTP client used to reach downstream data sources.
"""

from services.aggregation_bff_service.clients.source_client import HttpSourceClient

__all__ = ["HttpSourceClient"]
