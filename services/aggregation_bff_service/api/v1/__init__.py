"""Aggregation BFF API v1 module.

Contains v1 routes for multi-source aggregation.
"""

from services.aggregation_bff_service.api.v1.aggregation_routes import router

__all__ = ["router"]
