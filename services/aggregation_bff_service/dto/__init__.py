"""Aggregation BFF DTO module.

Contains Data Transfer Objects for aggregation API responses.
"""

from services.aggregation_bff_service.dto.aggregation_v1 import (
    DataAggregationResponseV1,
    UserAggregationResponseV1,
)

__all__ = ["DataAggregationResponseV1", "UserAggregationResponseV1"]
