"""Aggregation BFF v1 DTOs.

Response envelopes for the aggregation endpoints. Field names are
snake_case in Python and camelCase on the wire, matching what the
front-ends already consume.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SourceErrorV1(CamelModel):
    """A failed source and its upstream error message."""

    source: str
    error: str


class SourceUnavailableV1(CamelModel):
    """Marker stored in place of a failed source's payload."""

    error: str
    available: bool = False


class AggregationSummaryV1(CamelModel):
    total_sources: int = Field(default=0, ge=0, description="Number of sources attempted")
    available_sources: int = Field(default=0, ge=0, description="Sources that returned data")
    errors: list[SourceErrorV1] = Field(default_factory=list)

    @model_validator(mode="after")
    def _available_within_total(self) -> AggregationSummaryV1:
        if self.available_sources > self.total_sources:
            raise ValueError("available_sources cannot exceed total_sources")
        return self


class DataAggregationResponseV1(CamelModel):
    """Envelope for GET /api/aggregation/data.

    ``sources`` maps each attempted source name to its payload, or to a
    SourceUnavailableV1 marker when the call failed.
    """

    success: bool = True
    timestamp: datetime
    sources: dict[str, Any] = Field(default_factory=dict)
    summary: AggregationSummaryV1 = Field(default_factory=AggregationSummaryV1)


class UserAggregatedDataV1(CamelModel):
    preferences: Any = None
    audit_logs: Any = None
    profile: Any = None
    transactions: Any = None


class UserAggregationResponseV1(CamelModel):
    """Envelope for GET /api/aggregation/user/{userId}."""

    success: bool = True
    user_id: str
    data: UserAggregatedDataV1 = Field(default_factory=UserAggregatedDataV1)
    errors: list[SourceErrorV1] = Field(default_factory=list)
    timestamp: datetime
