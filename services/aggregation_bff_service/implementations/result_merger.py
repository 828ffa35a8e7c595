"""Merging of settled source outcomes into response envelopes.

Failures are converted to data here: a failed source keeps its slot in the
envelope with an error marker and is listed in ``errors`` in attempt order.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from services.aggregation_bff_service.domain.sources import SourceName, SourceOutcome
from services.aggregation_bff_service.dto.aggregation_v1 import (
    AggregationSummaryV1,
    DataAggregationResponseV1,
    SourceErrorV1,
    SourceUnavailableV1,
    UserAggregatedDataV1,
    UserAggregationResponseV1,
)

# Per-user view field for each source
USER_DATA_FIELDS: dict[SourceName, str] = {
    SourceName.MONGODB: "preferences",
    SourceName.AZURESQL: "audit_logs",
    SourceName.USER_SERVICE: "profile",
    SourceName.TRANSACTION_SERVICE: "transactions",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def collect_errors(outcomes: Sequence[SourceOutcome]) -> list[SourceErrorV1]:
    """List failed sources in attempt order."""
    return [
        SourceErrorV1(source=outcome.name.value, error=outcome.result.error)
        for outcome in outcomes
        if not outcome.available
    ]


def merge_data_aggregation(outcomes: Sequence[SourceOutcome]) -> DataAggregationResponseV1:
    """Build the generic aggregation envelope from settled outcomes."""
    sources: dict[str, Any] = {}
    for outcome in outcomes:
        if outcome.available:
            sources[outcome.name.value] = outcome.result.value
        else:
            sources[outcome.name.value] = SourceUnavailableV1(
                error=outcome.result.error
            ).model_dump()

    errors = collect_errors(outcomes)
    summary = AggregationSummaryV1(
        total_sources=len(outcomes),
        available_sources=len(outcomes) - len(errors),
        errors=errors,
    )
    return DataAggregationResponseV1(timestamp=_utcnow(), sources=sources, summary=summary)


def merge_user_aggregation(
    user_id: str, outcomes: Sequence[SourceOutcome]
) -> UserAggregationResponseV1:
    """Build the per-user envelope; failed sources leave their field as None."""
    data: dict[str, Any] = {}
    for outcome in outcomes:
        if outcome.available:
            data[USER_DATA_FIELDS[outcome.name]] = outcome.result.value

    return UserAggregationResponseV1(
        user_id=user_id,
        data=UserAggregatedDataV1(**data),
        errors=collect_errors(outcomes),
        timestamp=_utcnow(),
    )
