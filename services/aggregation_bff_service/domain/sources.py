"""Source identifiers, request descriptors and outcomes.

A ``SourceRequest`` describes one outbound call for one incoming
aggregation request. Its outcome is a ``SourceResult``: ``Result.ok``
carrying the decoded JSON payload, or ``Result.err`` carrying the
upstream error message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fincloud_service_libs import Result

SourceResult = Result[Any, str]


class SourceName(str, Enum):
    """Symbolic names of the downstream data sources, in attempt order."""

    MONGODB = "mongodb"
    AZURESQL = "azuresql"
    USER_SERVICE = "userService"
    TRANSACTION_SERVICE = "transactionService"


@dataclass(frozen=True)
class SourceRequest:
    name: SourceName
    url: str
    timeout_seconds: float
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SourceOutcome:
    """Settled result of one SourceRequest."""

    name: SourceName
    result: SourceResult

    @property
    def available(self) -> bool:
        return self.result.is_ok
