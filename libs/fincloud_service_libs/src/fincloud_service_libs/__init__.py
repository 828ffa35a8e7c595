"""FinCloud service libraries.

Shared runtime utilities for FinCloud services: structured logging,
settings base classes, structured error handling and the Result type.
"""

from fincloud_service_libs.result import Result

__all__ = ["Result"]
