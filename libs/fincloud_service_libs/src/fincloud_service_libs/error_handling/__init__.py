"""Structured error handling for FinCloud services."""

from fincloud_service_libs.error_handling.error_detail_factory import (
    create_error_detail_with_context,
)
from fincloud_service_libs.error_handling.factories import (
    raise_missing_required_field,
    raise_processing_error,
)
from fincloud_service_libs.error_handling.fincloud_error import FinCloudError

__all__ = [
    "FinCloudError",
    "create_error_detail_with_context",
    "raise_missing_required_field",
    "raise_processing_error",
]
