"""
Factory functions that raise FinCloudError with a populated ErrorDetail.

Each factory is typed ``NoReturn`` so call sites read as control flow.
"""

from __future__ import annotations

from typing import Any, NoReturn
from uuid import UUID

from fincloud_common.error_enums import ErrorCode

from fincloud_service_libs.error_handling.error_detail_factory import (
    create_error_detail_with_context,
)
from fincloud_service_libs.error_handling.fincloud_error import FinCloudError


def raise_missing_required_field(
    service: str,
    operation: str,
    field_name: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise a MISSING_REQUIRED_FIELD error for an absent request parameter."""
    raise FinCloudError(
        create_error_detail_with_context(
            error_code=ErrorCode.MISSING_REQUIRED_FIELD,
            message=f"Required field '{field_name}' is missing",
            service=service,
            operation=operation,
            correlation_id=correlation_id,
            details={"field_name": field_name, **additional_context},
        )
    )


def raise_processing_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise a PROCESSING_ERROR for an unexpected internal failure."""
    raise FinCloudError(
        create_error_detail_with_context(
            error_code=ErrorCode.PROCESSING_ERROR,
            message=message,
            service=service,
            operation=operation,
            correlation_id=correlation_id,
            details=additional_context,
        )
    )
