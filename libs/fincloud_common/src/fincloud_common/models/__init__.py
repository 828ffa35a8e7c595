from fincloud_common.models.error_models import ErrorDetail

__all__ = ["ErrorDetail"]
