"""Configuration utilities for FinCloud services."""

from .secure_base import SecureServiceSettings

__all__ = ["SecureServiceSettings"]
