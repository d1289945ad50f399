"""
Shared utilities module

Domain-agnostic helpers used across the service.
"""

from .logger import (
    ContextLogger,
    configure_logging,
    get_api_logger,
    get_repository_logger,
    get_service_logger,
)

__all__ = [
    "ContextLogger",
    "configure_logging",
    "get_api_logger",
    "get_service_logger",
    "get_repository_logger",
]
