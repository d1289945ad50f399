"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from appointment_scheduling.core.domain.exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateAppointmentException,
    IntegrationException,
    RepositoryFailureException,
    ValidationException,
)
from appointment_scheduling.core.domain.value_objects import ValueObject

__all__ = [
    # Value Objects
    "ValueObject",
    # Exceptions
    "DomainException",
    "ValidationException",
    "BusinessRuleViolationException",
    "DuplicateAppointmentException",
    "IntegrationException",
    "RepositoryFailureException",
]
