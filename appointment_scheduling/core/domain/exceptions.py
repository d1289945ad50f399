"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They should be caught and translated to appropriate HTTP responses in the API layer.

Note that a scheduling conflict is NOT an exception: conflicts are regular
business outcomes and are reported through a Verdict.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "VALIDATION_ERROR")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Use for malformed input: inverted time spans, empty party identities, etc.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class BusinessRuleViolationException(DomainException):
    """
    Raised when a business rule is violated.

    Use for invariant violations, precondition failures, etc.
    """

    def __init__(self, rule: str, message: str | None = None, details: dict[str, Any] | None = None):
        self.rule = rule
        msg = message or f"Business rule violated: {rule}"
        details = details or {}
        details["rule"] = rule
        super().__init__(msg, "BUSINESS_RULE_VIOLATION", details)


class DuplicateAppointmentException(BusinessRuleViolationException):
    """Raised when a party's schedule holds the appointment being modified more than once."""

    def __init__(self, party_id: str, matches: int):
        self.party_id = party_id
        self.matches = matches
        super().__init__(
            "unique_original_appointment",
            f"Appointment being modified appears {matches} times in the schedule of '{party_id}'",
            {"party_id": party_id, "matches": matches},
        )


class IntegrationException(DomainException):
    """Raised when an external integration fails."""

    def __init__(self, service: str, message: str, original_error: Exception | None = None):
        self.service = service
        self.original_error = original_error
        details: dict[str, Any] = {"service": service}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(message, "INTEGRATION_ERROR", details)


class RepositoryFailureException(IntegrationException):
    """Raised when the appointment store cannot produce a result.

    Never coerced into a Verdict: callers must see it as an error.
    """

    def __init__(self, party_id: str, operation: str, original_error: Exception | None = None):
        self.party_id = party_id
        self.operation = operation
        super().__init__(
            "appointment_repository",
            f"Appointment repository failed to {operation} for '{party_id}'",
            original_error,
        )
        self.details["party_id"] = party_id
        self.details["operation"] = operation
