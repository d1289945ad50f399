# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use Cases exports.
# ============================================================================
"""Application Use Cases for the scheduling domain."""

from .book_appointment import BookAppointmentUseCase
from .get_party_appointments import GetPartyAppointmentsUseCase
from .reschedule_appointment import RescheduleAppointmentUseCase
from .validate_appointment import (
    ValidateAppointmentUseCase,
    validate,
    validate_creation,
    validate_modification,
)

__all__ = [
    "BookAppointmentUseCase",
    "GetPartyAppointmentsUseCase",
    "RescheduleAppointmentUseCase",
    "ValidateAppointmentUseCase",
    "validate",
    "validate_creation",
    "validate_modification",
]
