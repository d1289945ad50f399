# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Application layer exports.
# ============================================================================
"""Application Layer - Scheduling.

Contains use cases, ports (interfaces), and DTOs for the scheduling domain.
"""

from .dto import (
    APPOINTEE_CONFLICT_REASON,
    INITIATOR_CONFLICT_REASON,
    BookAppointmentResult,
    GetPartyAppointmentsResult,
    PartyRole,
    RescheduleAppointmentResult,
    Verdict,
)
from .ports import AppointmentReader, AppointmentRepositoryPort
from .use_cases import (
    BookAppointmentUseCase,
    GetPartyAppointmentsUseCase,
    RescheduleAppointmentUseCase,
    ValidateAppointmentUseCase,
    validate,
    validate_creation,
    validate_modification,
)

__all__ = [
    # Ports
    "AppointmentReader",
    "AppointmentRepositoryPort",
    # DTOs
    "INITIATOR_CONFLICT_REASON",
    "APPOINTEE_CONFLICT_REASON",
    "PartyRole",
    "Verdict",
    "BookAppointmentResult",
    "RescheduleAppointmentResult",
    "GetPartyAppointmentsResult",
    # Use Cases
    "ValidateAppointmentUseCase",
    "BookAppointmentUseCase",
    "RescheduleAppointmentUseCase",
    "GetPartyAppointmentsUseCase",
    # Entry points
    "validate",
    "validate_creation",
    "validate_modification",
]
