# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: DTO exports.
# ============================================================================
"""Data Transfer Objects for the scheduling domain."""

from .validation_dtos import (
    APPOINTEE_CONFLICT_REASON,
    INITIATOR_CONFLICT_REASON,
    BookAppointmentResult,
    GetPartyAppointmentsResult,
    PartyRole,
    RescheduleAppointmentResult,
    Verdict,
)

__all__ = [
    "INITIATOR_CONFLICT_REASON",
    "APPOINTEE_CONFLICT_REASON",
    "PartyRole",
    "Verdict",
    "BookAppointmentResult",
    "RescheduleAppointmentResult",
    "GetPartyAppointmentsResult",
]
