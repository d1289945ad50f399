# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Data Transfer Objects for validation, booking and rescheduling.
# ============================================================================
"""Scheduling DTOs.

Verdicts returned by the validation engine and the result objects of the
booking, rescheduling and listing use cases.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ...domain.entities import Appointment

INITIATOR_CONFLICT_REASON = "Appointment time conflicts with your existing appointment."
APPOINTEE_CONFLICT_REASON = "Appointment time conflicts with the appointee's existing appointment."


class PartyRole(str, Enum):
    """Role a party plays in the appointment under validation."""

    INITIATOR = "initiator"
    APPOINTEE = "appointee"

    @property
    def conflict_reason(self) -> str:
        if self is PartyRole.INITIATOR:
            return INITIATOR_CONFLICT_REASON
        return APPOINTEE_CONFLICT_REASON


# =============================================================================
# Verdict
# =============================================================================


@dataclass(frozen=True)
class Verdict:
    """Outcome of a validation run.

    ``reason`` is empty on success and names the conflicting schedule otherwise.
    """

    success: bool
    reason: str = ""

    @classmethod
    def ok(cls) -> "Verdict":
        return cls(success=True, reason="")

    @classmethod
    def conflict(cls, role: PartyRole) -> "Verdict":
        return cls(success=False, reason=role.conflict_reason)

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "reason": self.reason}


# =============================================================================
# Use case results
# =============================================================================


@dataclass
class BookAppointmentResult:
    """Result for book appointment operation."""

    success: bool
    reason: str = ""
    appointment: Appointment | None = None

    @classmethod
    def from_verdict(cls, verdict: Verdict, appointment: Appointment) -> "BookAppointmentResult":
        return cls(
            success=verdict.success,
            reason=verdict.reason,
            appointment=appointment if verdict.success else None,
        )


@dataclass
class RescheduleAppointmentResult:
    """Result for reschedule appointment operation."""

    success: bool
    reason: str = ""
    appointment: Appointment | None = None
    replaced: dict[str, int] = field(default_factory=dict)


@dataclass
class GetPartyAppointmentsResult:
    """Result for listing a party's appointments."""

    party_id: str
    appointments: list[Appointment] = field(default_factory=list)
