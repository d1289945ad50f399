# ============================================================================
# SCOPE: DOMAIN LAYER (Scheduling)
# Description: Candidate appointments submitted for validation.
# ============================================================================
"""Validation Candidates.

A candidate is either a new appointment (Creation) or a change to an existing
one (Modification). Each variant is checked by its own conflict scanner.
"""

from dataclasses import dataclass
from enum import Enum

from appointment_scheduling.core.domain import ValidationException

from .entities.appointment import Appointment


class CandidateKind(str, Enum):
    CREATION = "creation"
    MODIFICATION = "modification"


@dataclass(frozen=True)
class Creation:
    """A new appointment proposed for insertion."""

    appointment: Appointment

    kind = CandidateKind.CREATION

    @property
    def proposed(self) -> Appointment:
        return self.appointment


@dataclass(frozen=True)
class Modification:
    """A change of ``original`` into ``modified``.

    Only the time may change: both records must name the same initiator and
    appointee, since those are the schedules checked and rewritten.
    """

    original: Appointment
    modified: Appointment

    kind = CandidateKind.MODIFICATION

    def __post_init__(self) -> None:
        for field_name in ("initiator", "appointee"):
            before = getattr(self.original, field_name)
            after = getattr(self.modified, field_name)
            if before != after:
                raise ValidationException(
                    f"A modification cannot change the appointment {field_name}",
                    field=f"modified.{field_name}",
                    details={"original": before, "modified": after},
                )

    @property
    def proposed(self) -> Appointment:
        return self.modified


Candidate = Creation | Modification
