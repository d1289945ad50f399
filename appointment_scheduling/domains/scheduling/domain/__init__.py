# ============================================================================
# SCOPE: DOMAIN LAYER (Scheduling)
# Description: Domain layer exports.
# ============================================================================
"""Domain Layer - Scheduling.

Time spans, appointments, validation candidates and the conflict scanners.
Everything here is pure and synchronous.
"""

from .candidate import Candidate, CandidateKind, Creation, Modification
from .entities import Appointment, AppointmentDocument, is_same
from .services import Scanner, no_conflicts_create, no_conflicts_modify, scanner_for
from .value_objects import TimeSpan, conflicts

__all__ = [
    # Value objects
    "TimeSpan",
    "conflicts",
    # Entities
    "Appointment",
    "AppointmentDocument",
    "is_same",
    # Candidates
    "Candidate",
    "CandidateKind",
    "Creation",
    "Modification",
    # Scanners
    "Scanner",
    "no_conflicts_create",
    "no_conflicts_modify",
    "scanner_for",
]
