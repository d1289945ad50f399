# ============================================================================
# SCOPE: DOMAIN LAYER (Scheduling)
# Description: Conflict scanners over a party's existing appointments.
# ============================================================================
"""Conflict Scanners.

Pure functions that check a candidate against one party's existing
appointments. They hold no state and never touch the repository.
"""

from collections.abc import Callable, Iterable
from typing import Any

from ..candidate import Candidate, Creation, Modification
from ..entities.appointment import Appointment, is_same
from ..value_objects.time_span import conflicts

Scanner = Callable[[Any, Iterable[Appointment]], bool]


def no_conflicts_create(candidate: Appointment | Creation, existing: Iterable[Appointment]) -> bool:
    """Check a new appointment against every existing one.

    Accepts the appointment itself or its Creation wrapper.

    Returns:
        True if no existing appointment conflicts with ``candidate``.
    """
    if isinstance(candidate, Creation):
        candidate = candidate.appointment
    candidate_span = candidate.span
    return not any(conflicts(appointment.span, candidate_span) for appointment in existing)


def no_conflicts_modify(modification: Modification, existing: Iterable[Appointment]) -> bool:
    """Check a modified appointment against every existing one but the original.

    Every record that identity-matches ``modification.original`` is skipped,
    so the appointment being replaced never conflicts with its new version.
    Uniqueness of that match is not checked here.

    Returns:
        True if no remaining appointment conflicts with ``modification.modified``.
    """
    modified_span = modification.modified.span
    for appointment in existing:
        if is_same(appointment, modification.original):
            continue
        if conflicts(appointment.span, modified_span):
            return False
    return True


def scanner_for(candidate: Candidate) -> Scanner:
    """Pick the scanner matching the candidate variant.

    The returned callable takes the candidate itself and a list of existing
    appointments.
    """
    if isinstance(candidate, Modification):
        return no_conflicts_modify
    if isinstance(candidate, Creation):
        return no_conflicts_create
    raise TypeError(f"Unsupported candidate type: {type(candidate).__name__}")
