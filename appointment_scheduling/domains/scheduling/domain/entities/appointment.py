# ============================================================================
# SCOPE: DOMAIN LAYER (Scheduling)
# Description: Appointment value object and the identity predicate.
# ============================================================================
"""Appointment Value Object.

An appointment between two parties. Appointments carry no identifier of their
own: two records denote the same appointment when initiator, appointee and
start instant all match.
"""

from dataclasses import dataclass
from datetime import datetime

from appointment_scheduling.core.domain import ValidationException, ValueObject

from ..value_objects.time_span import TimeSpan


@dataclass(frozen=True)
class Appointment(ValueObject):
    """Appointment requested by ``initiator`` with ``appointee``."""

    initiator: str
    appointee: str
    start_time: datetime
    end_time: datetime

    def _validate(self) -> None:
        for field_name in ("initiator", "appointee"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationException(f"Appointment {field_name} is required", field=field_name)
        # Builds the span once to enforce start < end
        TimeSpan(self.start_time, self.end_time)

    @property
    def span(self) -> TimeSpan:
        return TimeSpan(self.start_time, self.end_time)


def is_same(first: Appointment, second: Appointment) -> bool:
    """Tell whether two records denote the same appointment.

    Matches on initiator, appointee and start instant with exact equality.
    ``end_time`` is ignored, so a record whose duration changed is still the
    same appointment.
    """
    same_initiator = first.initiator == second.initiator
    same_appointee = first.appointee == second.appointee
    same_start = first.start_time == second.start_time

    return same_initiator and same_appointee and same_start
