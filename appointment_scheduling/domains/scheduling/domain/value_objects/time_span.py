# ============================================================================
# SCOPE: DOMAIN LAYER (Scheduling)
# Description: Time span value object and the overlap predicate.
# ============================================================================
"""Time Span Value Object.

A span of time between two instants, and the rule that decides whether two
spans double-book the same party.
"""

from dataclasses import dataclass
from datetime import datetime

from appointment_scheduling.core.domain import ValidationException, ValueObject


@dataclass(frozen=True)
class TimeSpan(ValueObject):
    """Span of time from ``start`` to ``end``.

    Instants are compared exactly; there is no tolerance window.
    """

    start: datetime
    end: datetime

    def _validate(self) -> None:
        if not isinstance(self.start, datetime) or not isinstance(self.end, datetime):
            raise ValidationException("Time span bounds must be datetimes", field="start")
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise ValidationException(
                "Time span cannot mix naive and timezone-aware instants",
                details={"start": self.start.isoformat(), "end": self.end.isoformat()},
            )
        if self.start >= self.end:
            raise ValidationException(
                "Time span must start before it ends",
                field="end",
                details={"start": self.start.isoformat(), "end": self.end.isoformat()},
            )

    def __str__(self) -> str:
        return f"{self.start.isoformat()} - {self.end.isoformat()}"


def conflicts(first: TimeSpan, second: TimeSpan) -> bool:
    """Decide whether two time spans conflict.

    Two spans conflict when any of these holds:
        1. ``second`` ends strictly inside ``first``.
        2. ``second`` starts strictly inside ``first``.
        3. Both start at the same instant.
        4. Both end at the same instant.

    Spans that only touch (``first.end == second.start``) do not conflict, so
    back-to-back appointments are allowed. A ``second`` span that strictly
    encloses ``first`` satisfies none of the conditions.

    Args:
        first: Usually the existing appointment's span.
        second: Usually the candidate appointment's span.

    Returns:
        True if the spans conflict.

    Raises:
        ValidationException: If one span is timezone-aware and the other is not.
    """
    if (first.start.tzinfo is None) != (second.start.tzinfo is None):
        raise ValidationException(
            "Cannot compare timezone-aware and naive time spans",
            details={"first": str(first), "second": str(second)},
        )

    ends_inside = first.start < second.end < first.end
    starts_inside = first.start < second.start < first.end
    same_start = first.start == second.start
    same_end = first.end == second.end

    return ends_inside or starts_inside or same_start or same_end
