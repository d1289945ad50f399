# ============================================================================
# Tests for the TimeSpan value object and the overlap predicate
# ============================================================================
"""Unit tests for TimeSpan and conflicts().

The existing span in every case is 10:00 - 12:00 on the test day.
"""

from datetime import datetime, timedelta

import pytest

from appointment_scheduling.core.domain import ValidationException
from appointment_scheduling.domains.scheduling.domain import TimeSpan, conflicts


@pytest.fixture
def span(at):
    def _span(start: float, end: float) -> TimeSpan:
        return TimeSpan(at(start), at(end))

    return _span


class TestConflicts:
    """Tests for the four overlap conditions."""

    @pytest.mark.parametrize(
        ("start", "end", "reason"),
        [
            (9, 11, "ends inside"),
            (11, 13, "starts inside"),
            (10, 11, "same start"),
            (11, 12, "same end"),
            (10, 12, "identical"),
            (10.5, 11.5, "contained"),
            (10, 14, "same start, longer"),
            (8, 12, "same end, earlier start"),
        ],
    )
    def test_overlapping_spans_conflict(self, span, start, end, reason) -> None:
        """Should report a conflict when any overlap condition holds."""
        assert conflicts(span(10, 12), span(start, end)) is True, reason

    @pytest.mark.parametrize(
        ("start", "end"),
        [
            (12, 13),
            (8, 10),
            (13, 14),
            (6, 7),
        ],
    )
    def test_disjoint_or_adjacent_spans_do_not_conflict(self, span, start, end) -> None:
        """Should allow spans that only touch or do not meet at all."""
        assert conflicts(span(10, 12), span(start, end)) is False

    def test_back_to_back_is_allowed_both_ways(self, span) -> None:
        """Should allow the next span to start exactly when the first ends."""
        assert conflicts(span(10, 11), span(11, 12)) is False
        assert conflicts(span(11, 12), span(10, 11)) is False

    def test_enclosing_second_span_matches_no_condition(self, span) -> None:
        """A second span strictly enclosing the first satisfies none of the conditions."""
        assert conflicts(span(10, 12), span(9, 13)) is False

    def test_enclosed_second_span_conflicts(self, span) -> None:
        """With the arguments swapped, the enclosed span starts inside the first."""
        assert conflicts(span(9, 13), span(10, 12)) is True

    def test_one_microsecond_overlap_conflicts(self, at) -> None:
        """Should compare instants exactly, without tolerance."""
        first = TimeSpan(at(10), at(11))
        second = TimeSpan(at(11) - timedelta(microseconds=1), at(12))
        assert conflicts(first, second) is True

    def test_naive_and_aware_spans_cannot_be_compared(self, span) -> None:
        """Should reject the comparison instead of failing inside the predicate."""
        naive = TimeSpan(datetime(2024, 5, 1, 10, 30), datetime(2024, 5, 1, 11, 30))
        with pytest.raises(ValidationException):
            conflicts(span(10, 12), naive)
        with pytest.raises(ValidationException):
            conflicts(naive, span(10, 12))

    def test_naive_spans_compare_with_each_other(self) -> None:
        first = TimeSpan(datetime(2024, 5, 1, 10), datetime(2024, 5, 1, 11))
        second = TimeSpan(datetime(2024, 5, 1, 10, 30), datetime(2024, 5, 1, 12))
        assert conflicts(first, second) is True


class TestTimeSpanValidation:
    """Tests for TimeSpan construction rules."""

    def test_rejects_empty_span(self, at) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TimeSpan(at(10), at(10))
        assert exc_info.value.field == "end"

    def test_rejects_inverted_span(self, at) -> None:
        with pytest.raises(ValidationException):
            TimeSpan(at(11), at(10))

    def test_rejects_mixed_naive_and_aware_instants(self, at) -> None:
        with pytest.raises(ValidationException):
            TimeSpan(datetime(2024, 5, 1, 10), at(11))

    def test_rejects_non_datetime_bounds(self, at) -> None:
        with pytest.raises(ValidationException):
            TimeSpan("2024-05-01T10:00:00Z", at(11))

    def test_accepts_naive_instants(self) -> None:
        span = TimeSpan(datetime(2024, 5, 1, 10), datetime(2024, 5, 1, 11))
        assert span.end - span.start == timedelta(hours=1)

    def test_is_immutable(self, span) -> None:
        value = span(10, 11)
        with pytest.raises(AttributeError):
            value.start = value.end  # type: ignore[misc]

    def test_str_shows_both_bounds(self, span) -> None:
        assert str(span(10, 11)) == "2024-05-01T10:00:00+00:00 - 2024-05-01T11:00:00+00:00"
