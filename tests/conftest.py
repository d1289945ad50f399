"""
Shared pytest fixtures for all tests.

This module provides appointment factories, mock appointment stores and a
dict-backed Redis client double.
"""

import os
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, Mock

import pytest
from redis.asyncio import Redis

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["TESTING"] = "true"

from appointment_scheduling.domains.scheduling.domain import Appointment, AppointmentDocument  # noqa: E402

BASE_DAY = datetime(2024, 5, 1, tzinfo=timezone.utc)


# ============================================================================
# APPOINTMENT FIXTURES
# ============================================================================


@pytest.fixture
def at() -> Callable[[float], datetime]:
    """Return a helper turning an hour of the test day into an instant."""

    def _at(hour: float) -> datetime:
        return BASE_DAY + timedelta(hours=hour)

    return _at


@pytest.fixture
def make_appointment(at) -> Callable[..., Appointment]:
    """Return a factory for appointments on the test day.

    Usage:
        make_appointment("u1", "u2", 10, 11.5)  # 10:00 - 11:30
    """

    def _make(initiator: str, appointee: str, start: float, end: float) -> Appointment:
        return Appointment(initiator=initiator, appointee=appointee, start_time=at(start), end_time=at(end))

    return _make


# ============================================================================
# REPOSITORY FIXTURES
# ============================================================================


@pytest.fixture
def schedules() -> dict[str, list[Appointment]]:
    """Existing appointments per party; a missing party has no record."""
    return {}


@pytest.fixture
def mock_repository(schedules) -> AsyncMock:
    """Create a mock appointment repository reading from ``schedules``."""

    async def get_appointments(party_id: str) -> AppointmentDocument | None:
        if party_id not in schedules:
            return None
        return AppointmentDocument(party_id=party_id, appointments=list(schedules[party_id]))

    repository = AsyncMock()
    repository.get_appointments = AsyncMock(side_effect=get_appointments)
    repository.add_appointment = AsyncMock(return_value=None)
    repository.replace_appointment = AsyncMock(return_value=1)
    return repository


# ============================================================================
# REDIS FIXTURES
# ============================================================================


@pytest.fixture
def redis_store() -> dict[str, str | bytes]:
    """Backing storage of the mock Redis client."""
    return {}


@pytest.fixture
def mock_redis(redis_store) -> Mock:
    """Create a mock Redis client that keeps values in ``redis_store``."""

    async def get(key: str) -> str | None:
        return redis_store.get(key)

    async def set_(key: str, value: str) -> bool:
        redis_store[key] = value
        return True

    async def delete(*keys: str) -> int:
        return sum(1 for key in keys if redis_store.pop(key, None) is not None)

    mock = Mock(spec=Redis)
    mock.get = AsyncMock(side_effect=get)
    mock.set = AsyncMock(side_effect=set_)
    mock.delete = AsyncMock(side_effect=delete)
    mock.ping = AsyncMock(return_value=True)
    mock.aclose = AsyncMock(return_value=None)
    return mock
