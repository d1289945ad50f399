# ============================================================================
# Tests for RedisAppointmentRepository
# ============================================================================
"""Unit tests for the Redis appointment store.

Uses the dict-backed ``mock_redis`` client from the shared fixtures.
"""

import json
from datetime import datetime
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from appointment_scheduling.config.settings import Settings
from appointment_scheduling.core.domain import RepositoryFailureException
from appointment_scheduling.domains.scheduling.domain import Appointment, AppointmentDocument
from appointment_scheduling.domains.scheduling.infrastructure import RedisAppointmentRepository


@pytest.fixture
def repository(mock_redis) -> RedisAppointmentRepository:
    return RedisAppointmentRepository(mock_redis, prefix="appointments")


class TestReadingDocuments:
    """Tests for get_appointments."""

    @pytest.mark.asyncio
    async def test_missing_key_returns_none(self, repository, mock_redis) -> None:
        assert await repository.get_appointments("u1") is None
        mock_redis.get.assert_awaited_once_with("appointments:u1")

    @pytest.mark.asyncio
    async def test_decodes_stored_document(self, repository, redis_store, make_appointment) -> None:
        redis_store["appointments:u1"] = json.dumps(
            {
                "party_id": "u1",
                "appointments": [
                    {
                        "initiator": "u1",
                        "appointee": "u2",
                        "startTime": "2024-05-01T10:00:00Z",
                        "endTime": "2024-05-01T11:00:00Z",
                    }
                ],
            }
        )

        document = await repository.get_appointments("u1")

        assert document == AppointmentDocument("u1", [make_appointment("u1", "u2", 10, 11)])

    @pytest.mark.asyncio
    async def test_redis_error_becomes_repository_failure(self, repository, mock_redis) -> None:
        error = RedisConnectionError("connection refused")
        mock_redis.get.side_effect = error

        with pytest.raises(RepositoryFailureException) as exc_info:
            await repository.get_appointments("u1")

        assert exc_info.value.operation == "fetch appointments"
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_malformed_document_becomes_repository_failure(self, repository, redis_store) -> None:
        redis_store["appointments:u1"] = '{"party_id": "u1", "appointments": [{"initiator": "u1"}]}'

        with pytest.raises(RepositoryFailureException) as exc_info:
            await repository.get_appointments("u1")

        assert exc_info.value.operation == "decode appointments"

    @pytest.mark.asyncio
    async def test_instant_without_offset_becomes_repository_failure(self, repository, redis_store) -> None:
        redis_store["appointments:u1"] = json.dumps(
            {
                "party_id": "u1",
                "appointments": [
                    {
                        "initiator": "u1",
                        "appointee": "u2",
                        "startTime": "2024-05-01T10:00:00",
                        "endTime": "2024-05-01T11:00:00",
                    }
                ],
            }
        )

        with pytest.raises(RepositoryFailureException) as exc_info:
            await repository.get_appointments("u1")

        assert exc_info.value.operation == "decode appointments"

    @pytest.mark.asyncio
    async def test_undecodable_bytes_become_repository_failure(self, repository, redis_store) -> None:
        redis_store["appointments:u1"] = b"\xff\xfe"

        with pytest.raises(RepositoryFailureException) as exc_info:
            await repository.get_appointments("u1")

        assert exc_info.value.operation == "decode appointments"
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_client_decode_error_fails_fetch(self, repository, mock_redis, make_appointment) -> None:
        """A client created with decode_responses=True fails inside get()."""
        mock_redis.get.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

        with pytest.raises(RepositoryFailureException) as exc_info:
            await repository.add_appointment("u1", make_appointment("u1", "u2", 10, 11))

        assert exc_info.value.operation == "fetch appointments"
        mock_redis.set.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inverted_stored_span_becomes_repository_failure(self, repository, redis_store) -> None:
        redis_store["appointments:u1"] = json.dumps(
            {
                "party_id": "u1",
                "appointments": [
                    {
                        "initiator": "u1",
                        "appointee": "u2",
                        "startTime": "2024-05-01T11:00:00Z",
                        "endTime": "2024-05-01T10:00:00Z",
                    }
                ],
            }
        )

        with pytest.raises(RepositoryFailureException):
            await repository.get_appointments("u1")


class TestWritingDocuments:
    """Tests for add_appointment and replace_appointment."""

    @pytest.mark.asyncio
    async def test_add_creates_document(self, repository, redis_store, make_appointment) -> None:
        await repository.add_appointment("u1", make_appointment("u1", "u2", 10, 11))

        stored = json.loads(redis_store["appointments:u1"])
        assert stored["party_id"] == "u1"
        assert stored["appointments"] == [
            {
                "initiator": "u1",
                "appointee": "u2",
                "startTime": "2024-05-01T10:00:00Z",
                "endTime": "2024-05-01T11:00:00Z",
            }
        ]

    @pytest.mark.asyncio
    async def test_add_appends_to_existing_document(self, repository, make_appointment) -> None:
        first = make_appointment("u1", "u2", 10, 11)
        second = make_appointment("u3", "u1", 12, 13)

        await repository.add_appointment("u1", first)
        await repository.add_appointment("u1", second)

        document = await repository.get_appointments("u1")
        assert document.appointments == [first, second]

    @pytest.mark.asyncio
    async def test_replace_swaps_original(self, repository, make_appointment) -> None:
        original = make_appointment("u1", "u2", 10, 11)
        modified = make_appointment("u1", "u2", 14, 15)
        await repository.add_appointment("u1", original)

        replaced = await repository.replace_appointment("u1", original, modified)

        assert replaced == 1
        document = await repository.get_appointments("u1")
        assert document.appointments == [modified]

    @pytest.mark.asyncio
    async def test_replace_without_document_stores_modified(self, repository, make_appointment) -> None:
        modified = make_appointment("u1", "u2", 14, 15)

        replaced = await repository.replace_appointment("u2", make_appointment("u1", "u2", 10, 11), modified)

        assert replaced == 0
        document = await repository.get_appointments("u2")
        assert document.appointments == [modified]

    @pytest.mark.asyncio
    async def test_save_error_becomes_repository_failure(self, repository, mock_redis, make_appointment) -> None:
        mock_redis.set.side_effect = RedisConnectionError("connection reset")

        with pytest.raises(RepositoryFailureException) as exc_info:
            await repository.add_appointment("u1", make_appointment("u1", "u2", 10, 11))

        assert exc_info.value.operation == "save appointments"

    @pytest.mark.asyncio
    async def test_naive_appointment_is_not_written(self, repository, redis_store) -> None:
        naive = Appointment("u1", "u2", datetime(2024, 5, 1, 10), datetime(2024, 5, 1, 11))

        with pytest.raises(RepositoryFailureException) as exc_info:
            await repository.add_appointment("u1", naive)

        assert exc_info.value.operation == "save appointments"
        assert "appointments:u1" not in redis_store


class TestConnection:
    """Tests for connection helpers."""

    @pytest.mark.asyncio
    async def test_ping(self, repository) -> None:
        assert await repository.ping() is True

    @pytest.mark.asyncio
    async def test_ping_failure_returns_false(self, repository, mock_redis) -> None:
        mock_redis.ping = AsyncMock(side_effect=RedisConnectionError("down"))
        assert await repository.ping() is False

    @pytest.mark.asyncio
    async def test_close(self, repository, mock_redis) -> None:
        await repository.close()
        mock_redis.aclose.assert_awaited_once()

    def test_from_settings_uses_prefix(self) -> None:
        settings = Settings(APPOINTMENTS_KEY_PREFIX="sched", REDIS_HOST="redis.internal")
        repository = RedisAppointmentRepository.from_settings(settings)
        assert repository._get_key("u1") == "sched:u1"

    def test_empty_prefix_uses_bare_party_id(self, mock_redis) -> None:
        assert RedisAppointmentRepository(mock_redis, prefix="")._get_key("u1") == "u1"
