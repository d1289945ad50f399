# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Scheduling)
# Description: Redis-backed appointment document store.
# ============================================================================
"""
Redis Appointment Repository

Stores one JSON document per party under ``{prefix}:{party_id}``:

    {"party_id": "u1", "appointments": [
        {"initiator": "u1", "appointee": "u2",
         "startTime": "2024-05-01T10:00:00+00:00", "endTime": "2024-05-01T11:00:00+00:00"}
    ]}

A missing key means the party has no record and is reported as None. Every
Redis or decoding failure, including an instant stored without a UTC offset,
is raised as RepositoryFailureException.
"""

import redis.asyncio as aioredis
from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, ValidationError
from redis.exceptions import RedisError

from appointment_scheduling.config.settings import Settings, get_settings
from appointment_scheduling.core.domain import DomainException, RepositoryFailureException
from appointment_scheduling.core.shared.logger import get_repository_logger

from ...domain.entities import Appointment, AppointmentDocument

logger = get_repository_logger("redis_appointments")


class StoredAppointment(BaseModel):
    """Wire form of an appointment inside a party document."""

    model_config = ConfigDict(populate_by_name=True)

    initiator: str
    appointee: str
    start_time: AwareDatetime = Field(alias="startTime")
    end_time: AwareDatetime = Field(alias="endTime")

    @classmethod
    def from_domain(cls, appointment: Appointment) -> "StoredAppointment":
        return cls(
            initiator=appointment.initiator,
            appointee=appointment.appointee,
            start_time=appointment.start_time,
            end_time=appointment.end_time,
        )

    def to_domain(self) -> Appointment:
        return Appointment(
            initiator=self.initiator,
            appointee=self.appointee,
            start_time=self.start_time,
            end_time=self.end_time,
        )


class StoredAppointmentDocument(BaseModel):
    """Wire form of a party document."""

    party_id: str
    appointments: list[StoredAppointment] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, document: AppointmentDocument) -> "StoredAppointmentDocument":
        return cls(
            party_id=document.party_id,
            appointments=[StoredAppointment.from_domain(a) for a in document.appointments],
        )

    def to_domain(self) -> AppointmentDocument:
        return AppointmentDocument(
            party_id=self.party_id,
            appointments=[stored.to_domain() for stored in self.appointments],
        )


class RedisAppointmentRepository:
    """
    Appointment repository over redis.asyncio.

    Usage:
        repo = RedisAppointmentRepository.from_settings(get_settings())
        document = await repo.get_appointments("u1")
        await repo.close()
    """

    def __init__(self, client: aioredis.Redis, prefix: str = "appointments"):
        """
        Args:
            client: Redis client created with ``decode_responses=True``.
            prefix: Key prefix for party documents.
        """
        self._client = client
        self.prefix = prefix

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RedisAppointmentRepository":
        settings = settings or get_settings()
        client = aioredis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
            decode_responses=True,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
            socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT,
        )
        return cls(client, prefix=settings.APPOINTMENTS_KEY_PREFIX)

    def _get_key(self, party_id: str) -> str:
        return f"{self.prefix}:{party_id}" if self.prefix else party_id

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    async def get_appointments(self, party_id: str) -> AppointmentDocument | None:
        """Get a party's appointment document, or None if there is none."""
        key = self._get_key(party_id)
        try:
            data = await self._client.get(key)
        except (RedisError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {key} from Redis: {e}", party_id=party_id)
            raise RepositoryFailureException(party_id, "fetch appointments", e) from e

        if data is None:
            logger.debug(f"Key {key} not found in Redis", party_id=party_id)
            return None

        return self._decode(party_id, data)

    async def add_appointment(self, party_id: str, appointment: Appointment) -> None:
        """Append an appointment to a party's document, creating it if needed."""
        document = await self.get_appointments(party_id) or AppointmentDocument(party_id=party_id)
        document.add(appointment)
        await self._save(document)
        logger.info("Appointment stored", party_id=party_id, appointments=len(document))

    async def replace_appointment(self, party_id: str, original: Appointment, modified: Appointment) -> int:
        """Replace ``original`` with ``modified``; append it when ``original`` is absent."""
        document = await self.get_appointments(party_id) or AppointmentDocument(party_id=party_id)
        replaced = document.replace(original, modified)
        await self._save(document)
        logger.info("Appointment replaced", party_id=party_id, replaced=replaced)
        return replaced

    async def close(self) -> None:
        await self._client.aclose()
        logger.info("Redis connection closed")

    async def _save(self, document: AppointmentDocument) -> None:
        key = self._get_key(document.party_id)
        try:
            serialized = StoredAppointmentDocument.from_domain(document).model_dump_json(by_alias=True)
            await self._client.set(key, serialized)
        except (RedisError, ValidationError) as e:
            logger.error(f"Error saving {key} to Redis: {e}", party_id=document.party_id)
            raise RepositoryFailureException(document.party_id, "save appointments", e) from e

    def _decode(self, party_id: str, data: str | bytes) -> AppointmentDocument:
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            return StoredAppointmentDocument.model_validate_json(data).to_domain()
        except (UnicodeDecodeError, ValidationError, DomainException) as e:
            logger.error(f"Stored document for {party_id} is not valid: {e}", party_id=party_id)
            raise RepositoryFailureException(party_id, "decode appointments", e) from e
