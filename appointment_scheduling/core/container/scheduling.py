# ============================================================================
# SCOPE: DOMAIN
# Description: Container for Scheduling domain dependencies.
#              Provides factories for use cases and the appointment store.
# ============================================================================
"""
Scheduling Domain Container.

Provides dependency injection for the Scheduling domain. The appointment
store is created once per application; use cases are cheap and stateless and
are created per request.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from appointment_scheduling.config.settings import Settings, get_settings

if TYPE_CHECKING:
    from appointment_scheduling.domains.scheduling.application import (
        AppointmentRepositoryPort,
        BookAppointmentUseCase,
        GetPartyAppointmentsUseCase,
        RescheduleAppointmentUseCase,
        ValidateAppointmentUseCase,
    )

logger = logging.getLogger(__name__)


class SchedulingContainer:
    """Container for Scheduling domain dependencies.

    Single Responsibility: Wire scheduling dependencies.
    """

    def __init__(self, repository: AppointmentRepositoryPort, settings: Settings | None = None):
        """Initialize container.

        Args:
            repository: Appointment store shared by every use case.
            settings: Application settings (defaults to the cached instance).
        """
        self._repository = repository
        self._settings = settings or get_settings()
        logger.debug("SchedulingContainer initialized")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SchedulingContainer:
        """Build a container backed by the Redis appointment store."""
        from appointment_scheduling.domains.scheduling.infrastructure import RedisAppointmentRepository

        settings = settings or get_settings()
        return cls(RedisAppointmentRepository.from_settings(settings), settings)

    @property
    def repository(self) -> AppointmentRepositoryPort:
        return self._repository

    def create_validate_appointment_use_case(self) -> ValidateAppointmentUseCase:
        from appointment_scheduling.domains.scheduling.application import ValidateAppointmentUseCase

        return ValidateAppointmentUseCase(
            self._repository,
            concurrent_lookups=self._settings.SCHEDULING_CONCURRENT_LOOKUPS,
        )

    def create_book_appointment_use_case(self) -> BookAppointmentUseCase:
        from appointment_scheduling.domains.scheduling.application import BookAppointmentUseCase

        return BookAppointmentUseCase(self._repository, self.create_validate_appointment_use_case())

    def create_reschedule_appointment_use_case(self) -> RescheduleAppointmentUseCase:
        from appointment_scheduling.domains.scheduling.application import RescheduleAppointmentUseCase

        return RescheduleAppointmentUseCase(self._repository, self.create_validate_appointment_use_case())

    def create_get_party_appointments_use_case(self) -> GetPartyAppointmentsUseCase:
        from appointment_scheduling.domains.scheduling.application import GetPartyAppointmentsUseCase

        return GetPartyAppointmentsUseCase(self._repository)

    async def close(self) -> None:
        """Release the appointment store's connections, if it holds any."""
        close = getattr(self._repository, "close", None)
        if close is not None:
            await close()
