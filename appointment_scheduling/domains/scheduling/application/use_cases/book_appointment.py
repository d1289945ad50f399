# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for booking a new appointment.
# ============================================================================
"""Book Appointment Use Case.

Validates a new appointment against both parties' schedules and, when it is
free of conflicts, stores it in both schedules.
"""

import logging
from typing import TYPE_CHECKING

from ..dto.validation_dtos import BookAppointmentResult
from .validate_appointment import ValidateAppointmentUseCase

if TYPE_CHECKING:
    from ...domain.entities import Appointment
    from ..ports import AppointmentRepositoryPort

logger = logging.getLogger(__name__)


class BookAppointmentUseCase:
    """Use case for booking a new appointment."""

    def __init__(
        self,
        repository: "AppointmentRepositoryPort",
        validator: ValidateAppointmentUseCase | None = None,
    ) -> None:
        """Initialize use case.

        Args:
            repository: Appointment store interface (DIP).
            validator: Validation use case; built over ``repository`` if omitted.
        """
        self._repository = repository
        self._validator = validator or ValidateAppointmentUseCase(repository)

    async def execute(self, appointment: "Appointment") -> BookAppointmentResult:
        """Execute the book appointment use case.

        Args:
            appointment: Appointment to book. Its initiator and appointee are
                the parties whose schedules are checked and updated.

        Returns:
            BookAppointmentResult with the stored appointment or the conflict reason.
        """
        logger.info(f"Booking appointment {appointment.initiator} -> {appointment.appointee} at {appointment.start_time}")

        verdict = await self._validator.validate_creation(appointment, appointment.initiator, appointment.appointee)
        if not verdict.success:
            return BookAppointmentResult.from_verdict(verdict, appointment)

        for party_id in dict.fromkeys((appointment.initiator, appointment.appointee)):
            await self._repository.add_appointment(party_id, appointment)

        logger.info(f"Appointment booked for {appointment.initiator} and {appointment.appointee}")
        return BookAppointmentResult.from_verdict(verdict, appointment)
