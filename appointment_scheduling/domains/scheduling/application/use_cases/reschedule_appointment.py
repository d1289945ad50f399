# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for rescheduling an appointment.
# ============================================================================
"""Reschedule Appointment Use Case.

Validates the change of an existing appointment and, when the new time is free
for both parties, swaps the original for the modified appointment in both
schedules.
"""

import logging
from typing import TYPE_CHECKING

from ..dto.validation_dtos import RescheduleAppointmentResult
from .validate_appointment import ValidateAppointmentUseCase

if TYPE_CHECKING:
    from ...domain.candidate import Modification
    from ..ports import AppointmentRepositoryPort

logger = logging.getLogger(__name__)


class RescheduleAppointmentUseCase:
    """Use case for rescheduling an appointment."""

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

    async def execute(self, modification: "Modification") -> RescheduleAppointmentResult:
        """Execute the reschedule appointment use case.

        A modification never changes its parties, so the schedules checked and
        updated are those of the original initiator and appointee.

        Args:
            modification: Original appointment and its modified version.

        Returns:
            RescheduleAppointmentResult with the modified appointment or the
            conflict reason.
        """
        original = modification.original
        modified = modification.modified
        logger.info(
            f"Rescheduling appointment {original.initiator} -> {original.appointee} "
            f"from {original.start_time} to {modified.start_time}"
        )

        verdict = await self._validator.validate_modification(modification, original.initiator, original.appointee)
        if not verdict.success:
            return RescheduleAppointmentResult(success=False, reason=verdict.reason)

        replaced: dict[str, int] = {}
        for party_id in dict.fromkeys((original.initiator, original.appointee)):
            replaced[party_id] = await self._repository.replace_appointment(party_id, original, modified)

        logger.info(f"Appointment rescheduled to {modified.start_time}")
        return RescheduleAppointmentResult(success=True, appointment=modified, replaced=replaced)
