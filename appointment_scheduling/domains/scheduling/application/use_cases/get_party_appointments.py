# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for listing a party's appointments.
# ============================================================================
"""Get Party Appointments Use Case."""

import logging
from typing import TYPE_CHECKING

from ..dto.validation_dtos import GetPartyAppointmentsResult

if TYPE_CHECKING:
    from ..ports import AppointmentReader

logger = logging.getLogger(__name__)


class GetPartyAppointmentsUseCase:
    """Use case for listing every appointment a party takes part in."""

    def __init__(self, repository: "AppointmentReader") -> None:
        self._repository = repository

    async def execute(self, party_id: str) -> GetPartyAppointmentsResult:
        """List a party's appointments ordered by start time.

        A party without a record gets an empty list.
        """
        document = await self._repository.get_appointments(party_id)
        if document is None:
            logger.debug(f"No appointment record for {party_id}")
            return GetPartyAppointmentsResult(party_id=party_id)

        return GetPartyAppointmentsResult(
            party_id=party_id,
            appointments=document.sorted_by_start(),
        )
