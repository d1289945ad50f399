# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Appointment repository port.
# ============================================================================
"""Appointment Repository Port.

Defines the interface the scheduling use cases need from the appointment
store. Validation only reads; booking and rescheduling also write.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities import Appointment, AppointmentDocument


@runtime_checkable
class AppointmentReader(Protocol):
    """Read side of the appointment store.

    Implementations: RedisAppointmentRepository
    """

    async def get_appointments(self, party_id: str) -> "AppointmentDocument | None":
        """Get every appointment a party takes part in.

        Args:
            party_id: Identity of the party (initiator or appointee).

        Returns:
            The party's document, or None if the party has no record at all.

        Raises:
            Exception: Any storage failure. Absence is never reported as an error.
        """
        ...


@runtime_checkable
class AppointmentRepositoryPort(AppointmentReader, Protocol):
    """Full appointment store interface used by booking and rescheduling."""

    async def add_appointment(self, party_id: str, appointment: "Appointment") -> None:
        """Append an appointment to a party's document, creating it if needed."""
        ...

    async def replace_appointment(
        self,
        party_id: str,
        original: "Appointment",
        modified: "Appointment",
    ) -> int:
        """Replace ``original`` with ``modified`` in a party's document.

        Returns:
            Number of records replaced (0 when ``modified`` was appended).
        """
        ...
