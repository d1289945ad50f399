# ============================================================================
# SCOPE: DOMAIN LAYER (Scheduling)
# Description: A party's schedule as stored in the appointment repository.
# ============================================================================
"""Appointment Document.

The per-party record kept by the appointment store. A party's list holds every
appointment where the party is initiator or appointee; the two roles are not
distinguished when scanning for conflicts.
"""

from dataclasses import dataclass, field

from .appointment import Appointment, is_same


@dataclass
class AppointmentDocument:
    """Schedule of a single party."""

    party_id: str
    appointments: list[Appointment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.appointments)

    def add(self, appointment: Appointment) -> None:
        self.appointments.append(appointment)

    def replace(self, original: Appointment, modified: Appointment) -> int:
        """Swap every record matching ``original`` for ``modified``.

        Appends ``modified`` when nothing matches.

        Returns:
            Number of records replaced.
        """
        replaced = 0
        updated: list[Appointment] = []
        for existing in self.appointments:
            if is_same(existing, original):
                if replaced == 0:
                    updated.append(modified)
                replaced += 1
            else:
                updated.append(existing)

        if replaced == 0:
            updated.append(modified)

        self.appointments = updated
        return replaced

    def sorted_by_start(self) -> list[Appointment]:
        return sorted(self.appointments, key=lambda appointment: appointment.start_time)
