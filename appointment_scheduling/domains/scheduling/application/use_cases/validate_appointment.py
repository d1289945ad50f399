# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case that validates a candidate appointment against the
#              schedules of both parties.
# ============================================================================
"""Validate Appointment Use Case.

Fetches the initiator's and the appointee's existing appointments, runs the
matching conflict scanner over each, and returns a single Verdict.

The initiator's schedule always takes precedence: when both schedules would
conflict, the reported reason is the initiator's, whether lookups run one
after the other (default) or concurrently.
"""

import asyncio
from typing import TYPE_CHECKING

from appointment_scheduling.core.domain import (
    DuplicateAppointmentException,
    RepositoryFailureException,
    ValidationException,
)
from appointment_scheduling.core.shared.logger import ContextLogger, get_service_logger

from ...domain.candidate import Candidate, CandidateKind, Creation, Modification
from ...domain.entities import Appointment, is_same
from ...domain.services import Scanner, no_conflicts_create, no_conflicts_modify, scanner_for
from ..dto.validation_dtos import PartyRole, Verdict

if TYPE_CHECKING:
    from ..ports import AppointmentReader


class ValidateAppointmentUseCase:
    """Use case for validating appointment creation and modification.

    Stateless between calls: every run fetches fresh schedules and keeps
    nothing afterwards, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        repository: "AppointmentReader",
        concurrent_lookups: bool = False,
        logger: ContextLogger | None = None,
    ) -> None:
        """Initialize use case.

        Args:
            repository: Appointment store (read side only).
            concurrent_lookups: Issue both schedule lookups at once.
            logger: Structured logger for validation outcomes.
        """
        self._repository = repository
        self._concurrent_lookups = concurrent_lookups
        self._logger = logger or get_service_logger("appointment_validation")

    async def execute(self, candidate: Candidate, initiator_id: str, appointee_id: str) -> Verdict:
        """Validate a tagged candidate with the scanner matching its variant."""
        return await self.validate(candidate, initiator_id, appointee_id, scanner_for(candidate))

    async def validate_creation(self, appointment: Appointment, initiator_id: str, appointee_id: str) -> Verdict:
        return await self.validate(Creation(appointment), initiator_id, appointee_id, no_conflicts_create)

    async def validate_modification(self, modification: Modification, initiator_id: str, appointee_id: str) -> Verdict:
        return await self.validate(modification, initiator_id, appointee_id, no_conflicts_modify)

    async def validate(
        self,
        candidate: Candidate | Appointment,
        initiator_id: str,
        appointee_id: str,
        scanner: Scanner,
    ) -> Verdict:
        """Run the validation.

        Args:
            candidate: Appointment under validation (new, or a Modification).
            initiator_id: Party that requested the appointment.
            appointee_id: Party the appointment is requested with.
            scanner: Conflict scanner applied to each party's schedule.

        Returns:
            Verdict with the initiator-conflict reason, the appointee-conflict
            reason, or success.

        Raises:
            ValidationException: If a party identity is missing, or a stored
                appointment and the candidate differ in timezone awareness.
            DuplicateAppointmentException: If a schedule holds the appointment
                being modified more than once.
            RepositoryFailureException: If a schedule cannot be fetched.
        """
        self._require_party(initiator_id, "initiator_id")
        self._require_party(appointee_id, "appointee_id")

        log = self._logger.with_context(
            initiator=initiator_id,
            appointee=appointee_id,
            kind=_kind_of(candidate),
            start_time=_proposed(candidate).start_time.isoformat(),
        )

        appointee_lookup: asyncio.Future | None = None
        if self._concurrent_lookups:
            appointee_lookup = asyncio.ensure_future(self._fetch(appointee_id, PartyRole.APPOINTEE, log))
            appointee_lookup.add_done_callback(_discard_result)

        try:
            initiator_appointments = await self._fetch(initiator_id, PartyRole.INITIATOR, log)
            if not self._passes(candidate, initiator_id, initiator_appointments, scanner):
                log.warning("Appointment time unavailable for initiator", party_role=PartyRole.INITIATOR.value)
                return Verdict.conflict(PartyRole.INITIATOR)

            if appointee_lookup is None:
                appointee_appointments = await self._fetch(appointee_id, PartyRole.APPOINTEE, log)
            else:
                appointee_appointments = await appointee_lookup
            if not self._passes(candidate, appointee_id, appointee_appointments, scanner):
                log.warning("Appointment time unavailable for appointee", party_role=PartyRole.APPOINTEE.value)
                return Verdict.conflict(PartyRole.APPOINTEE)
        finally:
            if appointee_lookup is not None and not appointee_lookup.done():
                appointee_lookup.cancel()

        log.info("Appointment time available for both parties")
        return Verdict.ok()

    async def _fetch(self, party_id: str, role: PartyRole, log: ContextLogger) -> list[Appointment]:
        """Fetch a party's appointments; a missing record counts as none."""
        try:
            document = await self._repository.get_appointments(party_id)
        except RepositoryFailureException as e:
            log.error(f"Could not fetch {role.value} appointments: {e.message}", party_role=role.value)
            raise
        except Exception as e:
            log.error(f"Could not fetch {role.value} appointments: {e!s}", party_role=role.value)
            raise RepositoryFailureException(party_id, "fetch appointments", e) from e

        if document is None:
            return []
        return list(document.appointments)

    def _passes(
        self,
        candidate: Candidate | Appointment,
        party_id: str,
        appointments: list[Appointment],
        scanner: Scanner,
    ) -> bool:
        if isinstance(candidate, Modification):
            matches = sum(1 for appointment in appointments if is_same(appointment, candidate.original))
            if matches > 1:
                raise DuplicateAppointmentException(party_id, matches)
        return scanner(candidate, appointments)

    @staticmethod
    def _require_party(party_id: str, field: str) -> None:
        if not isinstance(party_id, str) or not party_id.strip():
            raise ValidationException(f"{field} is required", field=field)


def _proposed(candidate: Candidate | Appointment) -> Appointment:
    if isinstance(candidate, Appointment):
        return candidate
    return candidate.proposed


def _kind_of(candidate: Candidate | Appointment) -> str:
    if isinstance(candidate, Appointment):
        return CandidateKind.CREATION.value
    return candidate.kind.value


def _discard_result(lookup: asyncio.Future) -> None:
    # Marks the failure of an abandoned appointee lookup as retrieved
    if not lookup.cancelled():
        lookup.exception()


# =============================================================================
# Functional entry points
# =============================================================================


async def validate(
    repository: "AppointmentReader",
    candidate: Candidate | Appointment,
    initiator_id: str,
    appointee_id: str,
    scanner: Scanner,
    *,
    concurrent_lookups: bool = False,
    logger: ContextLogger | None = None,
) -> Verdict:
    """Validate ``candidate`` against both parties' schedules with ``scanner``."""
    use_case = ValidateAppointmentUseCase(repository, concurrent_lookups=concurrent_lookups, logger=logger)
    return await use_case.validate(candidate, initiator_id, appointee_id, scanner)


async def validate_creation(
    repository: "AppointmentReader",
    appointment: Appointment,
    initiator_id: str,
    appointee_id: str,
    *,
    concurrent_lookups: bool = False,
    logger: ContextLogger | None = None,
) -> Verdict:
    """Validate a new appointment."""
    return await validate(
        repository,
        Creation(appointment),
        initiator_id,
        appointee_id,
        no_conflicts_create,
        concurrent_lookups=concurrent_lookups,
        logger=logger,
    )


async def validate_modification(
    repository: "AppointmentReader",
    modification: Modification,
    initiator_id: str,
    appointee_id: str,
    *,
    concurrent_lookups: bool = False,
    logger: ContextLogger | None = None,
) -> Verdict:
    """Validate the change of an existing appointment."""
    return await validate(
        repository,
        modification,
        initiator_id,
        appointee_id,
        no_conflicts_modify,
        concurrent_lookups=concurrent_lookups,
        logger=logger,
    )
