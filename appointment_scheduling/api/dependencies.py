"""
FastAPI dependency providers.

The scheduling container lives on ``app.state`` (set up by the lifespan hook);
route handlers receive use cases built from it.
"""

from fastapi import Depends, HTTPException, Request, status

from appointment_scheduling.core.container import SchedulingContainer
from appointment_scheduling.domains.scheduling.application import (
    BookAppointmentUseCase,
    GetPartyAppointmentsUseCase,
    RescheduleAppointmentUseCase,
    ValidateAppointmentUseCase,
)


def get_scheduling_container(request: Request) -> SchedulingContainer:
    """Get the scheduling container attached to the running application."""
    container = getattr(request.app.state, "scheduling", None)
    if container is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Scheduling service is not initialized",
        )
    return container


def get_validate_appointment_use_case(
    container: SchedulingContainer = Depends(get_scheduling_container),  # noqa: B008
) -> ValidateAppointmentUseCase:
    return container.create_validate_appointment_use_case()


def get_book_appointment_use_case(
    container: SchedulingContainer = Depends(get_scheduling_container),  # noqa: B008
) -> BookAppointmentUseCase:
    return container.create_book_appointment_use_case()


def get_reschedule_appointment_use_case(
    container: SchedulingContainer = Depends(get_scheduling_container),  # noqa: B008
) -> RescheduleAppointmentUseCase:
    return container.create_reschedule_appointment_use_case()


def get_party_appointments_use_case(
    container: SchedulingContainer = Depends(get_scheduling_container),  # noqa: B008
) -> GetPartyAppointmentsUseCase:
    return container.create_get_party_appointments_use_case()
