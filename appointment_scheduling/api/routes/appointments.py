"""
Appointment routes.

Validation endpoints always answer 200 with a verdict. Booking endpoints answer
409 when the verdict is a conflict. Repository and input errors are turned
into responses by the registered exception handlers.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from appointment_scheduling.api.dependencies import (
    get_book_appointment_use_case,
    get_party_appointments_use_case,
    get_reschedule_appointment_use_case,
    get_validate_appointment_use_case,
)
from appointment_scheduling.api.schemas import (
    AppointmentSchema,
    CreateAppointmentRequest,
    ModifyAppointmentRequest,
    PartyAppointmentsResponse,
    VerdictResponse,
)
from appointment_scheduling.core.shared.logger import get_api_logger
from appointment_scheduling.domains.scheduling.application import (
    BookAppointmentUseCase,
    GetPartyAppointmentsUseCase,
    RescheduleAppointmentUseCase,
    ValidateAppointmentUseCase,
)

router = APIRouter(prefix="/appointments", tags=["appointments"])
logger = get_api_logger("appointments")


def _conflict_response(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"success": False, "reason": reason},
    )


@router.post("/validate", response_model=VerdictResponse)
async def validate_appointment_creation(
    request: CreateAppointmentRequest,
    use_case: ValidateAppointmentUseCase = Depends(get_validate_appointment_use_case),  # noqa: B008
):
    """
    Check whether a new appointment fits both parties' schedules.

    - **appointment**: Appointment to check (initiator, appointee, startTime, endTime)
    """
    appointment = request.appointment.to_domain()
    verdict = await use_case.validate_creation(appointment, appointment.initiator, appointment.appointee)
    return VerdictResponse(**verdict.to_dict())


@router.post("/validate-modification", response_model=VerdictResponse)
async def validate_appointment_modification(
    request: ModifyAppointmentRequest,
    use_case: ValidateAppointmentUseCase = Depends(get_validate_appointment_use_case),  # noqa: B008
):
    """
    Check whether moving an appointment keeps both parties' schedules free of conflicts.

    - **original**: Appointment as currently booked
    - **modified**: Appointment as it would become
    """
    modification = request.to_domain()
    original = modification.original
    verdict = await use_case.validate_modification(modification, original.initiator, original.appointee)
    return VerdictResponse(**verdict.to_dict())


@router.post("", response_model=AppointmentSchema, status_code=status.HTTP_201_CREATED)
async def book_appointment(
    request: CreateAppointmentRequest,
    use_case: BookAppointmentUseCase = Depends(get_book_appointment_use_case),  # noqa: B008
):
    """Book a new appointment if neither party is already busy."""
    result = await use_case.execute(request.appointment.to_domain())
    if not result.success:
        logger.info("Booking rejected", reason=result.reason)
        return _conflict_response(result.reason)
    return AppointmentSchema.from_domain(result.appointment)


@router.put("", response_model=AppointmentSchema)
async def reschedule_appointment(
    request: ModifyAppointmentRequest,
    use_case: RescheduleAppointmentUseCase = Depends(get_reschedule_appointment_use_case),  # noqa: B008
):
    """Move an existing appointment if the new time is free for both parties."""
    result = await use_case.execute(request.to_domain())
    if not result.success:
        logger.info("Rescheduling rejected", reason=result.reason)
        return _conflict_response(result.reason)
    return AppointmentSchema.from_domain(result.appointment)


@router.get("/{party_id}", response_model=PartyAppointmentsResponse)
async def list_party_appointments(
    party_id: str,
    use_case: GetPartyAppointmentsUseCase = Depends(get_party_appointments_use_case),  # noqa: B008
):
    """List every appointment a party takes part in, ordered by start time."""
    result = await use_case.execute(party_id)
    return PartyAppointmentsResponse(
        party_id=result.party_id,
        appointments=[AppointmentSchema.from_domain(a) for a in result.appointments],
    )
