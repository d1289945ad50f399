from .appointments import (
    AppointmentSchema,
    CreateAppointmentRequest,
    ModifyAppointmentRequest,
    PartyAppointmentsResponse,
    VerdictResponse,
)

__all__ = [
    "AppointmentSchema",
    "CreateAppointmentRequest",
    "ModifyAppointmentRequest",
    "PartyAppointmentsResponse",
    "VerdictResponse",
]
