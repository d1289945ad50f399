"""
Appointment API schemas.

Request and response models for the appointment endpoints. Appointments use
the camelCase ``startTime``/``endTime`` field names on the wire and must carry
a UTC offset.
"""

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from appointment_scheduling.domains.scheduling.domain import Appointment, Modification


class AppointmentSchema(BaseModel):
    """Appointment as sent and received over HTTP."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "initiator": "dr.house",
                "appointee": "jdoe",
                "startTime": "2024-05-01T10:00:00Z",
                "endTime": "2024-05-01T11:00:00Z",
            }
        },
    )

    initiator: str = Field(..., min_length=1, description="Party requesting the appointment")
    appointee: str = Field(..., min_length=1, description="Party the appointment is requested with")
    start_time: AwareDatetime = Field(..., alias="startTime")
    end_time: AwareDatetime = Field(..., alias="endTime")

    def to_domain(self) -> Appointment:
        return Appointment(
            initiator=self.initiator,
            appointee=self.appointee,
            start_time=self.start_time,
            end_time=self.end_time,
        )

    @classmethod
    def from_domain(cls, appointment: Appointment) -> "AppointmentSchema":
        return cls(
            initiator=appointment.initiator,
            appointee=appointment.appointee,
            start_time=appointment.start_time,
            end_time=appointment.end_time,
        )


class CreateAppointmentRequest(BaseModel):
    appointment: AppointmentSchema


class ModifyAppointmentRequest(BaseModel):
    original: AppointmentSchema
    modified: AppointmentSchema

    def to_domain(self) -> Modification:
        return Modification(original=self.original.to_domain(), modified=self.modified.to_domain())


class VerdictResponse(BaseModel):
    success: bool
    reason: str = ""


class PartyAppointmentsResponse(BaseModel):
    party_id: str
    appointments: list[AppointmentSchema] = Field(default_factory=list)
