# Infrastructure Repositories
from .redis_appointment_repository import (
    RedisAppointmentRepository,
    StoredAppointment,
    StoredAppointmentDocument,
)

__all__ = ["RedisAppointmentRepository", "StoredAppointment", "StoredAppointmentDocument"]
