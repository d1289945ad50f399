# Domain Entities
from .appointment import Appointment, is_same
from .appointment_document import AppointmentDocument

__all__ = ["Appointment", "AppointmentDocument", "is_same"]
