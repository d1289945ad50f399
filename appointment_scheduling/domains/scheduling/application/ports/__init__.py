# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Ports (interfaces) for external systems.
# ============================================================================
"""Scheduling Application Ports.

- AppointmentReader: read-only access, all that validation needs
- AppointmentRepositoryPort: read and write access for booking/rescheduling
"""

from .appointment_repository_port import AppointmentReader, AppointmentRepositoryPort

__all__ = [
    "AppointmentReader",
    "AppointmentRepositoryPort",
]
