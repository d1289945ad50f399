# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Scheduling)
# Description: Infrastructure exports.
# ============================================================================
"""Infrastructure Layer - Scheduling.

Adapters for the appointment store.
"""

from .repositories import RedisAppointmentRepository

__all__ = ["RedisAppointmentRepository"]
