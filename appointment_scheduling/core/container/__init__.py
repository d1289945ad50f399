"""
Dependency Injection Containers

One container per domain wires that domain's use cases to their adapters.
"""

from appointment_scheduling.core.container.scheduling import SchedulingContainer

__all__ = ["SchedulingContainer"]
