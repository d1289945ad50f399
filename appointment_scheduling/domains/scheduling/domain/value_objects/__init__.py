# Domain Value Objects
from .time_span import TimeSpan, conflicts

__all__ = ["TimeSpan", "conflicts"]
