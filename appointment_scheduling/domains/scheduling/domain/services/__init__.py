# Domain Services
from .conflict_scanner import Scanner, no_conflicts_create, no_conflicts_modify, scanner_for

__all__ = ["Scanner", "no_conflicts_create", "no_conflicts_modify", "scanner_for"]
