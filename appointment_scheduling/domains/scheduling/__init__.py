# ============================================================================
# SCOPE: DOMAIN (Scheduling)
# Description: Appointment conflict validation, booking and rescheduling.
# ============================================================================
"""Scheduling Domain.

Decides whether a new or modified appointment would double-book either of
its two parties, and books appointments that pass.

Layers:
- domain: time spans, appointments, candidates and conflict scanners
- application: validation orchestrator and booking/rescheduling use cases
- infrastructure: Redis appointment store
"""
