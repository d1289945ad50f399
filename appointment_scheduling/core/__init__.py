"""
Core infrastructure shared by every domain: DDD base classes, logging,
dependency wiring and application lifecycle.
"""
