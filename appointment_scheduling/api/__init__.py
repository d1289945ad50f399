"""HTTP API for the appointment scheduling service."""
