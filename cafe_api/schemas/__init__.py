"""Schemas — Pydantic models validating data at the service boundary."""
