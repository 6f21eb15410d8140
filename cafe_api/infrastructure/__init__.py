"""Infrastructure Layer — process-wide resources and cross-cutting concerns.

Invariants:
    - Infrastructure may import core/ types but never api/ routes
    - Load failures mapped to typed errors from core/errors.py
"""
