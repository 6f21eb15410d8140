"""Cafe API Package — city venue listing over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
