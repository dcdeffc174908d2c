"""Infrastructure Layer — file IO and cross-cutting concerns.

Invariants:
    - Infrastructure maps every IO failure to a typed error from core/errors.py
    - Nothing here is called per request; the loader runs once at startup

Design Decisions:
    - Loader returns (dataset, error) instead of raising: startup is fail-open
"""
