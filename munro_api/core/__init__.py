"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All query functions are pure and deterministic over an immutable dataset

Design Decisions:
    - Functional core separated from imperative shell: the loader and the routes
      do IO, the engine only filters, sorts and slices
"""
