"""Pydantic Schemas — boundary models for CSV rows in and JSON records out.

Invariants:
    - Schemas validate at system boundaries (dataset file, API responses)
    - Core types from core/ are the source of truth; schemas convert to and from them

Design Decisions:
    - Separate from core: schemas are IO contracts, core records are domain values
"""
