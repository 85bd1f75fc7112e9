"""Core Layer — pure domain logic, no IO, no async.

Invariants:
    - No module in core/ imports from api/, infrastructure/ or schemas/
    - All functions are deterministic; the catalog is immutable once built

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
