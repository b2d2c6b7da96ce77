"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Entities are immutable; every write goes through a validated wrapper

Design Decisions:
    - Functional core separated from imperative shell: services orchestrate
      the IO around the pure checks defined here
"""
