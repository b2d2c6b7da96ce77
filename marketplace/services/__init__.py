"""Services Layer — command services and the idempotent command runner.

Invariants:
    - Every mutating command goes through IdempotentCommandRunner
    - Services receive repositories via __init__ (no globals except the key locks)

Design Decisions:
    - One service per aggregate (sellers, products) for locality
"""
