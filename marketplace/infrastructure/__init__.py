"""Infrastructure Layer — database access, repositories and observability.

Invariants:
    - Infrastructure implements the protocols in core/repository_protocols.py
    - Every SQLAlchemy failure is mapped to a core error before leaving this layer

Design Decisions:
    - Repositories take an AsyncSession per request; the caller owns its lifetime
"""
