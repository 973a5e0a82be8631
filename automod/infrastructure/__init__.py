"""Infrastructure Layer — cross-cutting concerns (logging setup).

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Kept separate so embedding applications can skip it entirely
"""
