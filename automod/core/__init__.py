"""Core Layer — pure legalization logic, no IO, no strategy internals.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - Collaborators (strategies, factories, providers) reach core only through Protocols

Design Decisions:
    - Functional core separated from imperative shell so strategies can be stubbed in tests
"""
