"""AutoMod Legalizer Package — dual-strategy legalization and batch import.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
