"""Services Layer — the legalizer shell and the batch importer.

Invariants:
    - Services call collaborators; core decides what the results mean
    - Every strategy invocation goes through Legalizer (single dispatch point)

Design Decisions:
    - One file per entry surface: single-record legalization vs. batch import
"""
