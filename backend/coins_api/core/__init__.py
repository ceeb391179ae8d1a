"""Core Layer: pure combinatorial logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure; the only nondeterminism is an injected random source

Design Decisions:
    - Functional core separated from the HTTP shell (thin routes call core directly)
"""
