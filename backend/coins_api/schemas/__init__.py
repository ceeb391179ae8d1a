"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Coin names serialize as Denomination values ("Penny", "Nickel", ...)
"""
