"""Coins API Package: coin combination engine behind a read-only HTTP API.

Invariants:
    - Package root contains no executable code beyond the version constant

Design Decisions:
    - Explicit imports only, no star exports
"""

__version__ = "0.1.0"
