"""Error Hierarchy: typed exceptions for invalid combination values.

Invariants:
    - Every error has a code (str) and category (ErrorCategory)
    - All errors are ValueErrors raised while building a Combination; no HTTP
      endpoint can trigger one, so none maps to a status code

Design Decisions:
    - Single hierarchy with CoinsError base: callers catch one type, or plain
      ValueError without importing this module
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    INTERNAL = "internal"


class CoinsError(ValueError):
    """Base exception for all coins domain errors."""

    def __init__(self, message: str, code: str, category: ErrorCategory):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category


class InvalidCombinationIndexError(CoinsError):
    """Mask outside [0, 15] or not an integer."""
    def __init__(self, index: object):
        super().__init__(
            f"Combination index {index!r} is outside 0..15",
            "INVALID_COMBINATION_INDEX", ErrorCategory.VALIDATION,
        )
        self.index = index


class DuplicateDenominationError(CoinsError):
    """A combination may hold each denomination at most once."""
    def __init__(self, denomination: str):
        super().__init__(
            f"Denomination {denomination} appears more than once",
            "DUPLICATE_DENOMINATION", ErrorCategory.VALIDATION,
        )
        self.denomination = denomination


class UnknownDenominationError(CoinsError):
    """Value is not one of the four catalog denominations."""
    def __init__(self, value: object):
        super().__init__(
            f"{value!r} is not a known denomination",
            "UNKNOWN_DENOMINATION", ErrorCategory.VALIDATION,
        )
        self.value = value
