"""Domain Types: the closed set of coin denominations and power-set constants.

Invariants:
    - Denomination has exactly 4 members, declared in ordinal (bit) order:
      Penny=bit0, Nickel=bit1, Dime=bit2, Quarter=bit3
    - Member values are display names: never cent values (see coin_catalog)
    - COMBINATION_COUNT == 2 ** DENOMINATION_COUNT

Design Decisions:
    - str Enum: serializes to JSON as "Penny" etc. without custom encoders
    - NewType for the mask: zero runtime cost, documents intent at call sites
"""

from enum import Enum
from typing import NewType


# ─── Enums ───────────────────────────────────────────────────────

class Denomination(str, Enum):
    """The four US coins. Declaration order fixes the bit position."""
    PENNY = "Penny"
    NICKEL = "Nickel"
    DIME = "Dime"
    QUARTER = "Quarter"


# ─── Value Types ─────────────────────────────────────────────────

CombinationIndex = NewType("CombinationIndex", int)   # 0–15, bit j ⇔ ordinal j


# ─── Constants ───────────────────────────────────────────────────

DENOMINATION_COUNT = 4
COMBINATION_COUNT = 1 << DENOMINATION_COUNT   # 16
MAX_COMBINATION_VALUE = 41                    # 1 + 5 + 10 + 25
