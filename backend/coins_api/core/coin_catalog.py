"""Coin Catalog: static lookup of denominations, cent values and bit positions.

Invariants:
    - all_denominations() order is Penny, Nickel, Dime, Quarter on every call
    - value_in_cents is total over Denomination (exhaustive match)
"""

from coins_api.core.domain_types import Denomination

_ALL: tuple[Denomination, ...] = (
    Denomination.PENNY,
    Denomination.NICKEL,
    Denomination.DIME,
    Denomination.QUARTER,
)


def all_denominations() -> tuple[Denomination, ...]:
    """All denominations in canonical (ascending bit) order."""
    return _ALL


def value_in_cents(denomination: Denomination) -> int:
    match denomination:
        case Denomination.PENNY:
            return 1
        case Denomination.NICKEL:
            return 5
        case Denomination.DIME:
            return 10
        case Denomination.QUARTER:
            return 25
    raise TypeError(f"not a Denomination: {denomination!r}")


def ordinal(denomination: Denomination) -> int:
    """Bit position of the denomination inside a combination mask."""
    return _ALL.index(denomination)
