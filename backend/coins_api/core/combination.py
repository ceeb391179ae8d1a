"""Combination: immutable, duplicate-free subset of the coin catalog.

Invariants:
    - coins holds each Denomination at most once (DuplicateDenominationError)
    - coins is stored in canonical order (ascending bit position), whatever
      order the caller passed
    - Combination.from_index(c.index) == c for every combination c

Design Decisions:
    - frozen dataclass over bare list: duplicates become unrepresentable and
      combinations can be hashed and compared as values
    - Display names accepted on construction ("Dime"), coerced to Denomination
"""

from dataclasses import dataclass
from typing import Iterable, Iterator

from coins_api.core.coin_catalog import all_denominations, ordinal
from coins_api.core.domain_types import (
    COMBINATION_COUNT, CombinationIndex, Denomination,
)
from coins_api.core.errors import (
    DuplicateDenominationError, InvalidCombinationIndexError,
    UnknownDenominationError,
)


def _coerce(value: object) -> Denomination:
    if isinstance(value, Denomination):
        return value
    try:
        return Denomination(value)
    except ValueError:
        raise UnknownDenominationError(value) from None


@dataclass(frozen=True)
class Combination:
    """One member of the power set of the four denominations."""

    coins: tuple[Denomination, ...] = ()

    def __post_init__(self):
        members = [_coerce(c) for c in self.coins]
        seen: set[Denomination] = set()
        for coin in members:
            if coin in seen:
                raise DuplicateDenominationError(coin.value)
            seen.add(coin)
        object.__setattr__(self, "coins", tuple(sorted(members, key=ordinal)))

    @classmethod
    def of(cls, *coins: Denomination | str) -> "Combination":
        return cls(tuple(coins))

    @classmethod
    def from_index(cls, index: int) -> "Combination":
        """Decode a mask: bit j set ⇔ the denomination at ordinal j is present."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidCombinationIndexError(index)
        if not 0 <= index < COMBINATION_COUNT:
            raise InvalidCombinationIndexError(index)
        return cls(tuple(
            coin for j, coin in enumerate(all_denominations())
            if (index >> j) & 1
        ))

    @property
    def index(self) -> CombinationIndex:
        """Inverse of from_index."""
        mask = 0
        for coin in self.coins:
            mask |= 1 << ordinal(coin)
        return CombinationIndex(mask)

    @property
    def is_empty(self) -> bool:
        return not self.coins

    def names(self) -> list[str]:
        return [coin.value for coin in self.coins]

    def __iter__(self) -> Iterator[Denomination]:
        return iter(self.coins)

    def __len__(self) -> int:
        return len(self.coins)

    def __contains__(self, item: object) -> bool:
        return item in self.coins


def as_combination(coins: Iterable[Denomination | str]) -> Combination:
    """Wrap any iterable of coins, passing existing Combinations through."""
    if isinstance(coins, Combination):
        return coins
    return Combination(tuple(coins))
