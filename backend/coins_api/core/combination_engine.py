"""Combination Engine: power-set enumeration, uniform sampling, value totals.

Invariants:
    - enumerate_all() returns exactly COMBINATION_COUNT combinations; position i
      holds decode_mask(i), so index 0 is empty and index 15 is the full set
    - random_combination() draws one mask uniformly and decodes it with the
      same rule as enumerate_all()
    - total_value() depends on membership only, never on order
    - No module-level mutable state; every call allocates fresh values

Design Decisions:
    - One decoding rule (Combination.from_index) shared by enumeration and
      sampling, so inclusion logic lives in a single place
    - Random source injected (random.Random protocol): tests and seeded demos
      pass their own; default is the process-wide `random` module source
"""

import random
from typing import Iterable, Protocol

from coins_api.core.coin_catalog import value_in_cents
from coins_api.core.combination import Combination, as_combination
from coins_api.core.domain_types import COMBINATION_COUNT, Denomination


class RandomSource(Protocol):
    """Anything with random.Random's randrange (random module, Random, SystemRandom)."""

    def randrange(self, stop: int) -> int: ...


def decode_mask(mask: int) -> Combination:
    """Bit j of mask set ⇔ denomination at ordinal j included (ascending j)."""
    return Combination.from_index(mask)


def enumerate_all() -> list[Combination]:
    """The full power set, ordered by generating mask 0..15."""
    return [decode_mask(mask) for mask in range(COMBINATION_COUNT)]


def random_combination(rng: RandomSource | None = None) -> Combination:
    """Uniform draw over the 16 masks; each coin is an independent fair flip."""
    source = rng if rng is not None else random
    return decode_mask(source.randrange(COMBINATION_COUNT))


def total_value(coins: Iterable[Denomination | str]) -> int:
    """Sum of cent values. Repeated coins raise DuplicateDenominationError."""
    return sum(value_in_cents(coin) for coin in as_combination(coins))
