"""Combination Schemas: Pydantic response models for the HTTP façade.

Invariants:
    - value always equals the cent total of coins (built via from_combination)
    - index is the generating mask, 0..15
    - total_combinations equals len(combinations)

Design Decisions:
    - Denomination (str Enum) as the coin type: Pydantic emits "Penny" etc. natively
    - Classmethod constructors keep core → schema mapping out of route bodies
"""

from pydantic import BaseModel, Field

from coins_api.core.combination import Combination
from coins_api.core.combination_engine import total_value
from coins_api.core.domain_types import (
    COMBINATION_COUNT, Denomination, MAX_COMBINATION_VALUE,
)


class RandomCombinationResponse(BaseModel):
    """GET /random: one sampled combination and its value."""
    coins: list[Denomination]
    value: int = Field(ge=0, le=MAX_COMBINATION_VALUE)

    @classmethod
    def from_combination(cls, combination: Combination) -> "RandomCombinationResponse":
        return cls(coins=list(combination), value=total_value(combination))


class CombinationDetail(BaseModel):
    """One entry of GET /all."""
    index: int = Field(ge=0, lt=COMBINATION_COUNT)
    coins: list[Denomination]
    value: int = Field(ge=0, le=MAX_COMBINATION_VALUE)

    @classmethod
    def from_combination(cls, combination: Combination) -> "CombinationDetail":
        return cls(
            index=combination.index,
            coins=list(combination),
            value=total_value(combination),
        )


class AllCombinationsResponse(BaseModel):
    """GET /all: the whole power set in mask order."""
    total_combinations: int
    combinations: list[CombinationDetail]

    @classmethod
    def from_combinations(
        cls, combinations: list[Combination],
    ) -> "AllCombinationsResponse":
        details = [CombinationDetail.from_combination(c) for c in combinations]
        return cls(total_combinations=len(details), combinations=details)

