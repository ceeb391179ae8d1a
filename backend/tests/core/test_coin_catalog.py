"""Coin Catalog: canonical order, cent values, ordinals."""

import pytest

from coins_api.core.coin_catalog import all_denominations, ordinal, value_in_cents
from coins_api.core.domain_types import Denomination


def test_all_denominations_returns_four_coins():
    assert len(all_denominations()) == 4


def test_all_denominations_canonical_order():
    coins = all_denominations()
    assert coins[0] == Denomination.PENNY
    assert coins[1] == Denomination.NICKEL
    assert coins[2] == Denomination.DIME
    assert coins[3] == Denomination.QUARTER


def test_all_denominations_is_stable_across_calls():
    assert all_denominations() == all_denominations()


@pytest.mark.parametrize("coin, cents", [
    (Denomination.PENNY, 1),
    (Denomination.NICKEL, 5),
    (Denomination.DIME, 10),
    (Denomination.QUARTER, 25),
])
def test_value_in_cents(coin, cents):
    assert value_in_cents(coin) == cents


def test_value_in_cents_rejects_non_denomination():
    with pytest.raises(TypeError):
        value_in_cents(3)


def test_ordinals_follow_bit_positions():
    assert [ordinal(c) for c in all_denominations()] == [0, 1, 2, 3]
