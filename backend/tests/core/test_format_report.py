"""Console Report: text lines printed by `coins-api show`."""

from coins_api.core.combination import Combination
from coins_api.core.combination_engine import enumerate_all
from coins_api.core.domain_types import Denomination
from coins_api.core.format_report import (
    format_all_report, format_combination, format_random_report,
)


def test_format_empty_combination():
    assert format_combination(Combination()) == "{} (empty set) - Value: 0 cents"


def test_format_combination_lists_coins_in_order():
    combo = Combination.of(Denomination.DIME, Denomination.PENNY)
    assert format_combination(combo) == "{Penny, Dime} - Value: 11 cents"


def test_all_report_layout():
    lines = format_all_report(enumerate_all())
    assert lines[0] == "=== All Coin Combinations ==="
    assert lines[2] == "Combination  0: {} (empty set) - Value: 0 cents"
    assert lines[7] == "Combination  5: {Penny, Dime} - Value: 11 cents"
    assert lines[17] == "Combination 15: {Penny, Nickel, Dime, Quarter} - Value: 41 cents"
    assert lines[-1] == "Total combinations: 16"


def test_random_report_numbers_from_one():
    combos = [Combination.of(Denomination.QUARTER), Combination()]
    assert format_random_report(combos) == [
        "=== Random Coin Combinations ===",
        "",
        "Random  1: {Quarter} - Value: 25 cents",
        "Random  2: {} (empty set) - Value: 0 cents",
    ]
