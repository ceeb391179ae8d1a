"""Console Report: plain-text rendering of combinations for the `show` command.

Invariants:
    - Pure string building; printing is the caller's job
    - Empty combination renders as "{} (empty set)"
"""

from typing import Iterable

from coins_api.core.combination import Combination
from coins_api.core.combination_engine import total_value


def format_combination(combination: Combination) -> str:
    """'{Penny, Dime} - Value: 11 cents'."""
    if combination.is_empty:
        body = "{} (empty set)"
    else:
        body = "{" + ", ".join(combination.names()) + "}"
    return f"{body} - Value: {total_value(combination)} cents"


def format_all_report(combinations: Iterable[Combination]) -> list[str]:
    combos = list(combinations)
    lines = ["=== All Coin Combinations ===", ""]
    for index, combination in enumerate(combos):
        lines.append(f"Combination {index:2}: {format_combination(combination)}")
    lines += ["", f"Total combinations: {len(combos)}"]
    return lines


def format_random_report(combinations: Iterable[Combination]) -> list[str]:
    lines = ["=== Random Coin Combinations ===", ""]
    for number, combination in enumerate(combinations, start=1):
        lines.append(f"Random {number:2}: {format_combination(combination)}")
    return lines
