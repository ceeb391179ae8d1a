"""Combination Routes: end-to-end checks over HTTP.

Invariants:
    - /all returns 16 entries; index equals generating mask
    - /random value always matches the coins it reports
    - /all is byte-identical across calls
    - Paths below /all are unmatched routes (plain 404)
"""

import pytest

from coins_api.core.coin_catalog import value_in_cents
from coins_api.core.domain_types import Denomination


def _cents(names: list[str]) -> int:
    return sum(value_in_cents(Denomination(n)) for n in names)


@pytest.mark.asyncio
async def test_all_returns_sixteen(client):
    res = await client.get("/all")
    assert res.status_code == 200
    body = res.json()
    assert body["total_combinations"] == 16
    assert len(body["combinations"]) == 16


@pytest.mark.asyncio
async def test_all_known_entries(client):
    combos = (await client.get("/all")).json()["combinations"]
    assert combos[0] == {"index": 0, "coins": [], "value": 0}
    assert combos[3]["value"] == 6
    assert combos[5] == {"index": 5, "coins": ["Penny", "Dime"], "value": 11}
    assert combos[8] == {"index": 8, "coins": ["Quarter"], "value": 25}
    assert combos[15]["coins"] == ["Penny", "Nickel", "Dime", "Quarter"]
    assert combos[15]["value"] == 41


@pytest.mark.asyncio
async def test_all_is_idempotent(client):
    first = await client.get("/all")
    second = await client.get("/all")
    assert first.content == second.content


@pytest.mark.asyncio
async def test_random_value_matches_coins(client):
    for _ in range(20):
        res = await client.get("/random")
        assert res.status_code == 200
        body = res.json()
        assert len(body["coins"]) <= 4
        assert len(set(body["coins"])) == len(body["coins"])
        assert body["value"] == _cents(body["coins"])


@pytest.mark.asyncio
async def test_random_shows_variety(client):
    seen = set()
    for _ in range(40):
        body = (await client.get("/random")).json()
        seen.add(tuple(body["coins"]))
    assert len(seen) >= 2


@pytest.mark.asyncio
async def test_seeded_random_is_valid(seeded_client):
    body = (await seeded_client.get("/random")).json()
    assert body["value"] == _cents(body["coins"])


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/all/5", "/all/16", "/all/abc"])
async def test_paths_below_all_are_unmatched(client, path):
    res = await client.get(path)
    assert res.status_code == 404
    assert "error" not in res.json()
