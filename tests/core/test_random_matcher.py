from __future__ import annotations

from jobportal.core.matching import MatchConfig, RandomMatcher


def build_records(count: int) -> list[dict]:
    return [{"id": idx} for idx in range(1, count + 1)]


def test_select_returns_at_most_limit_distinct_records():
    matcher = RandomMatcher(config=MatchConfig(limit=3, seed=7))
    records = build_records(10)

    selected = matcher.select(records)

    assert len(selected) == 3
    assert len({record["id"] for record in selected}) == 3
    assert all(record in records for record in selected)


def test_select_never_reorders_input():
    matcher = RandomMatcher(config=MatchConfig(seed=1))
    records = build_records(5)

    matcher.select(records)

    assert [record["id"] for record in records] == [1, 2, 3, 4, 5]


def test_select_with_small_pool_returns_everything():
    matcher = RandomMatcher()

    selected = matcher.select(build_records(2))

    assert sorted(record["id"] for record in selected) == [1, 2]
    assert matcher.select([]) == []


def test_seeded_matchers_are_reproducible():
    records = build_records(20)

    first = RandomMatcher(config=MatchConfig(seed=42)).select(records)
    second = RandomMatcher(config=MatchConfig(seed=42)).select(records)

    assert first == second
