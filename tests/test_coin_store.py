"""Tests for CoinStore persistence, counting and sorted queries."""

import json
import threading

import pytest

from coinmark.core.coin_store import CoinStore, StoreError
from coinmark.models.coin import Coin


def test_missing_file_is_empty_store(store):
    assert store.count() == 0
    assert store.query() == []


def test_insert_is_pending_until_commit(store, store_path):
    coin = Coin(name="Yosemite", series="Parks", year=2010, mint_mark="P")
    store.insert(coin)

    assert store.count() == 1
    assert store.has_pending
    assert not store_path.exists()

    assert store.commit() is True
    assert not store.has_pending
    data = json.loads(store_path.read_text(encoding="utf-8"))
    assert data["coins"] == [
        {
            "id": coin.id,
            "name": "Yosemite",
            "series": "Parks",
            "year": 2010,
            "mint_mark": "P",
            "is_collected": False,
        }
    ]


def test_commit_roundtrip_preserves_ids(filled_store, store_path, sample_coins):
    reopened = CoinStore(store_path)
    assert {c.id for c in reopened.query()} == {c.id for c in sample_coins}


def test_count_with_predicate_and_limit(filled_store):
    assert filled_store.count() == 6
    assert filled_store.count(limit=1) == 1
    assert filled_store.count(lambda c: c.series == "A") == 3
    assert filled_store.count(lambda c: c.series == "A", limit=2) == 2
    assert filled_store.count(lambda c: c.series == "Z") == 0


def test_query_sorts_by_series_then_year_then_name(filled_store):
    rows = filled_store.query([("series", "asc"), ("year", "asc"), ("name", "asc")])
    assert [(c.series, c.year, c.name) for c in rows] == [
        ("A", 1999, "Y"),
        ("A", 2000, "X"),
        ("A", 2000, "Y"),
        ("B", 1999, "X"),
        ("B", 2000, "X"),
        ("B", 2000, "Y"),
    ]


def test_query_descending(filled_store):
    rows = filled_store.query([("year", "desc"), ("series", "asc"), ("name", "asc")])
    assert [(c.year, c.series, c.name) for c in rows][:3] == [
        (2000, "A", "X"),
        (2000, "A", "Y"),
        (2000, "B", "X"),
    ]


def test_query_rejects_unknown_field(filled_store):
    with pytest.raises(StoreError):
        filled_store.query([("price", "asc")])


def test_query_results_are_live(filled_store, sample_coins):
    rows = filled_store.query()
    target = sample_coins[0]
    filled_store.toggle_collected(target.id)
    assert next(c for c in rows if c.id == target.id).is_collected is True


def test_toggle_collected_persists(filled_store, store_path, sample_coins):
    target = sample_coins[2]
    coin = filled_store.toggle_collected(target.id)
    assert coin.is_collected is True

    reopened = CoinStore(store_path)
    assert reopened.get(target.id).is_collected is True
    assert reopened.count(lambda c: c.is_collected) == 1


def test_toggle_unknown_id(filled_store):
    assert filled_store.toggle_collected("no-such-id") is None


def test_corrupt_file_raises_store_error(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("{not json", encoding="utf-8")
    store = CoinStore(store_path)

    with pytest.raises(StoreError):
        store.count(limit=1)


def test_commit_does_not_overwrite_corrupt_file(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("{not json", encoding="utf-8")
    store = CoinStore(store_path)

    assert store.commit() is False
    assert store_path.read_text(encoding="utf-8") == "{not json"


def test_commit_failure_returns_false(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    store = CoinStore(blocker / "coins.json")
    store.insert(Coin(name="Yosemite", series="Parks", year=2010))

    assert store.commit() is False
    assert store.has_pending


@pytest.mark.parametrize(
    "row",
    [
        {"id": "b", "name": "X", "series": 5, "year": 2000},
        {"id": "b", "name": "X", "series": "A", "year": "2001"},
        {"id": "b", "name": "X", "series": "A", "year": 2000, "is_collected": "yes"},
        {"name": "X", "series": "A", "year": 2000},
    ],
)
def test_mistyped_rows_raise_store_error(store_path, row):
    store_path.parent.mkdir(parents=True)
    good = {"id": "a", "name": "Y", "series": "A", "year": 1999}
    store_path.write_text(json.dumps({"coins": [good, row]}), encoding="utf-8")
    store = CoinStore(store_path)

    with pytest.raises(StoreError):
        store.query([("series", "asc"), ("year", "asc")])


def test_count_with_zero_limit(filled_store):
    assert filled_store.count(limit=0) == 0
    assert filled_store.count(limit=-1) == 0


def test_concurrent_first_load_shares_one_collection(filled_store, store_path):
    store = CoinStore(store_path)
    results = []

    def worker():
        results.append(store.query())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    first = results[0]
    for rows in results[1:]:
        assert all(a is b for a, b in zip(first, rows))
