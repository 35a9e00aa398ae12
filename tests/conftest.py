"""Shared fixtures: temporary store files and reference resource directories."""
import json

import pytest

from coinmark.core.coin_store import CoinStore
from coinmark.models.coin import Coin


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "data" / "coins.json"


@pytest.fixture
def store(store_path):
    return CoinStore(store_path)


@pytest.fixture
def resources_dir(tmp_path):
    """Directory with one valid resource per series and one malformed one."""
    d = tmp_path / "resources"
    d.mkdir()
    (d / "parks.json").write_text(
        json.dumps(
            [
                {"name": "Yosemite", "series": "Parks", "year": 2010, "mintMark": "P"},
                {"name": "Acadia", "series": "Parks", "year": 2012, "mintMark": None},
                {"name": "Arches", "series": "Parks", "year": 2014},
            ]
        ),
        encoding="utf-8",
    )
    (d / "women.json").write_text(
        json.dumps(
            [
                {"name": "Maya Angelou", "series": "Women", "year": 2022, "mintMark": "D"},
                {"name": "Sally Ride", "series": "Women", "year": 2022, "mintMark": "D"},
            ]
        ),
        encoding="utf-8",
    )
    (d / "broken.json").write_text(
        json.dumps(
            [
                {"name": "Ok", "series": "Parks", "year": 2011},
                {"series": "Parks", "year": 2011},
            ]
        ),
        encoding="utf-8",
    )
    return d


@pytest.fixture
def sample_coins():
    """Coins spanning series B/A, years 2000/1999 and names X/Y."""
    return [
        Coin(name="Y", series="B", year=2000),
        Coin(name="X", series="B", year=1999),
        Coin(name="Y", series="A", year=2000),
        Coin(name="X", series="A", year=2000),
        Coin(name="Y", series="A", year=1999),
        Coin(name="X", series="B", year=2000),
    ]


@pytest.fixture
def filled_store(store, sample_coins):
    for c in sample_coins:
        store.insert(c)
    assert store.commit()
    return store
