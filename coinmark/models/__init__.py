"""Data models for coins and reference entries."""
from coinmark.models.coin import Coin, CoinEntry, StoredCoin, StoredCollection

__all__ = [
    "Coin",
    "CoinEntry",
    "StoredCoin",
    "StoredCollection",
]
