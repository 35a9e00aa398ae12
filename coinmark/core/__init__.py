"""Core services: coin store, reference import, coin list."""
from coinmark.core.coin_list import CoinListView
from coinmark.core.coin_store import CoinStore

__all__ = ["CoinListView", "CoinStore"]
