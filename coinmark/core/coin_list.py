"""Coin list: sorted snapshot of the store, missing-only filter, collected toggle."""
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from coinmark.core.coin_store import CoinStore, StoreError
from coinmark.models.coin import Coin

logger = logging.getLogger(__name__)

LIST_SORT = [("series", "asc"), ("year", "asc"), ("name", "asc")]


class CoinNotFoundError(KeyError):
    pass


@dataclass
class SeriesSummary:
    total: int = 0
    collected: int = 0

    @property
    def missing(self) -> int:
        return self.total - self.collected


@dataclass
class CollectionSummary:
    total: int = 0
    collected: int = 0
    series: Dict[str, SeriesSummary] = field(default_factory=dict)

    @property
    def missing(self) -> int:
        return self.total - self.collected


class CoinListView:
    """Rows shown to the user. Recomputed from the store on every call."""

    def __init__(self, store: CoinStore, missing_only: bool = False) -> None:
        self._store = store
        self.missing_only = missing_only

    def _sorted(self) -> List[Coin]:
        try:
            return self._store.query(LIST_SORT)
        except StoreError as e:
            logger.error("List: failed to query coins: %s", e)
            return []

    def rows(self) -> List[Coin]:
        coins = self._sorted()
        if self.missing_only:
            return [c for c in coins if not c.is_collected]
        return coins

    def toggle(self, coin_id: str) -> List[Coin]:
        """Flip is_collected on one coin and return the refreshed rows."""
        try:
            coin = self._store.toggle_collected(coin_id)
        except StoreError as e:
            logger.error("List: failed to toggle %s: %s", coin_id, e)
            coin = None
        if coin is None:
            raise CoinNotFoundError(coin_id)
        logger.debug("List: %s %s is_collected=%s", coin.series, coin.name, coin.is_collected)
        return self.rows()

    def summary(self) -> CollectionSummary:
        out = CollectionSummary()
        for c in self._sorted():
            s = out.series.setdefault(c.series, SeriesSummary())
            s.total += 1
            out.total += 1
            if c.is_collected:
                s.collected += 1
                out.collected += 1
        return out
