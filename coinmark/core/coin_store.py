"""Persist and load the coin collection (JSON)."""
import json
import logging
import threading
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from coinmark.models.coin import Coin, StoredCoin, StoredCollection

logger = logging.getLogger(__name__)

SortKey = Tuple[str, str]  # (field, "asc" | "desc")

_SORTABLE_FIELDS = ("name", "series", "year", "mint_mark", "is_collected")


class StoreError(Exception):
    """Stored collection could not be read, or a query against it is invalid."""


def coin_to_dict(c: Coin) -> dict:
    return StoredCoin.from_coin(c).model_dump()


class CoinStore:
    """JSON-file backed coin collection.

    Loads lazily on first access. Inserted coins are pending until
    ``commit()`` writes the whole collection back to disk. Query results
    hold the store's own ``Coin`` objects, so changes made through the store
    show up in lists returned earlier.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._coins: Optional[List[Coin]] = None
        self._pending: List[Coin] = []
        # Reentrant: insert/commit hold it while loading
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def _load(self) -> List[Coin]:
        with self._lock:
            if self._coins is not None:
                return self._coins
            if not self._path.exists():
                self._coins = []
                return self._coins
            try:
                text = self._path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise StoreError(f"cannot read {self._path}: {e}") from e
            try:
                stored = StoredCollection.model_validate_json(text)
            except ValidationError as e:
                raise StoreError(f"malformed coin data in {self._path}: {e}") from e
            self._coins = [row.to_coin() for row in stored.coins]
            logger.info("Store: loaded %d coins from %s", len(self._coins), self._path)
            return self._coins

    def insert(self, coin: Coin) -> None:
        """Add a coin to the collection; persisted on the next commit."""
        with self._lock:
            self._load().append(coin)
            self._pending.append(coin)

    def count(
        self,
        predicate: Optional[Callable[[Coin], bool]] = None,
        limit: Optional[int] = None,
    ) -> int:
        """Count coins matching predicate (all when None), stopping at limit."""
        if limit is not None and limit <= 0:
            return 0
        n = 0
        for c in self._load():
            if predicate is not None and not predicate(c):
                continue
            n += 1
            if limit is not None and n >= limit:
                break
        return n

    def query(self, sort: Sequence[SortKey] = ()) -> List[Coin]:
        """Return coins ordered by sort keys; earlier keys take precedence."""
        out = list(self._load())
        # Stable sort applied from the least significant key up
        for field_name, direction in reversed(list(sort)):
            if field_name not in _SORTABLE_FIELDS:
                raise StoreError(f"cannot sort by {field_name!r}")
            if direction not in ("asc", "desc"):
                raise StoreError(f"unknown sort direction {direction!r}")
            out.sort(
                key=lambda c, f=field_name: _sort_value(getattr(c, f)),
                reverse=direction == "desc",
            )
        return out

    def get(self, coin_id: str) -> Optional[Coin]:
        """Return coin by id or None."""
        for c in self._load():
            if c.id == coin_id:
                return c
        return None

    def commit(self) -> bool:
        """Write the collection to disk. Returns False (and logs) on failure."""
        with self._lock:
            try:
                coins = self._load()
                data = {"coins": [coin_to_dict(c) for c in coins]}
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            except (StoreError, OSError) as e:
                logger.error("Store: commit to %s failed: %s", self._path, e)
                return False
            written = len(self._pending)
            self._pending.clear()
        logger.info("Store: committed %d coins (%d new) to %s", len(coins), written, self._path)
        return True

    def toggle_collected(self, coin_id: str) -> Optional[Coin]:
        """Flip is_collected for coin_id and save. Returns the coin or None."""
        coin = self.get(coin_id)
        if coin is None:
            return None
        with self._lock:
            coin.is_collected = not coin.is_collected
        if not self.commit():
            logger.warning("Store: toggle of %s kept in memory only", coin_id)
        return coin


def _sort_value(value):
    # None mint marks sort before any letter
    if value is None:
        return (0, "")
    return (1, value)
