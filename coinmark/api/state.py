"""Shared application state (injected into routes)."""
import logging
from pathlib import Path
from typing import Optional, Sequence

from coinmark.config import COINS_PATH, REFERENCE_RESOURCES, RESOURCES_DIR
from coinmark.core.coin_list import CoinListView
from coinmark.core.coin_store import CoinStore
from coinmark.core.importer import PreloadReport, preload_reference_data

logger = logging.getLogger(__name__)


class AppState:
    def __init__(
        self,
        coins_path: Path = COINS_PATH,
        resources: Sequence[str] = REFERENCE_RESOURCES,
        resources_dir: Path = RESOURCES_DIR,
    ) -> None:
        self.store = CoinStore(coins_path)
        self._resources = tuple(resources)
        self._resources_dir = resources_dir
        self._preload: Optional[PreloadReport] = None

    @property
    def initialized(self) -> bool:
        return self._preload is not None

    def initialize(self) -> PreloadReport:
        """Preload reference data into an empty store. Runs once per instance."""
        if self._preload is None:
            self._preload = preload_reference_data(
                self.store, self._resources, self._resources_dir
            )
            logger.info(
                "Startup: preload %s, %d coins inserted",
                self._preload.status,
                self._preload.inserted,
            )
        return self._preload

    def list_view(self, missing_only: bool = False) -> CoinListView:
        return CoinListView(self.store, missing_only=missing_only)


_state = AppState()


def get_state() -> AppState:
    return _state
