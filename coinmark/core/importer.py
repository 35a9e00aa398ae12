"""Import bundled reference data into an empty coin store."""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from coinmark.config import REFERENCE_RESOURCES, RESOURCES_DIR
from coinmark.core.coin_store import CoinStore, StoreError
from coinmark.core.resources import (
    ResourceNotFoundError,
    ResourceUnreadableError,
    read_resource,
)
from coinmark.models.coin import CoinEntry

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(List[CoinEntry])

# ImportOutcome.status
IMPORTED = "imported"
NOT_FOUND = "not_found"
UNREADABLE = "unreadable"
INVALID = "invalid"

# PreloadReport.status
PRELOADED = "preloaded"
SKIPPED = "skipped"
CHECK_FAILED = "check_failed"


@dataclass
class DecodeResult:
    """Decoded entries, or the reason the payload did not match."""
    entries: List[CoinEntry] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ImportOutcome:
    resource: str
    status: str
    inserted: int = 0
    reason: Optional[str] = None


@dataclass
class PreloadReport:
    status: str
    outcomes: List[ImportOutcome] = field(default_factory=list)
    committed: bool = False

    @property
    def inserted(self) -> int:
        return sum(o.inserted for o in self.outcomes)


def decode_entries(data: bytes) -> DecodeResult:
    """Decode a JSON array of entries. All-or-nothing; never raises on bad input."""
    try:
        return DecodeResult(entries=_ENTRIES.validate_json(data))
    except ValidationError as e:
        return DecodeResult(error=str(e))


def import_resource(
    name: str,
    store: CoinStore,
    resources_dir: Path = RESOURCES_DIR,
) -> ImportOutcome:
    """Insert one coin per entry of resource name. Does not commit."""
    logger.info("Import: loading %s.json", name)
    try:
        data = read_resource(name, resources_dir)
    except ResourceNotFoundError as e:
        logger.error("Import: %s", e)
        return ImportOutcome(name, NOT_FOUND, reason=str(e))
    except ResourceUnreadableError as e:
        logger.error("Import: %s", e)
        return ImportOutcome(name, UNREADABLE, reason=str(e))

    result = decode_entries(data)
    if not result.ok:
        logger.error("Import: %s.json does not match the entry shape, skipped:\n%s", name, result.error)
        return ImportOutcome(name, INVALID, reason=result.error)

    for entry in result.entries:
        store.insert(entry.to_coin())
    logger.info("Import: inserted %d coins from %s.json", len(result.entries), name)
    return ImportOutcome(name, IMPORTED, inserted=len(result.entries))


def preload_reference_data(
    store: CoinStore,
    resources: Sequence[str] = REFERENCE_RESOURCES,
    resources_dir: Path = RESOURCES_DIR,
) -> PreloadReport:
    """Populate store from reference resources if it holds no coins yet.

    Existence is probed with a count capped at one. Every resource is tried
    in order even when an earlier one fails, then the store is committed once.
    """
    try:
        existing = store.count(limit=1)
    except StoreError as e:
        logger.error("Preload: failed to check for existing coins: %s", e)
        return PreloadReport(CHECK_FAILED)
    if existing:
        logger.info("Preload: store already contains coins, skipping")
        return PreloadReport(SKIPPED)

    logger.info("Preload: store is empty, importing %s", ", ".join(resources))
    outcomes = [import_resource(name, store, resources_dir) for name in resources]
    committed = store.commit()
    if committed:
        logger.info("Preload: saved %d coins", sum(o.inserted for o in outcomes))
    else:
        logger.error("Preload: failed to save preloaded coins")
    return PreloadReport(PRELOADED, outcomes=outcomes, committed=committed)
