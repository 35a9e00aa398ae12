"""Coin record and the reference-data entry it is imported from."""
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(eq=False)
class Coin:
    """One collectible coin and whether it is in the collection.

    Identity is the generated ``id``; two coins with the same name, series,
    year and mint mark are still different records.
    """
    name: str
    series: str
    year: int
    mint_mark: Optional[str] = None
    is_collected: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def has_mint_mark(self) -> bool:
        return bool(self.mint_mark)


class CoinEntry(BaseModel):
    """Entry in a bundled reference file (no id, no collected flag)."""
    model_config = ConfigDict(strict=True)

    name: str
    series: str
    year: int
    mint_mark: Optional[str] = Field(default=None, alias="mintMark")

    def to_coin(self) -> Coin:
        return Coin(
            name=self.name,
            series=self.series,
            year=self.year,
            mint_mark=self.mint_mark,
            is_collected=False,
        )


class StoredCoin(BaseModel):
    """Coin row as written to the collection file."""
    model_config = ConfigDict(strict=True)

    id: str
    name: str
    series: str
    year: int
    mint_mark: Optional[str] = None
    is_collected: bool = False

    @classmethod
    def from_coin(cls, coin: Coin) -> "StoredCoin":
        return cls(
            id=coin.id,
            name=coin.name,
            series=coin.series,
            year=coin.year,
            mint_mark=coin.mint_mark,
            is_collected=coin.is_collected,
        )

    def to_coin(self) -> Coin:
        return Coin(
            id=self.id,
            name=self.name,
            series=self.series,
            year=self.year,
            mint_mark=self.mint_mark,
            is_collected=self.is_collected,
        )


class StoredCollection(BaseModel):
    """Top-level layout of the collection file: ``{"coins": [...]}``."""
    model_config = ConfigDict(strict=True)

    coins: List[StoredCoin] = Field(default_factory=list)
