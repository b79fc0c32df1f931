"""
Log record models.

Payload shapes of the two PlayerInventory responses Arena writes to
Player.log, plus the snapshot that holds the latest of each.
"""

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

# Arena writes plain JSON integers; booleans, floats and numeric strings are rejected
Count = Annotated[int, Field(strict=True, ge=0)]

_COUNTS = TypeAdapter(dict[str | Count, Count])


class CardsRecord(BaseModel):
    """
    `PlayerInventory.GetPlayerCardsV3` response.

    `payload` maps Arena card IDs to owned counts. Arena writes the IDs as
    JSON object keys (decimal strings); they are parsed to ints here.
    """

    id: int
    payload: dict[int, int]

    @field_validator("payload", mode="before")
    @classmethod
    def merge_arena_ids(cls, value: Any) -> dict[int, int]:
        """Parse Arena ID keys, summing counts of keys like "123" and "0123"."""
        merged: dict[int, int] = {}
        for key, count in _COUNTS.validate_python(value).items():
            if isinstance(key, str):
                if not (key.isascii() and key.isdigit()):
                    raise ValueError(f"Arena ID {key!r} is not a decimal integer")
                key = int(key)
            merged[key] = merged.get(key, 0) + count
        return merged


class InventoryPayload(BaseModel):
    """Wildcards and currencies. Missing fields default to zero."""

    model_config = ConfigDict(populate_by_name=True)

    wc_common_count: Count = Field(default=0, alias="wcCommon")
    wc_uncommon_count: Count = Field(default=0, alias="wcUncommon")
    wc_rare_count: Count = Field(default=0, alias="wcRare")
    wc_mythic_count: Count = Field(default=0, alias="wcMythic")
    gems: Count = 0
    gold: Count = 0


class InventoryRecord(BaseModel):
    """`PlayerInventory.GetPlayerInventory` response."""

    id: int
    payload: InventoryPayload


@dataclass(frozen=True)
class Wildcards:
    """Wildcards available for crafting."""

    common: int = 0
    uncommon: int = 0
    rare: int = 0
    mythic: int = 0

    def total(self) -> int:
        """Total wildcards available."""
        return self.common + self.uncommon + self.rare + self.mythic


@dataclass(frozen=True)
class LogSnapshot:
    """
    The most recent inventory state found in a log.

    Attributes:
        player_cards: Last parsed GetPlayerCardsV3 record, if any
        player_inventory: Last parsed GetPlayerInventory record, if any
    """

    player_cards: CardsRecord | None = None
    player_inventory: InventoryRecord | None = None

    def _inventory(self) -> InventoryPayload:
        if self.player_inventory is None:
            return InventoryPayload()
        return self.player_inventory.payload

    def wc_common_count(self) -> int:
        return self._inventory().wc_common_count

    def wc_uncommon_count(self) -> int:
        return self._inventory().wc_uncommon_count

    def wc_rare_count(self) -> int:
        return self._inventory().wc_rare_count

    def wc_mythic_count(self) -> int:
        return self._inventory().wc_mythic_count

    def gems(self) -> int:
        return self._inventory().gems

    def gold(self) -> int:
        return self._inventory().gold

    def wildcards(self) -> Wildcards:
        """All four wildcard counts."""
        payload = self._inventory()
        return Wildcards(
            common=payload.wc_common_count,
            uncommon=payload.wc_uncommon_count,
            rare=payload.wc_rare_count,
            mythic=payload.wc_mythic_count,
        )
