from arenalog.models.card import CatalogCard, OwnedCard
from arenalog.models.collection import Collection
from arenalog.models.failure import CatalogIntegrityError, FailureKind, KnownError
from arenalog.models.log_records import (
    CardsRecord,
    InventoryPayload,
    InventoryRecord,
    LogSnapshot,
    Wildcards,
)

__all__ = [
    "CardsRecord",
    "CatalogCard",
    "CatalogIntegrityError",
    "Collection",
    "FailureKind",
    "InventoryPayload",
    "InventoryRecord",
    "KnownError",
    "LogSnapshot",
    "OwnedCard",
    "Wildcards",
]
