"""
Collection Reconciliation Service.

Turns the Arena ID -> count payload of GetPlayerCardsV3 into a collection
of catalog cards.

INVARIANTS:
1. Arena IDs the catalog does not know are SKIPPED, never fatal
2. Catalog inconsistencies are TERMINAL (CatalogIntegrityError)
3. No partial collection on failure
4. Arena IDs resolving to the same printing consolidate (SUM counts)
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from arenalog.models.card import CatalogCard
from arenalog.models.collection import Collection
from arenalog.models.failure import CatalogIntegrityError, FailureKind
from arenalog.models.log_records import CardsRecord, LogSnapshot
from arenalog.services.card_catalog import get_card_catalog

logger = logging.getLogger(__name__)


class CatalogLookup(Protocol):
    """The lookups reconciliation needs from a card catalog."""

    def lookup_by_id(self, catalog_id: str) -> CatalogCard | None: ...

    def lookup_by_name(self, name: str) -> tuple[CatalogCard, ...]: ...

    def lookup_arena_id(self, arena_id: int) -> tuple[str, str] | None: ...


@dataclass
class ReconciliationResult:
    """Result of reconciling an Arena cards payload."""

    collection: Collection
    """Resolved cards with summed counts."""

    skipped: list[tuple[int, str]] = field(default_factory=list)
    """Arena IDs that were skipped, with reason."""


class CollectionReconciler:
    """
    Resolves Arena IDs to catalog cards.

    Resolution is a two-stage lookup: the Arena mapping names a catalog ID
    and the name Arena expects. When the card found by ID carries a
    different name (adventure and split cards), the name index decides,
    taking the first card in catalog order.
    """

    def __init__(self, catalog: CatalogLookup) -> None:
        self._catalog = catalog

    def reconcile(self, player_cards: CardsRecord | None) -> ReconciliationResult:
        """
        Reconcile a cards record against the catalog.

        Args:
            player_cards: Latest GetPlayerCardsV3 record, or None

        Returns:
            ReconciliationResult with the collection and skipped Arena IDs

        Raises:
            CatalogIntegrityError: If the catalog's lookups are inconsistent
        """
        collection = Collection()
        skipped: list[tuple[int, str]] = []

        if player_cards is None:
            return ReconciliationResult(collection=collection, skipped=skipped)

        for arena_id, count in player_cards.payload.items():
            mapped = self._catalog.lookup_arena_id(arena_id)
            if mapped is None:
                logger.warning("Cannot find https://api.scryfall.com/cards/arena/%d", arena_id)
                skipped.append((arena_id, "Arena ID not in catalog"))
                continue

            catalog_id, expected_name = mapped
            if not catalog_id:
                logger.warning("No catalog ID for Arena ID %d", arena_id)
                skipped.append((arena_id, "No catalog ID for Arena ID"))
                continue

            card = self._resolve_card(arena_id, catalog_id, expected_name)
            collection.add_card(card, count)

        return ReconciliationResult(collection=collection, skipped=skipped)

    def _resolve_card(self, arena_id: int, catalog_id: str, expected_name: str) -> CatalogCard:
        """Resolve one mapped Arena ID to a catalog card."""
        card = self._catalog.lookup_by_id(catalog_id)
        if card is None:
            raise CatalogIntegrityError(
                FailureKind.MISSING_CATALOG_ID,
                arena_id=arena_id,
                catalog_id=catalog_id,
                expected_name=expected_name,
            )

        if card.name != expected_name:
            logger.debug(
                'Found card by id w/ name "%s", but expected "%s"',
                card.name,
                expected_name,
            )
            candidates = self._catalog.lookup_by_name(expected_name)
            if not candidates:
                raise CatalogIntegrityError(
                    FailureKind.MISSING_CATALOG_NAME,
                    arena_id=arena_id,
                    catalog_id=catalog_id,
                    expected_name=expected_name,
                )
            card = candidates[0]

        if card.arena_id != 0 and card.arena_id != arena_id:
            logger.error("%s bound to Arena ID %d, got %d", card, card.arena_id, arena_id)
            raise CatalogIntegrityError(
                FailureKind.ARENA_ID_CONFLICT,
                arena_id=arena_id,
                catalog_id=card.catalog_id,
                expected_name=card.name,
                conflicting_arena_id=card.arena_id,
            )

        return card


# =============================================================================
# PUBLIC API
# =============================================================================


def reconcile_collection(
    snapshot: LogSnapshot,
    catalog: CatalogLookup | None = None,
) -> Collection:
    """
    Reconcile a log snapshot's cards record into a collection.

    Args:
        snapshot: Snapshot from the log scanner
        catalog: Catalog to resolve against. Defaults to the cached catalog.

    Raises:
        CatalogIntegrityError: If the catalog's lookups are inconsistent
        FileNotFoundError: If the default catalog has not been downloaded
    """
    if catalog is None:
        catalog = get_card_catalog()

    result = CollectionReconciler(catalog).reconcile(snapshot.player_cards)
    if result.skipped:
        logger.info("Skipped %d unknown Arena IDs", len(result.skipped))
    return result.collection
