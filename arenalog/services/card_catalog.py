"""
Card catalog service.

Loads Scryfall card data and indexes it for Arena ID reconciliation.

The catalog exposes three read-only lookups:
- catalog ID -> card
- card name -> every card with that name, in catalog order
- Arena ID -> (catalog ID, expected name)
"""

import json
import logging
import os
import tempfile
from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import httpx

from arenalog.config import settings
from arenalog.models.card import CatalogCard

logger = logging.getLogger(__name__)

SCRYFALL_BULK_API = "https://api.scryfall.com/bulk-data"
USER_AGENT = "arenalog/0.1"

ArenaIdMapping = Mapping[int, tuple[str, str]]


class CardCatalog:
    """
    Immutable index over catalog cards.

    Built once and shared read-only. If no explicit Arena mapping is
    supplied, it is derived from the cards' own Arena IDs.
    """

    def __init__(
        self,
        cards: Iterable[CatalogCard],
        arena_mapping: ArenaIdMapping | None = None,
    ) -> None:
        by_id: dict[str, CatalogCard] = {}
        by_name: dict[str, list[CatalogCard]] = {}

        for card in cards:
            if card.catalog_id in by_id:
                logger.warning("Duplicate catalog ID %s, keeping first", card.catalog_id)
                continue
            by_id[card.catalog_id] = card
            by_name.setdefault(card.name, []).append(card)

        if arena_mapping is None:
            arena_mapping = _derive_arena_mapping(by_id.values())

        self._by_id = MappingProxyType(by_id)
        self._by_name = MappingProxyType({name: tuple(group) for name, group in by_name.items()})
        self._arena_mapping = MappingProxyType(dict(arena_mapping))

    def __len__(self) -> int:
        return len(self._by_id)

    def lookup_by_id(self, catalog_id: str) -> CatalogCard | None:
        """Get the card with this catalog ID."""
        return self._by_id.get(catalog_id)

    def lookup_by_name(self, name: str) -> tuple[CatalogCard, ...]:
        """Get every card with this exact name, in catalog order."""
        return self._by_name.get(name, ())

    def lookup_arena_id(self, arena_id: int) -> tuple[str, str] | None:
        """Get (catalog ID, expected name) for an Arena ID."""
        return self._arena_mapping.get(arena_id)

    @property
    def arena_id_count(self) -> int:
        """Number of Arena IDs the catalog can resolve or skip."""
        return len(self._arena_mapping)


def _derive_arena_mapping(cards: Iterable[CatalogCard]) -> dict[int, tuple[str, str]]:
    """Build Arena ID -> (catalog ID, name) from the cards' own Arena IDs."""
    mapping: dict[int, tuple[str, str]] = {}
    for card in cards:
        if not card.arena_id:
            continue
        if card.arena_id in mapping:
            logger.warning(
                "Arena ID %d on both %s and %s, keeping first",
                card.arena_id,
                mapping[card.arena_id][0],
                card.catalog_id,
            )
            continue
        mapping[card.arena_id] = (card.catalog_id, card.name)
    return mapping


def _card_from_scryfall(card: dict[str, Any]) -> CatalogCard:
    return CatalogCard(
        catalog_id=str(card["id"]),
        name=str(card["name"]),
        arena_id=int(card.get("arena_id") or 0),
        set_code=str(card.get("set", "")),
        collector_number=str(card.get("collector_number", "")),
    )


def load_arena_mapping(path: Path) -> dict[int, tuple[str, str]]:
    """
    Load an Arena ID mapping file.

    Format: {"<arena id>": ["<catalog id>", "<name>"], ...}
    An empty catalog ID marks an Arena ID with no canonical card.

    Raises:
        FileNotFoundError: If the mapping file doesn't exist
        ValueError: If an entry is malformed
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Arena mapping at {path} must be a JSON object")

    mapping: dict[int, tuple[str, str]] = {}
    for arena_id, entry in raw.items():
        if not (arena_id.isascii() and arena_id.isdigit()):
            raise ValueError(f"Arena mapping key {arena_id!r} is not an Arena ID")
        if not isinstance(entry, list) or len(entry) != 2:
            raise ValueError(
                f"Arena mapping entry for {arena_id} must be [catalog_id, name], got {entry!r}"
            )
        mapping[int(arena_id)] = (str(entry[0]), str(entry[1]))

    return mapping


def load_card_catalog(path: Path | None = None, mapping_path: Path | None = None) -> CardCatalog:
    """
    Load card catalog from Scryfall bulk data.

    Args:
        path: Path to Scryfall bulk JSON. Defaults to the configured data dir.
        mapping_path: Optional Arena mapping file. Without one, the mapping
            is derived from the `arena_id` field of each card.

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        ValueError: If the catalog or mapping file is malformed
    """
    if path is None:
        path = settings.catalog_path

    if not path.exists():
        raise FileNotFoundError(
            f"Card catalog not found at {path}. "
            "Run `python -m arenalog.jobs.download_cards` first."
        )

    with open(path, encoding="utf-8") as f:
        try:
            raw_cards = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(
                f"Card catalog at {path} is not valid JSON ({e}). Download it again."
            ) from e

    cards = [_card_from_scryfall(card) for card in raw_cards if card.get("id") and card.get("name")]
    arena_mapping = load_arena_mapping(mapping_path) if mapping_path is not None else None

    catalog = CardCatalog(cards, arena_mapping)
    logger.info("Loaded %d catalog cards from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def get_card_catalog() -> CardCatalog:
    """
    Get cached card catalog.

    Uses the configured Arena mapping file when it exists.
    Cached after first load.

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
    """
    mapping_path = settings.arena_mapping_path
    return load_card_catalog(mapping_path=mapping_path if mapping_path.exists() else None)


async def _find_default_cards_url(client: httpx.AsyncClient) -> str:
    """Ask the Scryfall bulk-data index where default-cards lives."""
    response = await client.get(SCRYFALL_BULK_API)
    response.raise_for_status()

    for item in response.json()["data"]:
        if item["type"] == "default_cards":
            return str(item["download_uri"])

    raise ValueError("Could not find default_cards bulk data URL")


async def download_card_catalog(output_path: Path | None = None) -> Path:
    """
    Download latest Scryfall default-cards bulk data.

    The file is streamed to a temporary file beside `output_path` and only
    moved into place once complete, so an interrupted download leaves any
    previous catalog untouched.

    Args:
        output_path: Where to save the file. Defaults to the configured catalog path.

    Returns:
        Path to downloaded file.

    Raises:
        ValueError: If bulk data URL not found
        httpx.HTTPError: If download fails
    """
    if output_path is None:
        output_path = settings.catalog_path

    output_path.parent.mkdir(parents=True, exist_ok=True)

    async with httpx.AsyncClient(
        timeout=30.0,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
    ) as client:
        download_url = await _find_default_cards_url(client)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                async with client.stream("GET", download_url, timeout=300.0) as response:
                    response.raise_for_status()
                    async for chunk in response.aiter_bytes(65536):
                        f.write(chunk)
            os.replace(tmp_path, output_path)
        finally:
            tmp_path.unlink(missing_ok=True)

    logger.info("Saved %s to %s", download_url, output_path)
    return output_path
