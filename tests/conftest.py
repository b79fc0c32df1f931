import json
from pathlib import Path

import pytest

from arenalog.models.card import CatalogCard
from arenalog.services.card_catalog import CardCatalog, get_card_catalog


@pytest.fixture(autouse=True)
def clear_catalog_cache():
    """Drop the cached default catalog between tests."""
    get_card_catalog.cache_clear()
    yield
    get_card_catalog.cache_clear()


@pytest.fixture
def catalog_cards() -> list[CatalogCard]:
    """Catalog cards covering plain, adventure and reprinted names."""
    return [
        CatalogCard(catalog_id="c1", name="Alpha", set_code="dmu", collector_number="1"),
        CatalogCard(catalog_id="c2", name="Beta", set_code="dmu", collector_number="2"),
        CatalogCard(catalog_id="stomp", name="Stomp", set_code="eld", collector_number="115"),
        CatalogCard(
            catalog_id="bg-eld",
            name="Bonecrusher Giant // Stomp",
            set_code="eld",
            collector_number="115",
        ),
        CatalogCard(
            catalog_id="bg-sta",
            name="Bonecrusher Giant // Stomp",
            set_code="sta",
            collector_number="41",
        ),
        CatalogCard(
            catalog_id="c3",
            name="Gamma",
            arena_id=300,
            set_code="neo",
            collector_number="3",
        ),
    ]


@pytest.fixture
def arena_mapping() -> dict[int, tuple[str, str]]:
    """Arena ID -> (catalog ID, expected name)."""
    return {
        123: ("c1", "Alpha"),
        456: ("c2", "Beta"),
        457: ("c2", "Beta"),
        70140: ("stomp", "Bonecrusher Giant // Stomp"),
        300: ("c3", "Gamma"),
        500: ("", "Unmapped Token"),
    }


@pytest.fixture
def catalog(
    catalog_cards: list[CatalogCard], arena_mapping: dict[int, tuple[str, str]]
) -> CardCatalog:
    return CardCatalog(catalog_cards, arena_mapping)


@pytest.fixture
def scryfall_cards() -> list[dict]:
    """Sample Scryfall bulk data."""
    return [
        {
            "id": "c1",
            "name": "Alpha",
            "set": "dmu",
            "collector_number": "1",
            "rarity": "common",
        },
        {
            "id": "c2",
            "name": "Beta",
            "set": "dmu",
            "collector_number": "2",
            "rarity": "rare",
            "arena_id": 456,
        },
        {
            "id": "c3",
            "name": "Gamma",
            "set": "neo",
            "collector_number": "3",
            "rarity": "mythic",
            "arena_id": 300,
        },
    ]


@pytest.fixture
def catalog_file(scryfall_cards: list[dict], tmp_path: Path) -> Path:
    path = tmp_path / "default-cards.json"
    path.write_text(json.dumps(scryfall_cards), encoding="utf-8")
    return path


@pytest.fixture
def mapping_file(tmp_path: Path) -> Path:
    path = tmp_path / "arena-mapping.json"
    path.write_text(
        json.dumps(
            {
                "123": ["c1", "Alpha"],
                "456": ["c2", "Beta"],
                "300": ["c3", "Gamma"],
                "500": ["", "Unmapped Token"],
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_log() -> str:
    """Player.log excerpt with two inventory snapshots."""
    return "\n".join(
        [
            "[UnityCrossThreadLogger]10/18/2026 9:00:01 AM",
            '[UnityCrossThreadLogger]<== PlayerInventory.GetPlayerCardsV3 '
            '{"id":1,"payload":{"123":1}}',
            '[UnityCrossThreadLogger]<== PlayerInventory.GetPlayerInventory {"id":2,"payload":'
            '{"wcCommon":10,"wcUncommon":5,"wcRare":1,"wcMythic":0,"gems":100,"gold":250}}',
            "[UnityCrossThreadLogger]==> Event.GetPlayerCoursesV2 {}",
            '[UnityCrossThreadLogger]<== PlayerInventory.GetPlayerCardsV3 '
            '{"id":3,"payload":{"123":4,"456":2}}',
            '[UnityCrossThreadLogger]<== PlayerInventory.GetPlayerInventory {"id":4,"payload":'
            '{"wcCommon":12,"wcUncommon":6,"wcRare":3,"wcMythic":1,"gems":1500,"gold":4000,'
            '"vaultProgress":12.5}}',
        ]
    )
