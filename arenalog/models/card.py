from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CatalogCard:
    """
    A printed card from the canonical catalog (Scryfall).

    Attributes:
        catalog_id: Scryfall card ID (stable per printing)
        name: Canonical card name, e.g. "Fire // Ice" for split cards
        arena_id: Arena's internal card ID, 0 if the printing has none
        set_code: Set code (e.g., "dmu")
        collector_number: Collector number within set
    """

    catalog_id: str
    name: str
    arena_id: int = 0
    set_code: str = ""
    collector_number: str = ""


@dataclass(frozen=True, slots=True)
class OwnedCard:
    """
    A catalog card paired with owned count.

    Count is the SUM across every Arena ID that resolved to this card.
    """

    card: CatalogCard
    count: int
