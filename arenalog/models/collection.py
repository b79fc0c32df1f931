from dataclasses import dataclass, field

from arenalog.models.card import CatalogCard, OwnedCard


@dataclass
class Collection:
    """
    A player's reconciled card collection.

    Cards are keyed by catalog printing. Adding a card that is already
    present sums the counts, so distinct Arena IDs that resolve to the same
    printing merge into one entry.
    """

    cards: dict[CatalogCard, int] = field(default_factory=dict)

    def add_card(self, card: CatalogCard, quantity: int = 1) -> None:
        """Add cards to collection."""
        self.cards[card] = self.cards.get(card, 0) + quantity

    def by_name(self) -> dict[str, int]:
        """Owned counts summed per card name across printings."""
        totals: dict[str, int] = {}
        for card, count in self.cards.items():
            totals[card.name] = totals.get(card.name, 0) + count
        return totals

    def owned_cards(self) -> list[OwnedCard]:
        """Owned cards sorted by name, then catalog ID."""
        return [
            OwnedCard(card=card, count=count)
            for card, count in sorted(
                self.cards.items(), key=lambda item: (item[0].name, item[0].catalog_id)
            )
        ]

    def total_cards(self) -> int:
        """Total number of cards in collection."""
        return sum(self.cards.values())

    def unique_cards(self) -> int:
        """Number of unique printings in collection."""
        return len(self.cards)
