"""
Collection Formatter.

Renders a reconciled collection as Arena-style card lines.
"""

from arenalog.models.card import OwnedCard
from arenalog.models.collection import Collection


def format_collection(collection: Collection) -> str:
    """
    Format a collection as one Arena-style line per printing.

    Lines are sorted by card name, then catalog ID.
    """
    return "\n".join(_format_card_line(owned) for owned in collection.owned_cards())


def _format_card_line(owned: OwnedCard) -> str:
    """Format a single card line in Arena format."""
    card = owned.card
    if not card.set_code:
        return f"{owned.count} {card.name}"
    return f"{owned.count} {card.name} ({card.set_code.upper()}) {card.collector_number}".rstrip()
