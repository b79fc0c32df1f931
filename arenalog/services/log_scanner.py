"""
Arena Log Scanner.

Extracts the latest PlayerInventory records from Arena's Player.log.

The log is free text interleaved from many threads. The two responses we
care about each occupy a single line:

    [UnityCrossThreadLogger]<== PlayerInventory.GetPlayerCardsV3 {"id":7,"payload":{...}}
    [UnityCrossThreadLogger]<== PlayerInventory.GetPlayerInventory {"id":8,"payload":{...}}

Every matching line is parsed, and the last one that parses wins. A line
whose payload does not deserialize (truncated writes are common) is dropped
and scanning continues.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

from pydantic import ValidationError

from arenalog.models.log_records import CardsRecord, InventoryRecord, LogSnapshot

logger = logging.getLogger(__name__)

_RecordT = TypeVar("_RecordT", CardsRecord, InventoryRecord)


class LogScanner:
    """
    Scanner for Arena client logs.

    Usage:
        scanner = LogScanner()
        snapshot = scanner.scan(log_text)
        snapshot.wc_rare_count()
    """

    _CARDS_PATTERN = re.compile(r"<== PlayerInventory\.GetPlayerCardsV3\s+(?P<data>.*)$")

    _INVENTORY_PATTERN = re.compile(r"<== PlayerInventory\.GetPlayerInventory\s+(?P<data>.*)$")

    def scan(self, log: str | Iterable[str]) -> LogSnapshot:
        """
        Scan log text for the latest inventory records.

        Args:
            log: Full log text, or an iterable of lines (e.g. an open file)

        Returns:
            LogSnapshot holding the last parsed record of each kind.
            Never raises for malformed content.
        """
        # Split on "\n" only; JSON strings may hold other Unicode line breaks
        lines = log.split("\n") if isinstance(log, str) else log

        player_cards: CardsRecord | None = None
        player_inventory: InventoryRecord | None = None

        for line_num, line in enumerate(lines, 1):
            match = self._CARDS_PATTERN.search(line)
            if match:
                cards = self._parse_payload(CardsRecord, match.group("data"), line_num)
                if cards is not None:
                    player_cards = cards
                continue

            match = self._INVENTORY_PATTERN.search(line)
            if match:
                inventory = self._parse_payload(InventoryRecord, match.group("data"), line_num)
                if inventory is not None:
                    player_inventory = inventory

        return LogSnapshot(player_cards=player_cards, player_inventory=player_inventory)

    def _parse_payload(
        self,
        model: type[_RecordT],
        data: str,
        line_num: int,
    ) -> _RecordT | None:
        """Deserialize a payload, returning None if it is malformed."""
        try:
            return model.model_validate_json(data)
        except ValidationError as e:
            logger.debug(
                "Skipping malformed %s payload at line %d: %d error(s)",
                model.__name__,
                line_num,
                e.error_count(),
            )
            return None


# =============================================================================
# PUBLIC API
# =============================================================================


def scan_log(log: str | Iterable[str]) -> LogSnapshot:
    """
    Scan Arena log text.

    This is a convenience function that creates a scanner and scans.
    """
    return LogScanner().scan(log)


def scan_log_file(path: Path) -> LogSnapshot:
    """
    Scan an Arena log file.

    Args:
        path: Path to Player.log

    Raises:
        FileNotFoundError: If the log file doesn't exist
    """
    with open(path, encoding="utf-8", errors="replace") as f:
        snapshot = LogScanner().scan(f)

    logger.info(
        "Scanned %s: cards record %s, inventory record %s",
        path,
        "found" if snapshot.player_cards is not None else "missing",
        "found" if snapshot.player_inventory is not None else "missing",
    )
    return snapshot
