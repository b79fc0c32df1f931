"""
Command-line entry point.

Scans an Arena log and prints wildcards, currencies and the reconciled
collection.
"""

import argparse
import logging
import sys
from pathlib import Path

from arenalog.config import settings
from arenalog.models.failure import KnownError
from arenalog.models.log_records import LogSnapshot
from arenalog.services.card_catalog import get_card_catalog, load_card_catalog
from arenalog.services.collection_formatter import format_collection
from arenalog.services.collection_reconciler import reconcile_collection
from arenalog.services.log_scanner import scan_log_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Extract wildcards and card collection from the MTG Arena log.",
    )
    parser.add_argument(
        "log_path",
        nargs="?",
        type=Path,
        default=settings.log_path,
        help="Path to Player.log (default: %(default)s)",
    )
    parser.add_argument(
        "--catalog", type=Path, help="Scryfall bulk JSON (default: configured catalog)"
    )
    parser.add_argument("--arena-mapping", type=Path, help="Arena ID mapping JSON")
    parser.add_argument(
        "--inventory-only",
        action="store_true",
        help="Only print wildcards and currencies",
    )
    return parser


def format_inventory(snapshot: LogSnapshot) -> str:
    """Render wildcard and currency balances."""
    wildcards = snapshot.wildcards()
    return "\n".join(
        [
            f"Wildcards: {wildcards.common} common, {wildcards.uncommon} uncommon, "
            f"{wildcards.rare} rare, {wildcards.mythic} mythic",
            f"Gems: {snapshot.gems()}",
            f"Gold: {snapshot.gold()}",
        ]
    )


def run(args: argparse.Namespace) -> int:
    try:
        snapshot = scan_log_file(args.log_path)
    except FileNotFoundError:
        print(f"Log file not found: {args.log_path}", file=sys.stderr)
        return 1

    print(format_inventory(snapshot))
    if args.inventory_only:
        return 0

    try:
        if args.catalog is not None or args.arena_mapping is not None:
            catalog = load_card_catalog(args.catalog, args.arena_mapping)
        else:
            catalog = get_card_catalog()
        collection = reconcile_collection(snapshot, catalog)
    except (FileNotFoundError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 1
    except KnownError as e:
        logger.error("Reconciliation failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        if e.suggestion:
            print(e.suggestion, file=sys.stderr)
        return 1

    print(
        f"Collection: {collection.total_cards()} cards, "
        f"{len(collection.by_name())} unique names, {collection.unique_cards()} printings"
    )
    text = format_collection(collection)
    if text:
        print(text)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return run(build_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
