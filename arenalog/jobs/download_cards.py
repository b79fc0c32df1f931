"""
Download Scryfall card catalog.

Run this job before reconciling a collection from the Arena log. The
download is loaded back once saved, so a catalog that cannot be indexed
fails here rather than on the next log scan.
"""

import argparse
import asyncio
import logging
from pathlib import Path

from arenalog.services.card_catalog import download_card_catalog, load_card_catalog

logger = logging.getLogger(__name__)


async def run_download(output_path: Path | None = None) -> Path:
    """Download the Scryfall card catalog and check that it loads."""
    logger.info("Downloading Scryfall card catalog...")

    try:
        path = await download_card_catalog(output_path)
    except Exception as e:
        logger.error("Failed to download card catalog: %s", e)
        raise

    catalog = load_card_catalog(path)
    logger.info(
        "Catalog at %s has %d cards, %d with Arena IDs",
        path,
        len(catalog),
        catalog.arena_id_count,
    )
    return path


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Download the Scryfall card catalog.")
    parser.add_argument("--output", type=Path, help="Where to save the catalog JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_download(args.output))


if __name__ == "__main__":
    main()
