"""
arenalog services.

Log scanning, catalog lookups and collection reconciliation.
"""

from arenalog.services.card_catalog import (
    CardCatalog,
    download_card_catalog,
    get_card_catalog,
    load_arena_mapping,
    load_card_catalog,
)
from arenalog.services.collection_formatter import format_collection
from arenalog.services.collection_reconciler import (
    CatalogLookup,
    CollectionReconciler,
    ReconciliationResult,
    reconcile_collection,
)
from arenalog.services.log_scanner import LogScanner, scan_log, scan_log_file

__all__ = [
    "CardCatalog",
    "CatalogLookup",
    "CollectionReconciler",
    "LogScanner",
    "ReconciliationResult",
    "download_card_catalog",
    "format_collection",
    "get_card_catalog",
    "load_arena_mapping",
    "load_card_catalog",
    "reconcile_collection",
    "scan_log",
    "scan_log_file",
]
