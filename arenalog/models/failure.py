"""
Failure classification.

Per-item problems (an Arena ID the catalog does not know, a truncated log
line) are skipped and logged where they occur. Everything raised from this
module is terminal for the operation that raised it.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Catalog integrity violations
    MISSING_CATALOG_ID = "missing_catalog_id"
    MISSING_CATALOG_NAME = "missing_catalog_name"
    ARENA_ID_CONFLICT = "arena_id_conflict"


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class CatalogIntegrityError(KnownError):
    """
    The catalog's lookup tables disagree with each other.

    Raised during reconciliation when the arena mapping points at a card
    the catalog cannot produce, or when two distinct Arena IDs collapse onto
    a printing that already carries its own Arena ID. Continuing would
    misattribute counts, so no partial collection is returned.
    """

    def __init__(
        self,
        kind: FailureKind,
        arena_id: int,
        catalog_id: str,
        expected_name: str,
        conflicting_arena_id: int | None = None,
    ):
        self.arena_id = arena_id
        self.catalog_id = catalog_id
        self.expected_name = expected_name
        self.conflicting_arena_id = conflicting_arena_id

        if kind == FailureKind.MISSING_CATALOG_ID:
            message = f"Arena ID {arena_id} maps to unknown catalog ID {catalog_id!r}"
        elif kind == FailureKind.MISSING_CATALOG_NAME:
            message = f"Arena ID {arena_id} expects unknown card name {expected_name!r}"
        else:
            message = (
                f"Arena ID {arena_id} resolved to {expected_name!r} "
                f"which already has Arena ID {conflicting_arena_id}"
            )

        super().__init__(
            kind=kind,
            message=message,
            detail=f"catalog_id={catalog_id}",
            suggestion="Re-download the card catalog and arena mapping.",
        )
