"""Enumerations for trcatalog type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class CatalogChange(StrEnum):
    """Effect of a sync pass on one catalog file.

    StrEnum provides automatic string conversion: str(CatalogChange.CREATED) == "created"
    """

    CREATED = "created"
    """Catalog file did not exist before the sync pass."""

    UPDATED = "updated"
    """Catalog file existed and its contents changed."""

    UNCHANGED = "unchanged"
    """Catalog file was rewritten with identical bytes."""


__all__ = [
    "CatalogChange",
]
