"""Extraction/sync pipeline: one extraction, one catalog per target locale.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from trcatalog.extraction.extractor import Extractor
from trcatalog.locale_utils import is_valid_locale, locale_display_name
from trcatalog.sync.syncer import SyncResult, sync_catalog

if TYPE_CHECKING:
    from trcatalog.sync.config import SyncConfig

__all__ = ["SyncSummary", "run_sync"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncSummary:
    """Immutable aggregate of one pipeline run.

    Attributes:
        messages: Number of distinct messages extracted
        results: Per-locale sync results, in configured locale order
    """

    messages: int
    results: tuple[SyncResult, ...]

    @property
    def dropped(self) -> int:
        """Translations dropped across all catalogs."""
        return sum(r.dropped for r in self.results)

    @property
    def paths(self) -> tuple[str, ...]:
        """Written catalog paths."""
        return tuple(r.path for r in self.results)


def _check_target_locale(locale: str) -> None:
    # Soft checks only: catalogs are written for exactly the requested names.
    if not is_valid_locale(locale):
        logger.warning(
            "Target locale %r is not of the form 'xx' or 'xx_YY'; "
            "no TranslationDict will ever load its catalog",
            locale,
        )
    elif locale_display_name(locale) is None:
        logger.warning("Target locale %r is not known to CLDR", locale)


def run_sync(config: SyncConfig, extractor: Extractor | None = None) -> SyncSummary:
    """Extract messages from the configured tree and sync every target catalog.

    Args:
        config: Run configuration
        extractor: Extractor to use (default: built from config.marker and config.suffixes)

    Returns:
        SyncSummary of the run

    Raises:
        OSError: On any read or write failure; later locales are not synced
        SourceParseError: If a source file is not valid Python
        CatalogDecodeError: If an existing catalog file is corrupt
    """
    if extractor is None:
        extractor = Extractor(marker=config.marker, suffixes=config.suffixes)

    extracted = extractor.scan(config.root_directory)

    results: list[SyncResult] = []
    for locale in config.locales:
        _check_target_locale(locale)
        results.append(sync_catalog(config.catalog_path(locale), extracted))

    return SyncSummary(messages=len(extracted), results=tuple(results))
