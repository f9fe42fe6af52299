"""Runtime translation dictionary with locale-chain fallback.

TranslationDict loads every catalog file below a directory whose name
matches a locale of the requested chain, then answers lookups from memory.

Key architectural decisions:
- Eager loading: all matching catalogs are read at construction, so a
  bad locale, an unreadable directory or a corrupt catalog fails before
  any lookup is possible
- Immutable after construction: no mutation methods, no re-scanning
- Lookups never fail: a miss returns the source string unchanged

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from trcatalog.catalog.codec import read_catalog
from trcatalog.catalog.discovery import iter_files, matching_locale
from trcatalog.keys import message_key
from trcatalog.locale_utils import locale_display_name, resolve_locale_chain

if TYPE_CHECKING:
    from collections.abc import Mapping

    from trcatalog.catalog.model import Message
    from trcatalog.catalog.types import LocaleCode, MessageKey

__all__ = [
    "CatalogLoadResult",
    "FallbackInfo",
    "LoadSummary",
    "TranslationDict",
    "new_dict",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when TranslationDict resolves a
    lookup from a less specific locale than the primary one.

    Attributes:
        requested_locale: The primary (most specific) locale of the chain
        resolved_locale: The locale whose catalogs held the translation
        key: The message key that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.key!r} from {info.resolved_locale} "
        ...           f"(requested {info.requested_locale})")
        >>> d = TranslationDict("translations", "de_AT", on_fallback=log_fallback)
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    key: MessageKey


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Result of loading one catalog file.

    Attributes:
        locale: Chain locale the file was loaded into
        path: Catalog file path
        entries: Number of message records in the file
        translated: Number of records with a non-empty translation
    """

    locale: LocaleCode
    path: str
    entries: int
    translated: int


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of catalog loads from TranslationDict construction.

    Attributes:
        results: Individual load results, in load order
    """

    results: tuple[CatalogLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(files={self.files_loaded}, "
            f"entries={self.total_entries}, "
            f"translated={self.total_translated})"
        )

    @property
    def files_loaded(self) -> int:
        """Number of catalog files loaded."""
        return len(self.results)

    @property
    def total_entries(self) -> int:
        """Number of message records across all files."""
        return sum(r.entries for r in self.results)

    @property
    def total_translated(self) -> int:
        """Number of translated records across all files (before key merging)."""
        return sum(r.translated for r in self.results)

    def get_by_locale(self, locale: LocaleCode) -> tuple[CatalogLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)


class TranslationDict:
    """Translations for one locale chain, loaded from a catalog directory.

    The directory is scanned recursively for ``*-<locale>.tr`` files, one
    pass for the whole chain. Locale ``en_US`` has chain ``("en_US", "en")``,
    so ``foo-en_US.tr``, ``foo-en.tr`` and ``sub/bar-en.tr`` are all picked
    up; ``foo-en_GB.tr`` is not.

    Example:
        >>> d = TranslationDict("translations", "de_DE")
        >>> d.translation("Hello")
        'Hallo'
        >>> d.translation("Exit", "menu")
        'Beenden'
        >>> d.translation("Not in any catalog")
        'Not in any catalog'
    """

    __slots__ = (
        "_dir_path",
        "_load_results",
        "_locales",
        "_on_fallback",
        "_translations",
    )

    def __init__(
        self,
        dir_path: str | Path,
        locale: str,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Load all catalogs for the locale chain of locale.

        Args:
            dir_path: Directory scanned recursively for catalog files
            locale: Requested locale, 'xx' or 'xx_YY'
            on_fallback: Optional callback invoked when a lookup is satisfied
                by a fallback locale instead of the requested one

        Raises:
            InvalidLocaleError: If locale is malformed (checked before any I/O)
            OSError: If the directory tree cannot be traversed or a file read
            CatalogDecodeError: If a matching catalog file is corrupt
        """
        self._locales: tuple[LocaleCode, ...] = resolve_locale_chain(locale)
        self._dir_path = str(dir_path)
        self._on_fallback = on_fallback

        translations: dict[LocaleCode, dict[MessageKey, str]] = {}
        load_results: list[CatalogLoadResult] = []

        for file_path in iter_files(dir_path):
            matched = matching_locale(file_path.name, self._locales)
            if matched is None:
                continue
            messages = read_catalog(file_path)
            self._merge(translations.setdefault(matched, {}), messages)
            result = CatalogLoadResult(
                locale=matched,
                path=str(file_path),
                entries=len(messages),
                translated=sum(1 for m in messages if m.is_translated),
            )
            load_results.append(result)
            logger.debug(
                "Loaded catalog %s into %s (%d entries, %d translated)",
                result.path,
                matched,
                result.entries,
                result.translated,
            )

        self._translations: Mapping[LocaleCode, Mapping[MessageKey, str]] = MappingProxyType(
            {loc: MappingProxyType(keys) for loc, keys in translations.items()}
        )
        self._load_results = tuple(load_results)

        logger.info(
            "TranslationDict initialized for locale %s from %s (%d catalogs, chain=%s)",
            self._locales[0],
            self._dir_path,
            len(self._load_results),
            ",".join(self._locales),
        )

    @staticmethod
    def _merge(target: dict[MessageKey, str], messages: tuple[Message, ...]) -> None:
        # Untranslated records are extraction placeholders and contribute nothing.
        for message in messages:
            if message.is_translated:
                target[message.key] = message.translation

    @property
    def dir_path(self) -> str:
        """Directory the catalogs were loaded from (read-only)."""
        return self._dir_path

    @property
    def locale(self) -> LocaleCode:
        """Most specific locale of the chain (read-only)."""
        return self._locales[0]

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Full locale chain in fallback priority order (read-only)."""
        return self._locales

    @property
    def display_name(self) -> str | None:
        """CLDR display name of the primary locale, or None if CLDR does not know it."""
        return locale_display_name(self._locales[0])

    def _lookup(self, key: MessageKey) -> tuple[LocaleCode, str] | None:
        for locale in self._locales:
            table = self._translations.get(locale)
            if table is not None and key in table:
                return locale, table[key]
        return None

    def translation(self, source: str, *context: str) -> str:
        """Translate source for this dictionary's locale chain.

        Context arguments disambiguate identical source strings. Only an
        exact (source, context) match counts; there is no partial matching
        across context arity.

        Args:
            source: Source text as written at the marker call site
            *context: Context strings, in call-site order

        Returns:
            The first translation found along the chain, or source unchanged
        """
        key = message_key(source, context)
        found = self._lookup(key)
        if found is None:
            return source

        resolved_locale, translated = found
        if self._on_fallback is not None and resolved_locale != self._locales[0]:
            self._on_fallback(
                FallbackInfo(
                    requested_locale=self._locales[0],
                    resolved_locale=resolved_locale,
                    key=key,
                )
            )
        return translated

    def has_translation(self, source: str, *context: str) -> bool:
        """Check if any locale of the chain translates (source, context)."""
        return self._lookup(message_key(source, context)) is not None

    def get_load_summary(self) -> LoadSummary:
        """Get summary of the catalog files loaded at construction."""
        return LoadSummary(results=self._load_results)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"TranslationDict(dir_path={self._dir_path!r}, locales={self._locales!r})"


def new_dict(
    dir_path: str | Path,
    locale: str,
    *,
    on_fallback: Callable[[FallbackInfo], None] | None = None,
) -> TranslationDict:
    """Create a TranslationDict; see TranslationDict.__init__ for errors raised."""
    return TranslationDict(dir_path, locale, on_fallback=on_fallback)
