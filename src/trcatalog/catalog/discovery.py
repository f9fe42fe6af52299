"""Filesystem discovery for catalog and source files.

Both the runtime dictionary and the extractor walk a directory tree. The
walk is depth-first with entries sorted by name, so the order in which
files are visited, and therefore which catalog wins a key collision, does
not depend on the platform's directory listing order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from trcatalog.constants import CATALOG_SUFFIX

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from trcatalog.catalog.types import LocaleCode

__all__ = [
    "catalog_file_name",
    "iter_files",
    "matching_locale",
]


def iter_files(root: str | Path) -> Iterator[Path]:
    """Yield every regular file below root, depth-first in name order.

    Each directory is listed when the walk reaches it, so an unreadable
    sub-directory fails the walk at that point. Symlinked directories are
    followed, except a link back into a directory that is already on the
    current walk path.

    Raises:
        OSError: If root or any sub-directory cannot be listed
    """
    return _walk(Path(root), frozenset())


def _walk(directory: Path, ancestors: frozenset[Path]) -> Iterator[Path]:
    ancestors = ancestors | {directory.resolve()}
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            if entry.resolve() not in ancestors:
                yield from _walk(entry, ancestors)
        elif entry.is_file():
            yield entry


def catalog_file_name(base_name: str, locale: LocaleCode) -> str:
    """Return the catalog file name for a base name and locale.

    Example:
        >>> catalog_file_name("app", "de_DE")
        'app-de_DE.tr'
    """
    return f"{base_name}-{locale}{CATALOG_SUFFIX}"


def matching_locale(file_name: str, locales: Iterable[LocaleCode]) -> LocaleCode | None:
    """Return the first locale whose catalog suffix ends file_name.

    Matching is exact and case-sensitive: ``-<locale>.tr`` must be the
    literal end of the name.

    Example:
        >>> matching_locale("app-de.tr", ("de_DE", "de"))
        'de'
        >>> matching_locale("app-DE.tr", ("de",)) is None
        True
    """
    for locale in locales:
        if file_name.endswith(f"-{locale}{CATALOG_SUFFIX}"):
            return locale
    return None
