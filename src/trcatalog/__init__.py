"""trcatalog - Source-keyed translation catalogs for Python programs.

Two halves share one catalog format and one key scheme. The sync tool
extracts ``tr("Source", "context", ...)`` call sites from a source tree
and maintains one ``<name>-<locale>.tr`` catalog per locale, keeping
translations that translators already entered. At runtime a
TranslationDict loads the catalogs for a locale chain (``de_AT`` falls
back to ``de``) and maps source text plus context to a translation.

Public API:
    TranslationDict - Runtime lookup for one locale chain
    new_dict - Factory for TranslationDict
    resolve_locale_chain - Validate a locale and expand its fallback chain
    message_key - Key shared by extraction and lookup
    Extractor - Source tree -> message set
    SyncConfig, run_sync - Extraction/sync pipeline

Exceptions:
    TrCatalogError - Base exception class
    InvalidLocaleError - Malformed locale string
    CatalogDecodeError - Corrupt catalog file
    SourceParseError - Unparseable source file during extraction
    SyncConfigError - Invalid sync configuration

Submodules:
    trcatalog.catalog - Message model, codec and file discovery
    trcatalog.runtime - TranslationDict and load diagnostics
    trcatalog.extraction - Call-site scanning and message extraction
    trcatalog.sync - Catalog synchronization
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    CatalogDecodeError,
    InvalidLocaleError,
    SourceParseError,
    SyncConfigError,
    TrCatalogError,
)
from .extraction import Extractor
from .keys import message_key
from .locale_utils import resolve_locale_chain
from .runtime import TranslationDict, new_dict
from .sync import SyncConfig, run_sync

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("trcatalog")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogDecodeError",
    "Extractor",
    "InvalidLocaleError",
    "SourceParseError",
    "SyncConfig",
    "SyncConfigError",
    "TrCatalogError",
    "TranslationDict",
    "__version__",
    "message_key",
    "new_dict",
    "resolve_locale_chain",
    "run_sync",
]
