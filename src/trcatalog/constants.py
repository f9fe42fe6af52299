"""Shared constants for trcatalog.

Centralizes the values that both halves of the pipeline (extraction/sync
and the runtime dictionary) must agree on. Placing them here avoids
circular imports between subpackages.

Constants are grouped by domain:
- Keys: composite message key construction
- Catalog files: naming, encoding and layout of .tr files
- Extraction: marker function and source file selection

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Keys
    "KEY_DELIMITER",
    # Catalog files
    "CATALOG_SUFFIX",
    "CATALOG_ENCODING",
    "CATALOG_INDENT",
    "MESSAGES_FIELD",
    # Extraction
    "DEFAULT_MARKER",
    "DEFAULT_SOURCE_SUFFIXES",
]

# ============================================================================
# KEYS
# ============================================================================

# Composite keys look like "__<source>__<ctx1>__<ctx2>__". Extraction and
# runtime lookup both build keys through trcatalog.keys.message_key, so this
# value must never differ between the two sides.
KEY_DELIMITER: str = "__"

# ============================================================================
# CATALOG FILES
# ============================================================================

# Catalog file names end with "-<locale>.tr".
CATALOG_SUFFIX: str = ".tr"

CATALOG_ENCODING: str = "utf-8"

# Written catalogs are edited by translators; keep them readable.
CATALOG_INDENT: int = 2

# Top-level field holding the flat message list.
MESSAGES_FIELD: str = "Messages"

# ============================================================================
# EXTRACTION
# ============================================================================

DEFAULT_MARKER: str = "tr"

DEFAULT_SOURCE_SUFFIXES: tuple[str, ...] = (".py",)
