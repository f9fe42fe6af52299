"""Catalog package: message model, file codec and discovery.

Submodules:
    types     - PEP 695 type aliases (LocaleCode, MessageKey, SourceText)
    model     - Location and Message records
    codec     - load_catalog/dump_catalog and file helpers
    discovery - Sorted directory walk and catalog file name matching

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from trcatalog.catalog.codec import (
    dump_catalog,
    load_catalog,
    read_catalog,
    replace_lone_surrogates,
    write_bytes_atomic,
    write_catalog,
)
from trcatalog.catalog.discovery import catalog_file_name, iter_files, matching_locale
from trcatalog.catalog.model import Location, Message
from trcatalog.catalog.types import LocaleCode, MessageKey, SourceText

__all__ = [
    # Model
    "Location",
    "Message",
    # Codec
    "dump_catalog",
    "load_catalog",
    "read_catalog",
    "replace_lone_surrogates",
    "write_bytes_atomic",
    "write_catalog",
    # Discovery
    "catalog_file_name",
    "iter_files",
    "matching_locale",
    # Type aliases
    "LocaleCode",
    "MessageKey",
    "SourceText",
]
