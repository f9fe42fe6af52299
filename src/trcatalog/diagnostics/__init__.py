"""Diagnostic system for trcatalog errors.

Provides structured error diagnostics with codes, file locations and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogDecodeError,
    InvalidLocaleError,
    SourceParseError,
    SyncConfigError,
    TrCatalogError,
)

__all__ = [
    "CatalogDecodeError",
    "Diagnostic",
    "DiagnosticCode",
    "InvalidLocaleError",
    "SourceParseError",
    "SyncConfigError",
    "TrCatalogError",
]
