"""Type aliases for the catalog domain.

Provides semantic type aliases used throughout trcatalog and by user code
when annotating lookup call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "MessageKey",
    "SourceText",
]

LocaleCode: TypeAlias = str
"""Locale identifier in 'xx' or 'xx_YY' form (e.g., 'de', 'fr_FR')."""

MessageKey: TypeAlias = str
"""Join key derived from source text and context (see trcatalog.keys)."""

SourceText: TypeAlias = str
"""Untranslated source string as written at the marker call site."""
