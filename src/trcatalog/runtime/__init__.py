"""Runtime lookup: TranslationDict and its load diagnostics.

Python 3.13+.
"""

from .dictionary import (
    CatalogLoadResult,
    FallbackInfo,
    LoadSummary,
    TranslationDict,
    new_dict,
)

__all__ = [
    "CatalogLoadResult",
    "FallbackInfo",
    "LoadSummary",
    "TranslationDict",
    "new_dict",
]
