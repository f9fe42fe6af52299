"""Locale utilities: validation, fallback chains and CLDR lookups.

Locale strings are accepted exactly as written. There is no BCP-47 to
POSIX conversion and no case-folding: a catalog named ``app-de_DE.tr`` is
only ever matched by the locale ``de_DE``.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from trcatalog.diagnostics import InvalidLocaleError

if TYPE_CHECKING:
    from babel import Locale

    from trcatalog.catalog.types import LocaleCode

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "is_valid_locale",
    "locale_display_name",
    "resolve_locale_chain",
]

_LANGUAGE_LENGTH = 2
_REGION_LENGTHS = (2, 3)


def _is_ascii_in_range(text: str, first: str, last: str) -> bool:
    return all(first <= char <= last for char in text)


def resolve_locale_chain(locale: str) -> tuple[LocaleCode, ...]:
    """Validate a locale and expand it into its fallback chain.

    The chain lists the most specific locale first: ``xx_YY`` expands to
    ``("xx_YY", "xx")``, a bare language ``xx`` to ``("xx",)``.

    Args:
        locale: Locale string, 'xx' or 'xx_YY'

    Returns:
        Tuple of one or two locale codes in fallback priority order

    Raises:
        InvalidLocaleError: If the locale does not have one of the two shapes

    Example:
        >>> resolve_locale_chain("fr_FR")
        ('fr_FR', 'fr')
        >>> resolve_locale_chain("de")
        ('de',)
    """
    parts = locale.split("_")
    if len(parts) > 2:
        raise InvalidLocaleError(locale)

    language = parts[0]
    if len(language) != _LANGUAGE_LENGTH or not _is_ascii_in_range(language, "a", "z"):
        raise InvalidLocaleError(locale)

    if len(parts) == 1:
        return (language,)

    region = parts[1]
    if len(region) not in _REGION_LENGTHS or not _is_ascii_in_range(region, "A", "Z"):
        raise InvalidLocaleError(locale)

    return (locale, language)


def is_valid_locale(locale: str) -> bool:
    """Check whether resolve_locale_chain() would accept the locale."""
    try:
        resolve_locale_chain(locale)
    except InvalidLocaleError:
        return False
    return True


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: LocaleCode) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code in 'xx' or 'xx_YY' form

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If Babel cannot parse the identifier
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(locale_code)


def clear_locale_cache() -> None:
    """Clear the Babel locale cache."""
    get_babel_locale.cache_clear()


def locale_display_name(locale_code: LocaleCode) -> str | None:
    """Return the CLDR display name of a locale in its own language.

    Returns None when CLDR does not know the locale, so callers can treat
    unknown locales as a soft condition.

    Example:
        >>> locale_display_name("de_DE")
        'Deutsch (Deutschland)'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        babel_locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError):
        return None
    return babel_locale.get_display_name()
