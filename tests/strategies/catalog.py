"""Hypothesis strategies for trcatalog property-based testing.

Provides reusable strategies for generating catalog test data:
- Valid and invalid locale strings
- Source texts and context lists (with and without delimiter hazards)
- Messages and message sets keyed like the extractor produces them

Event-Emitting Strategies (HypoFuzz-Optimized):
- valid_locales: Emits locale_shape=language|region2|region3
- invalid_locales: Emits invalid_locale=<reason>
- messages: Emits message_context_arity=N

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from trcatalog.catalog.model import Location, Message

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase

# Text without the key delimiter character keeps composite keys unambiguous.
_SAFE_ALPHABET = st.characters(
    exclude_categories=("Cs",),
    exclude_characters="_",
)


@st.composite
def valid_locales(draw: DrawFn) -> str:
    """Generate locales accepted by resolve_locale_chain.

    Events emitted:
    - locale_shape=language|region2|region3
    """
    language = draw(st.text(alphabet=_LOWER, min_size=2, max_size=2))
    region_size = draw(st.sampled_from([0, 2, 3]))
    if region_size == 0:
        event("locale_shape=language")
        return language
    region = draw(st.text(alphabet=_UPPER, min_size=region_size, max_size=region_size))
    event(f"locale_shape=region{region_size}")
    return f"{language}_{region}"


@st.composite
def invalid_locales(draw: DrawFn) -> str:
    """Generate locales rejected by resolve_locale_chain.

    Events emitted:
    - invalid_locale=language_case|language_length|region_case|region_length|too_many_parts|separator
    """
    reason = draw(
        st.sampled_from(
            [
                "language_case",
                "language_length",
                "region_case",
                "region_length",
                "too_many_parts",
                "separator",
            ]
        )
    )
    event(f"invalid_locale={reason}")
    language = draw(st.text(alphabet=_LOWER, min_size=2, max_size=2))
    region = draw(st.text(alphabet=_UPPER, min_size=2, max_size=3))
    match reason:
        case "language_case":
            return language.upper()
        case "language_length":
            size = draw(st.sampled_from([0, 1, 3, 4]))
            return draw(st.text(alphabet=_LOWER, min_size=size, max_size=size))
        case "region_case":
            return f"{language}_{region.lower()}"
        case "region_length":
            size = draw(st.sampled_from([0, 1, 4, 5]))
            bad_region = draw(st.text(alphabet=_UPPER, min_size=size, max_size=size))
            return f"{language}_{bad_region}"
        case "too_many_parts":
            return f"{language}_{region}_{region}"
        case _:
            return f"{language}-{region}"


source_texts = st.text(alphabet=_SAFE_ALPHABET, min_size=1, max_size=30)
"""Source strings that never contain the key delimiter character."""

contexts = st.lists(
    st.text(alphabet=_SAFE_ALPHABET, min_size=1, max_size=10),
    max_size=3,
).map(tuple)
"""Context tuples of 0-3 delimiter-free elements."""


@st.composite
def messages(draw: DrawFn, *, translated: bool | None = None) -> Message:
    """Generate a build-time Message with at least one location.

    Args:
        translated: Force a translated (True) or untranslated (False)
            message; None draws either.

    Events emitted:
    - message_context_arity=N
    """
    context = draw(contexts)
    event(f"message_context_arity={len(context)}")
    if translated is None:
        translated = draw(st.booleans())
    translation = draw(source_texts) if translated else ""
    line_numbers = draw(st.lists(st.integers(min_value=1, max_value=9999), min_size=1, max_size=3))
    return Message(
        source=draw(source_texts),
        context=context,
        translation=translation,
        locations=tuple(Location(file="pkg/mod.py", line=str(n)) for n in line_numbers),
    )


@st.composite
def message_sets(draw: DrawFn, max_size: int = 8) -> dict[str, Message]:
    """Generate a message set keyed by message key, like Extractor output."""
    drawn = draw(st.lists(messages(), max_size=max_size))
    return {m.key: m for m in drawn}
