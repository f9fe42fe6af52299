"""Message key construction shared by extraction and runtime lookup.

The key is the only join between an extracted call site and a stored
translation, so both sides build it through message_key().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from trcatalog.constants import KEY_DELIMITER

if TYPE_CHECKING:
    from collections.abc import Sequence

    from trcatalog.catalog.types import MessageKey

__all__ = [
    "is_ambiguous_key_input",
    "message_key",
]


def message_key(source: str, context: Sequence[str] = ()) -> MessageKey:
    """Build the lookup key for a source string and its context.

    Without context the key is the source itself, so uncontextualized
    entries stay human-readable. With context the key is the delimited
    composite ``__source__ctx1__ctx2__``.

    Args:
        source: Source text
        context: Disambiguating context strings, in call-site order

    Returns:
        Message key

    Example:
        >>> message_key("Hello")
        'Hello'
        >>> message_key("Exit", ["menu"])
        '__Exit__menu__'
    """
    if not context:
        return source

    return f"{KEY_DELIMITER}{source}{KEY_DELIMITER}{KEY_DELIMITER.join(context)}{KEY_DELIMITER}"


def is_ambiguous_key_input(source: str, context: Sequence[str] = ()) -> bool:
    """Check whether a (source, context) pair may share its key with another pair.

    Composite keys are plain concatenation. A component containing the
    delimiter, or starting or ending with its character, can shift a
    boundary and reproduce the key of a different pair ("a_" + ctx "b"
    and "a" + ctx "_b" both give ``__a___b__``). Pairs without context are
    only ambiguous if the source itself has the shape of a composite key.

    Example:
        >>> is_ambiguous_key_input("Exit", ["menu"])
        False
        >>> is_ambiguous_key_input("a__b", ["c"])
        True
        >>> is_ambiguous_key_input("a_", ["b"])
        True
    """
    if not context:
        size = len(KEY_DELIMITER)
        return (
            len(source) >= 3 * size
            and source.startswith(KEY_DELIMITER)
            and source.endswith(KEY_DELIMITER)
            and KEY_DELIMITER in source[size:-size]
        )

    edge = KEY_DELIMITER[0]
    return any(
        KEY_DELIMITER in part or part.startswith(edge) or part.endswith(edge)
        for part in (source, *context)
    )
