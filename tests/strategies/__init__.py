"""Hypothesis strategies for trcatalog property-based testing.

Strategies are organized by domain:

- catalog: locales, source texts, contexts, messages and message sets

Usage:
    from tests.strategies import valid_locales, message_sets
    from tests.strategies.catalog import invalid_locales, contexts
"""

from .catalog import (
    contexts,
    invalid_locales,
    message_sets,
    messages,
    source_texts,
    valid_locales,
)

__all__ = [
    "contexts",
    "invalid_locales",
    "message_sets",
    "messages",
    "source_texts",
    "valid_locales",
]
