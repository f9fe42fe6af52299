"""Catalog data model: messages and their source locations.

Messages are immutable. Extraction builds them once per run and the
syncer derives new instances with carried-forward translations.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from trcatalog.keys import message_key

if TYPE_CHECKING:
    from trcatalog.catalog.types import MessageKey

__all__ = [
    "Location",
    "Message",
]


@dataclass(frozen=True, slots=True)
class Location:
    """Source position of one marker call site.

    Attributes:
        file: Source file path as seen during the scan
        line: 1-based line number, stored as decimal text like in catalog files
    """

    file: str
    line: str


@dataclass(frozen=True, slots=True)
class Message:
    """One translatable message.

    Attributes:
        source: Source text
        context: Disambiguating context strings, in call-site order
        translation: Translated text, empty while untranslated
        locations: Call sites of this message (build-time only)
    """

    source: str
    context: tuple[str, ...] = ()
    translation: str = ""
    locations: tuple[Location, ...] = ()

    @property
    def key(self) -> MessageKey:
        """Lookup key of this message."""
        return message_key(self.source, self.context)

    @property
    def is_translated(self) -> bool:
        """Check if the message carries a non-empty translation."""
        return self.translation != ""

    def with_translation(self, translation: str) -> Message:
        """Return a copy of this message with a different translation."""
        return replace(self, translation=translation)
