"""Non-destructive synchronization of extracted messages with a catalog file.

For one target catalog: every freshly extracted message keeps the
translation recorded for its key in the previous file, new messages start
untranslated, and the file is rewritten in full. Locations always come
from the current extraction.

Translations whose (source, context) pair is no longer extracted are not
archived; they disappear from the rewritten file and are reported in the
SyncResult.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from trcatalog.catalog.codec import dump_catalog, load_catalog, write_bytes_atomic
from trcatalog.enums import CatalogChange

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from trcatalog.catalog.model import Message
    from trcatalog.catalog.types import MessageKey

__all__ = [
    "SyncResult",
    "index_messages",
    "merge_messages",
    "sync_catalog",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Outcome of synchronizing one catalog file.

    Attributes:
        path: Catalog file path
        change: Whether the file was created, updated or left byte-identical
        total: Messages written
        carried: Written messages whose translation came from the old file
        new: Written messages whose key was not in the old file
        dropped: Translated messages of the old file that are no longer extracted
    """

    path: str
    change: CatalogChange
    total: int
    carried: int
    new: int
    dropped: int

    @property
    def untranslated(self) -> int:
        """Written messages without a translation."""
        return self.total - self.carried

    @property
    def completion(self) -> float:
        """Fraction of written messages that are translated (1.0 for an empty catalog)."""
        if self.total == 0:
            return 1.0
        return self.carried / self.total


def index_messages(messages: Iterable[Message]) -> dict[MessageKey, Message]:
    """Index messages by key; a later record replaces an earlier one with the same key."""
    return {message.key: message for message in messages}


def merge_messages(
    extracted: Mapping[MessageKey, Message],
    previous: Mapping[MessageKey, Message],
) -> tuple[Message, ...]:
    """Carry translations from previous into the extracted message set.

    Args:
        extracted: Fresh extraction result
        previous: Messages of the existing catalog, indexed by key

    Returns:
        One message per extracted key, with the previous translation where
        the key existed and an empty translation otherwise
    """
    merged: list[Message] = []
    for key, message in extracted.items():
        old = previous.get(key)
        merged.append(message.with_translation(old.translation if old is not None else ""))
    return tuple(merged)


def sync_catalog(target_path: str | Path, extracted: Mapping[MessageKey, Message]) -> SyncResult:
    """Synchronize one catalog file with the extracted message set.

    A missing target is the first-run case and starts from an empty catalog.

    Args:
        target_path: Catalog file to read (if present) and overwrite
        extracted: Fresh extraction result, keyed by message key

    Returns:
        SyncResult describing the rewrite

    Raises:
        OSError: If the existing file cannot be read or the new one written
        CatalogDecodeError: If the existing file is not a valid catalog
    """
    path = Path(target_path)

    old_bytes: bytes | None = None
    previous: dict[MessageKey, Message] = {}
    if path.exists():
        old_bytes = path.read_bytes()
        previous = index_messages(load_catalog(old_bytes, path=str(path)))

    merged = merge_messages(extracted, previous)
    new_bytes = dump_catalog(merged)
    write_bytes_atomic(path, new_bytes)

    if old_bytes is None:
        change = CatalogChange.CREATED
    elif old_bytes == new_bytes:
        change = CatalogChange.UNCHANGED
    else:
        change = CatalogChange.UPDATED

    dropped = sum(
        1 for key, message in previous.items() if message.is_translated and key not in extracted
    )
    result = SyncResult(
        path=str(path),
        change=change,
        total=len(merged),
        carried=sum(1 for m in merged if m.is_translated),
        new=sum(1 for key in extracted if key not in previous),
        dropped=dropped,
    )

    if dropped:
        logger.warning(
            "%s: dropped %d translation(s) whose source string is no longer extracted",
            result.path,
            dropped,
        )
    logger.info(
        "%s %s: %d messages, %d translated, %d new",
        change,
        result.path,
        result.total,
        result.carried,
        result.new,
    )
    return result
