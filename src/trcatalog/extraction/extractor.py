"""Message extraction from marker call sites.

Collects ``tr("Source", "ctx", ...)`` call sites into a deduplicated
message set. Each message aggregates every location it was found at.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from trcatalog.catalog.discovery import iter_files
from trcatalog.catalog.model import Location, Message
from trcatalog.constants import DEFAULT_MARKER, DEFAULT_SOURCE_SUFFIXES
from trcatalog.extraction.callsites import CallSite, scan_python_source
from trcatalog.keys import is_ambiguous_key_input, message_key

if TYPE_CHECKING:
    from collections.abc import Iterable

    from trcatalog.catalog.types import MessageKey

__all__ = ["Extractor"]

logger = logging.getLogger(__name__)


class Extractor:
    """Builds the message set of a source tree.

    Only call sites whose callee is the marker and whose first argument is
    a string literal are recorded. That literal is the source; every later
    literal argument becomes one context element, in order. Non-literal
    arguments after the first are dropped from the context rather than
    rejected.

    Example:
        >>> messages = Extractor().scan("src")
        >>> sorted(messages)[:2]
        ['Hello', '__Exit__menu__']
    """

    __slots__ = ("_marker", "_suffixes")

    def __init__(
        self,
        marker: str = DEFAULT_MARKER,
        suffixes: Iterable[str] = DEFAULT_SOURCE_SUFFIXES,
    ) -> None:
        """Initialize extractor.

        Args:
            marker: Name of the translation marker function
            suffixes: File name suffixes of source files to scan

        Raises:
            ValueError: If marker is empty or no suffix is given
        """
        if not marker:
            msg = "Marker function name cannot be empty"
            raise ValueError(msg)
        self._marker = marker
        self._suffixes = tuple(suffixes)
        if not self._suffixes:
            msg = "At least one source file suffix is required"
            raise ValueError(msg)

    @property
    def marker(self) -> str:
        """Marker function name (read-only)."""
        return self._marker

    @property
    def suffixes(self) -> tuple[str, ...]:
        """Source file suffixes (read-only)."""
        return self._suffixes

    def collect(self, call_sites: Iterable[CallSite]) -> dict[MessageKey, Message]:
        """Build the message set from call-site descriptors.

        Args:
            call_sites: Call sites in the order they were found

        Returns:
            Mapping of message key to message, in first-seen order. Every
            matching call site contributes one location.
        """
        sources: dict[MessageKey, tuple[str, tuple[str, ...]]] = {}
        locations: dict[MessageKey, list[Location]] = {}

        for site in call_sites:
            if site.callee != self._marker or not site.args:
                continue
            source = site.args[0]
            if source is None:
                continue

            context = tuple(arg for arg in site.args[1:] if arg is not None)
            key = message_key(source, context)
            if key not in sources:
                if is_ambiguous_key_input(source, context):
                    logger.warning(
                        "%s:%d: message %r with context %r may share its key with another message",
                        site.file,
                        site.line,
                        source,
                        list(context),
                    )
                sources[key] = (source, context)
                locations[key] = []
            locations[key].append(Location(file=site.file, line=str(site.line)))

        return {
            key: Message(source=source, context=context, locations=tuple(locations[key]))
            for key, (source, context) in sources.items()
        }

    def iter_source_files(self, root: str | Path) -> Iterable[Path]:
        """Yield source files below root in scan order."""
        return (path for path in iter_files(root) if path.name.endswith(self._suffixes))

    def scan(self, root: str | Path) -> dict[MessageKey, Message]:
        """Scan a source tree and build its message set.

        Args:
            root: Root directory, walked recursively in name order

        Returns:
            Mapping of message key to message

        Raises:
            OSError: If a directory cannot be listed or a file read
            SourceParseError: If a source file is not valid Python
        """
        scanned = 0

        def call_sites() -> Iterable[CallSite]:
            nonlocal scanned
            for path in self.iter_source_files(root):
                # Recorded paths keep the root prefix as given, e.g. "src/app/main.py".
                file_name = path.as_posix()
                sites = list(scan_python_source(path.read_bytes(), file_name))
                scanned += 1
                logger.debug("Scanned %s (%d call sites)", file_name, len(sites))
                yield from sites

        messages = self.collect(call_sites())
        logger.info(
            "Extracted %d messages from %d source files under %s",
            len(messages),
            scanned,
            root,
        )
        return messages
