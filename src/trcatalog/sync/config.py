"""Sync tool configuration.

A single frozen dataclass carries everything one sync run needs, so the
pipeline never reads process-wide state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from trcatalog.catalog.discovery import catalog_file_name
from trcatalog.constants import DEFAULT_MARKER, DEFAULT_SOURCE_SUFFIXES
from trcatalog.diagnostics import DiagnosticCode, SyncConfigError

__all__ = ["SyncConfig", "parse_locale_list"]


def parse_locale_list(locales: str) -> tuple[str, ...]:
    """Split a comma-separated locale list.

    Entries are whitespace-trimmed; empty entries and repeats are dropped.

    Example:
        >>> parse_locale_list("de_AT, de ,,fr,de")
        ('de_AT', 'de', 'fr')
    """
    stripped = (part.strip() for part in locales.split(","))
    return tuple(dict.fromkeys(part for part in stripped if part))


@dataclass(frozen=True, slots=True)
class SyncConfig:
    """Immutable configuration for one extraction/sync run.

    Attributes:
        base_name: Catalog base name; files are named ``<base_name>-<locale>.tr``
        root_directory: Source tree to scan
        locales: Target locales, one catalog file each (not chain-expanded)
        output_directory: Directory catalog files are written to
        marker: Translation marker function name
        suffixes: Source file suffixes to scan

    Example:
        >>> config = SyncConfig.from_locale_list("app", "src", "de_DE,de,fr")
        >>> config.locales
        ('de_DE', 'de', 'fr')
        >>> config.catalog_path("de").as_posix()
        'app-de.tr'
    """

    base_name: str
    root_directory: Path
    locales: tuple[str, ...]
    output_directory: Path = Path()
    marker: str = DEFAULT_MARKER
    suffixes: tuple[str, ...] = DEFAULT_SOURCE_SUFFIXES

    def __post_init__(self) -> None:
        """Normalize path and sequence fields and validate values.

        Raises:
            SyncConfigError: If base_name is empty or contains a path
                separator, or if no locale is given
        """
        if not self.base_name:
            msg = "Catalog base name cannot be empty"
            raise SyncConfigError(msg, code=DiagnosticCode.CONFIG_MISSING_NAME)
        if "/" in self.base_name or "\\" in self.base_name:
            msg = (
                f"Catalog base name must not contain path separators, got {self.base_name!r}; "
                f"use output_directory instead"
            )
            raise SyncConfigError(msg, code=DiagnosticCode.CONFIG_INVALID_NAME)

        # Frozen dataclass: normalize through object.__setattr__.
        object.__setattr__(self, "root_directory", Path(self.root_directory))
        object.__setattr__(self, "output_directory", Path(self.output_directory))
        object.__setattr__(self, "locales", tuple(dict.fromkeys(self.locales)))
        object.__setattr__(self, "suffixes", tuple(self.suffixes))

        if not self.locales:
            msg = "At least one target locale is required"
            raise SyncConfigError(msg, code=DiagnosticCode.CONFIG_MISSING_LOCALES)

    @classmethod
    def from_locale_list(
        cls,
        base_name: str,
        root_directory: str | Path,
        locales: str,
        **kwargs: Any,
    ) -> SyncConfig:
        """Build a configuration from a comma-separated locale list."""
        return cls(
            base_name=base_name,
            root_directory=Path(root_directory),
            locales=parse_locale_list(locales),
            **kwargs,
        )

    def catalog_path(self, locale: str) -> Path:
        """Return the catalog file path for a target locale."""
        return self.output_directory / catalog_file_name(self.base_name, locale)
