"""trcatalog exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "CatalogDecodeError",
    "InvalidLocaleError",
    "SourceParseError",
    "SyncConfigError",
    "TrCatalogError",
]


class TrCatalogError(Exception):
    """Base exception for all trcatalog errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TrCatalogError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidLocaleError(TrCatalogError, ValueError):
    """Locale string does not have the ``xx`` or ``xx_YY`` shape.

    Raised before any filesystem access, so no partial dictionary exists.

    Attributes:
        locale: The rejected locale string
    """

    def __init__(self, locale: str) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=f"invalid locale: {locale!r}",
            hint="expected 'xx' or 'xx_YY' with a 2-3 letter region, e.g. 'de' or 'fr_FR'",
        )
        super().__init__(diagnostic)
        self.locale = locale


class CatalogDecodeError(TrCatalogError, ValueError):
    """Catalog file contents are not a valid catalog document.

    A single corrupt file aborts the whole load that reads it.

    Attributes:
        path: Catalog file path, or None when decoding raw bytes
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        code: DiagnosticCode = DiagnosticCode.CATALOG_INVALID_STRUCTURE,
    ) -> None:
        super().__init__(Diagnostic(code=code, message=message, path=path))
        self.path = path


class SourceParseError(TrCatalogError):
    """Source file could not be parsed during extraction.

    Attributes:
        path: Source file path
        line: Line of the syntax error, if reported by the parser
    """

    def __init__(self, message: str, *, path: str, line: int | None = None) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.SOURCE_SYNTAX_ERROR,
            message=message,
            path=path,
            line=line,
        )
        super().__init__(diagnostic)
        self.path = path
        self.line = line


class SyncConfigError(TrCatalogError, ValueError):
    """Sync tool configuration is incomplete or inconsistent."""

    def __init__(self, message: str, *, code: DiagnosticCode) -> None:
        super().__init__(Diagnostic(code=code, message=message))
