"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by trcatalog
exceptions.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors
        2000-2999: Catalog decode errors
        3000-3999: Source parse errors (extraction)
        4000-4999: Configuration errors (sync tool)
    """

    # Locale errors (1000-1999)
    LOCALE_INVALID = 1001

    # Catalog decode errors (2000-2999)
    CATALOG_INVALID_JSON = 2001
    CATALOG_INVALID_STRUCTURE = 2002
    CATALOG_INVALID_FIELD = 2003

    # Source parse errors (3000-3999)
    SOURCE_SYNTAX_ERROR = 3001

    # Configuration errors (4000-4999)
    CONFIG_MISSING_NAME = 4001
    CONFIG_MISSING_LOCALES = 4002
    CONFIG_INVALID_NAME = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        path: File the diagnostic refers to, if any
        line: 1-based line number within path, if known
        hint: Suggestion for fixing the problem
    """

    code: DiagnosticCode
    message: str
    path: str | None = None
    line: int | None = None
    hint: str | None = None

    def format_error(self) -> str:
        """Format diagnostic as a single error string.

        Example:
            >>> Diagnostic(DiagnosticCode.LOCALE_INVALID, "invalid locale: 'EN'").format_error()
            "error[LOCALE_INVALID]: invalid locale: 'EN'"
        """
        parts = [f"error[{self.code.name}]: {self.message}"]
        if self.path is not None:
            location = self.path if self.line is None else f"{self.path}:{self.line}"
            parts.append(f"  --> {location}")
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)
