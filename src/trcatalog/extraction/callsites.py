"""Call-site scanning for Python source files.

Turns Python source into CallSite descriptors. The extractor only ever
sees descriptors, so message collection does not depend on how (or from
which language) they were produced.

Python 3.13+.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
from typing import TYPE_CHECKING

from trcatalog.catalog.codec import replace_lone_surrogates
from trcatalog.diagnostics import SourceParseError

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = [
    "CallSite",
    "scan_python_source",
]


@dataclass(frozen=True, slots=True)
class CallSite:
    """A call to a bare-name function found in source.

    Attributes:
        callee: Name of the called function
        args: Positional arguments; literal string text, or None where the
            argument is anything other than a plain string literal
        file: Source file path
        line: 1-based line of the call expression
    """

    callee: str
    args: tuple[str | None, ...]
    file: str
    line: int


def _literal_text(node: ast.expr) -> str | None:
    # Implicitly concatenated literals arrive as one Constant; f-strings are JoinedStr.
    # A "\ud800" escape is legal Python but not encodable, so it becomes U+FFFD.
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        return replace_lone_surrogates(node.value)
    return None


class _CallSiteVisitor(ast.NodeVisitor):
    """Collect bare-name calls, including calls nested in other calls' arguments."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.call_sites: list[CallSite] = []

    def visit_Call(self, node: ast.Call) -> None:
        if isinstance(node.func, ast.Name):
            self.call_sites.append(
                CallSite(
                    callee=node.func.id,
                    args=tuple(_literal_text(arg) for arg in node.args),
                    file=self.filename,
                    line=node.lineno,
                )
            )
        self.generic_visit(node)


def scan_python_source(source: bytes | str, filename: str) -> Iterator[CallSite]:
    """Yield every bare-name call site in a Python module, in source order.

    Attribute calls such as ``obj.tr("x")`` are not bare-name calls and are
    never yielded. Starred and keyword arguments are not positional
    literals: ``*args`` shows up as None, keywords are ignored.

    Args:
        source: Module source; bytes honour PEP 263 encoding declarations
        filename: Path recorded on each CallSite and in errors

    Raises:
        SourceParseError: If the source is not valid Python

    Example:
        >>> [c.args for c in scan_python_source('tr("Exit", "menu")', "m.py")]
        [('Exit', 'menu')]
    """
    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as e:
        msg = f"cannot parse Python source: {e.msg}"
        raise SourceParseError(msg, path=filename, line=e.lineno) from e

    visitor = _CallSiteVisitor(filename)
    visitor.visit(tree)
    # ast.NodeVisitor walks depth-first; sort so nested calls keep source order.
    yield from sorted(visitor.call_sites, key=lambda c: c.line)
