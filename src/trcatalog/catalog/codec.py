"""Catalog file encoding and decoding.

A catalog file is a UTF-8 JSON document holding one flat message list:

    {"Messages": [
      {"Locations": [{"File": "app/main.py", "Line": "12"}],
       "Source": "Exit", "Context": ["menu"], "Translation": "Beenden"}
    ]}

Decoding is tolerant in the same places the catalog producer is:
missing or null fields take their empty value, field names match
case-insensitively and unknown fields are ignored. Invalid UTF-8 and lone
surrogate escapes become U+FFFD, and data after the document is ignored.
Anything else that does not fit the shape raises CatalogDecodeError.

Encoding is deterministic: messages are sorted by key and fields are
written in a fixed order, so re-encoding an unchanged catalog yields
identical bytes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import os
import re
import stat
import tempfile
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from trcatalog.catalog.model import Location, Message
from trcatalog.constants import CATALOG_ENCODING, CATALOG_INDENT, MESSAGES_FIELD
from trcatalog.diagnostics import CatalogDecodeError, DiagnosticCode

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

__all__ = [
    "dump_catalog",
    "load_catalog",
    "read_catalog",
    "replace_lone_surrogates",
    "write_bytes_atomic",
    "write_catalog",
]

_LOCATIONS = "Locations"
_SOURCE = "Source"
_CONTEXT = "Context"
_TRANSLATION = "Translation"
_FILE = "File"
_LINE = "Line"

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")
_REPLACEMENT_CHARACTER = "\ufffd"
_DECODER = json.JSONDecoder()
_JSON_WHITESPACE = " \t\n\r"
_NEW_FILE_MODE = 0o644


def replace_lone_surrogates(text: str) -> str:
    """Replace unpaired UTF-16 surrogates with U+FFFD.

    Python strings can hold surrogates (from ``"\\ud800"`` JSON escapes or
    source literals) that UTF-8 cannot encode.

    Example:
        >>> replace_lone_surrogates("a\\ud800b") == "a\\ufffdb"
        True
    """
    return _LONE_SURROGATE.sub(_REPLACEMENT_CHARACTER, text)


def _field(record: Mapping[str, Any], name: str) -> Any:
    """Look up a field by name, preferring an exact match over a case-insensitive one."""
    if name in record:
        return record[name]
    folded = name.casefold()
    for key, value in record.items():
        if key.casefold() == folded:
            return value
    return None


def _as_string(value: Any, what: str, path: str | None) -> str:
    match value:
        case None:
            return ""
        case str():
            return replace_lone_surrogates(value)
        case _:
            msg = f"{what} must be a string, got {type(value).__name__}"
            raise CatalogDecodeError(msg, path=path, code=DiagnosticCode.CATALOG_INVALID_FIELD)


def _as_list(value: Any, what: str, path: str | None) -> list[Any]:
    match value:
        case None:
            return []
        case list():
            return value
        case _:
            msg = f"{what} must be a list, got {type(value).__name__}"
            raise CatalogDecodeError(msg, path=path, code=DiagnosticCode.CATALOG_INVALID_FIELD)


def _as_object(value: Any, what: str, path: str | None) -> dict[str, Any]:
    if not isinstance(value, dict):
        msg = f"{what} must be an object, got {type(value).__name__}"
        raise CatalogDecodeError(msg, path=path, code=DiagnosticCode.CATALOG_INVALID_STRUCTURE)
    return value


def _decode_line(value: Any, what: str, path: str | None) -> str:
    # Lines are written as strings; integers from hand-edited files are accepted.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return _as_string(value, what, path)


def _decode_location(value: Any, what: str, path: str | None) -> Location:
    record = _as_object(value, what, path)
    return Location(
        file=_as_string(_field(record, _FILE), f"{what}.{_FILE}", path),
        line=_decode_line(_field(record, _LINE), f"{what}.{_LINE}", path),
    )


def _decode_message(value: Any, index: int, path: str | None) -> Message:
    what = f"{MESSAGES_FIELD}[{index}]"
    record = _as_object(value, what, path)

    context = tuple(
        _as_string(item, f"{what}.{_CONTEXT}[{i}]", path)
        for i, item in enumerate(_as_list(_field(record, _CONTEXT), f"{what}.{_CONTEXT}", path))
    )
    locations = tuple(
        _decode_location(item, f"{what}.{_LOCATIONS}[{i}]", path)
        for i, item in enumerate(
            _as_list(_field(record, _LOCATIONS), f"{what}.{_LOCATIONS}", path)
        )
    )
    return Message(
        source=_as_string(_field(record, _SOURCE), f"{what}.{_SOURCE}", path),
        context=context,
        translation=_as_string(_field(record, _TRANSLATION), f"{what}.{_TRANSLATION}", path),
        locations=locations,
    )


def load_catalog(
    data: bytes | str | IO[bytes],
    *,
    path: str | None = None,
) -> tuple[Message, ...]:
    """Decode a catalog document.

    Records are returned in document order; duplicate keys are kept so
    that callers applying them in order get later-wins semantics.

    Args:
        data: Raw bytes, decoded text, or a binary stream positioned at the start
        path: File path used in error messages (optional)

    Returns:
        Messages in document order

    Raises:
        CatalogDecodeError: If the data is not a JSON document of the catalog shape

    Example:
        >>> load_catalog(b'{"Messages": [{"Source": "Hello", "Translation": "Hallo"}]}')
        (Message(source='Hello', context=(), translation='Hallo', locations=()),)
    """
    if not isinstance(data, (bytes, str)):
        data = data.read()

    # Invalid UTF-8 decodes to U+FFFD, as catalog files written by older
    # tooling are read that way.
    text = data.decode(CATALOG_ENCODING, errors="replace") if isinstance(data, bytes) else data

    try:
        # Only the first document counts; anything after it is ignored.
        document, _ = _DECODER.raw_decode(text.lstrip(_JSON_WHITESPACE))
    except json.JSONDecodeError as e:
        msg = f"catalog is not valid JSON: {e}"
        raise CatalogDecodeError(msg, path=path, code=DiagnosticCode.CATALOG_INVALID_JSON) from e

    # A bare null document carries no messages.
    if document is None:
        return ()

    root = _as_object(document, "catalog document", path)
    entries = _as_list(_field(root, MESSAGES_FIELD), MESSAGES_FIELD, path)
    return tuple(_decode_message(entry, index, path) for index, entry in enumerate(entries))


def _encode_message(message: Message) -> dict[str, Any]:
    # Field order and null-for-empty mirror the files the sync tool has always produced.
    return {
        _LOCATIONS: [{_FILE: loc.file, _LINE: loc.line} for loc in message.locations] or None,
        _SOURCE: message.source,
        _CONTEXT: list(message.context) or None,
        _TRANSLATION: message.translation,
    }


def dump_catalog(messages: Iterable[Message]) -> bytes:
    """Encode messages as a catalog document.

    Messages are sorted by key (stable for equal keys), so the output does
    not depend on the order in which messages were collected. Lone
    surrogates are written as U+FFFD.

    Args:
        messages: Messages to encode

    Returns:
        UTF-8 encoded document with a trailing newline
    """
    ordered = sorted(messages, key=lambda m: replace_lone_surrogates(m.key))
    document = {MESSAGES_FIELD: [_encode_message(m) for m in ordered]}
    text = json.dumps(document, ensure_ascii=False, indent=CATALOG_INDENT)
    # Surrogates can still arrive through hand-built messages or file names.
    return (replace_lone_surrogates(text) + "\n").encode(CATALOG_ENCODING)


def read_catalog(path: str | Path) -> tuple[Message, ...]:
    """Read and decode a catalog file.

    Raises:
        OSError: If the file cannot be read
        CatalogDecodeError: If the contents are not a valid catalog
    """
    file_path = Path(path)
    with file_path.open("rb") as stream:
        return load_catalog(stream, path=str(file_path))


def write_bytes_atomic(path: str | Path, data: bytes) -> None:
    """Replace the file at path with data in one rename.

    The data is written to a temporary file in the same directory, which
    is then renamed over the target. A failed write leaves the previous
    file untouched.

    Raises:
        OSError: If the temporary file cannot be written or renamed
    """
    target = Path(path)
    # Leading dot and .tmp suffix keep the file out of catalog matching.
    fd, temp_name = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as stream:
            stream.write(data)
            stream.flush()
            os.fsync(stream.fileno())
        # mkstemp creates 0600 files; keep the mode an in-place write would have.
        mode = stat.S_IMODE(target.stat().st_mode) if target.exists() else _NEW_FILE_MODE
        temp_path.chmod(mode)
        temp_path.replace(target)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def write_catalog(path: str | Path, messages: Iterable[Message]) -> None:
    """Encode messages and replace the catalog file at path.

    Raises:
        OSError: If the file cannot be written
    """
    write_bytes_atomic(path, dump_catalog(messages))
