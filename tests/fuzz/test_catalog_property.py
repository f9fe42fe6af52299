"""Catalog, sync and lookup property tests.

Property-based tests over generated message sets:
- Encoded catalogs decode to the key-sorted message set
- Sync carries every translation of a still-extracted key
- Sync is idempotent
- TranslationDict answers every translated key and passes the rest through

Note: This file is marked with pytest.mark.fuzz and is excluded from normal
test runs. Run via: pytest -m fuzz
"""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from hypothesis import event, given

from trcatalog import TranslationDict
from trcatalog.catalog import Message, dump_catalog, load_catalog, read_catalog, write_catalog
from trcatalog.enums import CatalogChange
from trcatalog.sync import sync_catalog
from tests.strategies import message_sets, valid_locales

# Mark all tests in this file as fuzzing tests
pytestmark = pytest.mark.fuzz


@given(extracted=message_sets())
def test_dump_is_key_sorted_and_decodable(extracted: dict[str, Message]) -> None:
    """Decoding an encoded message set yields it sorted by key."""
    event(f"message_count={len(extracted)}")
    decoded = load_catalog(dump_catalog(extracted.values()))

    assert decoded == tuple(extracted[key] for key in sorted(extracted))


@given(previous=message_sets(), extracted=message_sets())
def test_sync_carries_translations(
    previous: dict[str, Message], extracted: dict[str, Message]
) -> None:
    """Every extracted key keeps the previous translation, others start empty."""
    with tempfile.TemporaryDirectory() as tmp:
        target = Path(tmp) / "app-de.tr"
        write_catalog(target, previous.values())

        result = sync_catalog(target, {k: m.with_translation("") for k, m in extracted.items()})

        written = {m.key: m for m in read_catalog(target)}
    assert written.keys() == extracted.keys()
    for key, message in written.items():
        expected = previous[key].translation if key in previous else ""
        assert message.translation == expected
        assert message.locations == extracted[key].locations
    overlap = len(written.keys() & previous.keys())
    event(f"overlap={min(overlap, 3)}")
    assert result.new == len(extracted) - overlap


@given(extracted=message_sets())
def test_sync_idempotent(extracted: dict[str, Message]) -> None:
    """A second sync with the same extraction changes nothing."""
    with tempfile.TemporaryDirectory() as tmp:
        target = Path(tmp) / "app-de.tr"
        sync_catalog(target, extracted)
        first = target.read_bytes()

        result = sync_catalog(target, extracted)

        assert target.read_bytes() == first
    assert result.change is CatalogChange.UNCHANGED


@given(catalog=message_sets(), locale=valid_locales())
def test_lookup_matches_catalog(catalog: dict[str, Message], locale: str) -> None:
    """Translated records are returned, untranslated ones pass the source through."""
    with tempfile.TemporaryDirectory() as tmp:
        write_catalog(Path(tmp) / f"app-{locale}.tr", catalog.values())
        d = TranslationDict(tmp, locale)

    for message in catalog.values():
        expected = message.translation or message.source
        assert d.translation(message.source, *message.context) == expected
