"""Tests for the trcatalog-sync command line.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from trcatalog.catalog import read_catalog
from trcatalog.cli import build_parser, main


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Project directory with a src/ tree, used as the working directory."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text(
        'tr("Hello")\ntr("Exit", "menu")\n', encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestBuildParser:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        """Optional arguments have their documented defaults."""
        args = build_parser().parse_args(["--name", "app", "--dir", "src", "--locales", "de"])

        assert args.name == "app"
        assert args.dir == Path("src")
        assert args.locales == "de"
        assert args.output_dir == Path()
        assert args.marker == "tr"
        assert not args.verbose

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["--dir", "src", "--locales", "de"],
            ["--name", "app", "--locales", "de"],
            ["--name", "app", "--dir", "src"],
        ],
    )
    def test_missing_required_argument(self, argv: list[str]) -> None:
        """Missing required arguments are usage errors (exit status 2)."""
        with pytest.raises(SystemExit) as exc_info:
            main(argv)

        assert exc_info.value.code == 2


class TestMain:
    """Test main()."""

    def test_writes_catalogs_to_working_directory(self, project: Path) -> None:
        """Catalogs default to the current directory."""
        status = main(["--name", "app", "--dir", "src", "--locales", "de_AT,de"])

        assert status == 0
        assert (project / "app-de_AT.tr").exists()
        assert sorted(m.key for m in read_catalog(project / "app-de.tr")) == [
            "Hello",
            "__Exit__menu__",
        ]

    def test_output_dir(self, project: Path) -> None:
        """--output-dir selects where catalogs are written."""
        (project / "translations").mkdir()

        status = main(
            ["--name", "app", "--dir", "src", "--locales", "fr", "--output-dir", "translations"]
        )

        assert status == 0
        assert (project / "translations" / "app-fr.tr").exists()
        assert not (project / "app-fr.tr").exists()

    def test_marker_option(self, project: Path) -> None:
        """--marker selects the marker function."""
        (project / "src" / "other.py").write_text('_("Underscore")\n', encoding="utf-8")

        status = main(["--name", "app", "--dir", "src", "--locales", "de", "--marker", "_"])

        assert status == 0
        assert [m.source for m in read_catalog(project / "app-de.tr")] == ["Underscore"]

    def test_empty_locale_list_fails(
        self, project: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An empty locale list is a configuration error."""
        with caplog.at_level(logging.ERROR, logger="trcatalog"):
            status = main(["--name", "app", "--dir", "src", "--locales", " , "])

        assert status == 1
        assert "CONFIG_MISSING_LOCALES" in caplog.text

    def test_missing_source_directory_fails(self, project: Path) -> None:
        """A missing source directory fails with status 1."""
        assert main(["--name", "app", "--dir", "nope", "--locales", "de"]) == 1

    def test_syntax_error_fails(self, project: Path, caplog: pytest.LogCaptureFixture) -> None:
        """An unparsable source file fails with status 1 and names the file."""
        (project / "src" / "bad.py").write_text("def (:\n", encoding="utf-8")

        with caplog.at_level(logging.ERROR, logger="trcatalog"):
            status = main(["--name", "app", "--dir", "src", "--locales", "de"])

        assert status == 1
        assert "bad.py" in caplog.text
        assert not (project / "app-de.tr").exists()

    def test_lone_surrogate_literal_synced(self, project: Path) -> None:
        """A literal with an unpaired surrogate escape is written as U+FFFD."""
        (project / "src" / "odd.py").write_text('tr("a \\ud800 b")\n', encoding="utf-8")

        status = main(["--name", "app", "--dir", "src", "--locales", "de"])

        assert status == 0
        sources = {m.source for m in read_catalog(project / "app-de.tr")}
        assert "a \ufffd b" in sources
