"""Tests for the catalog loading shell.

Tests verify:
- read_catalog_file suffix and existence checks
- PathCatalogLoader template validation
- Locale codes that could escape the template are rejected
- Structural conformance to the CatalogLoader protocol
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pocatalog import PoFile
from pocatalog.diagnostics import CatalogFileError, DiagnosticCode
from pocatalog.localization import PathCatalogLoader, read_catalog_file

if TYPE_CHECKING:
    from pathlib import Path


class TestReadCatalogFile:
    """Single-file reads."""

    def test_reads_text(self, fixtures_dir: Path) -> None:
        text = read_catalog_file(fixtures_dir / "de.po")

        assert 'msgid "File"' in text

    def test_accepts_str_path(self, fixtures_dir: Path) -> None:
        assert read_catalog_file(str(fixtures_dir / "pl.po")).startswith("#")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_catalog_file(tmp_path / "nope.po")

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        directory = tmp_path / "dir.po"
        directory.mkdir()

        with pytest.raises(FileNotFoundError):
            read_catalog_file(directory)

    @pytest.mark.parametrize("name", ["messages.mo", "messages.pot", "messages.PO", "messages"])
    def test_wrong_suffix(self, tmp_path: Path, name: str) -> None:
        path = tmp_path / name
        path.write_text('msgid "a"\nmsgstr "b"\n', encoding="utf-8")

        with pytest.raises(CatalogFileError) as exc_info:
            read_catalog_file(path)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FILE_NOT_PO

    def test_catalog_file_error_is_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "x.txt"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ValueError, match="not a PO file"):
            read_catalog_file(path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.po"
        path.write_bytes('msgid "a"\nmsgstr "ä"\n'.encode("latin-1"))

        with pytest.raises(UnicodeDecodeError):
            read_catalog_file(path)


class TestPathCatalogLoader:
    """Template-based loader."""

    def test_template_requires_placeholder(self) -> None:
        with pytest.raises(ValueError, match="placeholder"):
            PathCatalogLoader("locales/messages.po")

    def test_describe_path(self) -> None:
        loader = PathCatalogLoader("locales/{locale}/LC_MESSAGES/app.po")

        assert loader.describe_path("pt_BR") == "locales/pt_BR/LC_MESSAGES/app.po"

    def test_load(self, fixtures_dir: Path) -> None:
        loader = PathCatalogLoader(str(fixtures_dir / "{locale}.po"))

        assert "Language: pl" in loader.load("pl")

    def test_load_missing_locale(self, fixtures_dir: Path) -> None:
        loader = PathCatalogLoader(str(fixtures_dir / "{locale}.po"))

        with pytest.raises(FileNotFoundError):
            loader.load("xx")

    @pytest.mark.parametrize(
        ("locale", "reason"),
        [
            ("", "empty"),
            ("..", "path traversal"),
            ("../etc/passwd", "path traversal"),
            ("de/evil", "path separator"),
            ("de\\evil", "path separator"),
        ],
    )
    def test_unsafe_locale_rejected(self, locale: str, reason: str) -> None:
        loader = PathCatalogLoader("locales/{locale}.po")

        with pytest.raises(CatalogFileError, match=reason) as exc_info:
            loader.load(locale)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCALE_INVALID

    def test_loader_is_immutable(self) -> None:
        loader = PathCatalogLoader("locales/{locale}.po")

        with pytest.raises(AttributeError):
            loader.path_template = "other/{locale}.po"  # type: ignore[misc]


class TestCatalogLoaderProtocol:
    """Any object with load/describe_path can feed PoFile."""

    def test_custom_loader(self) -> None:
        class DictLoader:
            def __init__(self, catalogs: dict[str, str]) -> None:
                self.catalogs = catalogs

            def load(self, locale: str) -> str:
                return self.catalogs[locale]

            def describe_path(self, locale: str) -> str:
                return f"<memory:{locale}>"

        loader = DictLoader({"de": 'msgid "File"\nmsgstr "Datei"\n'})
        po = PoFile()
        po.load_from_loader(loader, "de")

        assert po.get_string("File") == "Datei"
