"""PoFile - Main API for gettext catalog lookups.

Python 3.13+. Zero external dependencies.
"""

import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from pocatalog.diagnostics import PluralFormulaError, PoCatalogError
from pocatalog.localization.loading import read_catalog_file
from pocatalog.runtime.catalog import EMPTY_CATALOG, Catalog, build_catalog
from pocatalog.runtime.rwlock import RWLock
from pocatalog.syntax import split_lines

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pocatalog.localization import CatalogLoader, LocaleCode, MessageId, PoSource
    from pocatalog.plurals import PluralRule
    from pocatalog.syntax import Message

__all__ = ["PoFile"]

logger = logging.getLogger(__name__)

# Logging truncation limit for message ids.
_LOG_TRUNCATE: int = 50


class PoFile:
    """Translations loaded from one gettext .po catalog.

    Thread Safety:
        All methods are thread-safe. Every load builds a complete Catalog
        (messages, headers and plural rule) before publishing it with a
        single reference swap, and every lookup works on one Catalog
        reference from start to finish. A lookup running during a reload
        therefore sees either the old catalog or the new one, never a mix.
        Concurrent loads are serialized.

    Failure Semantics:
        Loads raise on a malformed header block or Plural-Forms header and
        leave the previously loaded catalog in place. Lookups never raise:
        an unknown or untranslated id returns the id itself.

    Examples:
        >>> po = PoFile.from_string('''
        ... msgid ""
        ... msgstr "Plural-Forms: nplurals=2; plural=(n != 1);\\\\n"
        ...
        ... msgid "File"
        ... msgstr "Datei"
        ...
        ... msgid "{0} file"
        ... msgid_plural "{0} files"
        ... msgstr[0] "{0} Datei"
        ... msgstr[1] "{0} Dateien"
        ... ''')
        >>> po.get_string("File")
        'Datei'
        >>> po.get_plural_string("{0} file", "{0} files", 5)
        '{0} Dateien'
        >>> po.get_string("Folder")
        'Folder'
    """

    __slots__ = ("_catalog", "_lock", "_reload_lock")

    def __init__(self, path: str | Path | None = None) -> None:
        """Create an empty catalog, loading path immediately if given.

        Args:
            path: Optional .po file to load

        Raises:
            FileNotFoundError: If path does not exist
            CatalogFileError: If path is not a .po file
            PoFormatError: If the catalog headers are malformed
        """
        self._catalog: Catalog = EMPTY_CATALOG
        self._lock = RWLock()
        self._reload_lock = threading.Lock()

        if path is not None:
            self.load_from_file(path)

    @classmethod
    def from_string(cls, source: "PoSource") -> "PoFile":
        """Create a PoFile from .po text.

        Raises:
            PoFormatError: If the catalog headers are malformed
        """
        po = cls()
        po.load_from_string(source)
        return po

    def __repr__(self) -> str:
        catalog = self.catalog
        return f"PoFile(messages={len(catalog)}, nplurals={catalog.plural_rule.nplurals})"

    def __len__(self) -> int:
        return len(self.catalog)

    def __contains__(self, message_id: object) -> bool:
        """True if an unscoped message with this id is stored."""
        return isinstance(message_id, str) and self.catalog.find(None, message_id) is not None

    # ------------------------------------------------------------------
    # Snapshot access
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> Catalog:
        """Currently published catalog (immutable snapshot)."""
        with self._lock.read():
            return self._catalog

    @property
    def headers(self) -> "Mapping[str, str]":
        """Headers of the current catalog (read-only)."""
        return self.catalog.headers

    @property
    def plural_rule(self) -> "PluralRule":
        """Plural rule of the current catalog."""
        return self.catalog.plural_rule

    @property
    def language(self) -> str | None:
        """Raw value of the Language header, or None if not declared."""
        return self.catalog.headers.get("Language")

    def get_header(self, name: str) -> str:
        """Return the raw value of a catalog header.

        Args:
            name: Header name, e.g. "Language"

        Raises:
            MissingHeaderError: If the header was not declared
        """
        return self.catalog.get_header(name)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_from_lines(self, lines: Iterable[str], *, source: str = "<lines>") -> None:
        """Replace the catalog with one parsed from text lines.

        Args:
            lines: .po lines, with or without line terminators
            source: Description used in log messages

        Raises:
            PoFormatError: If the header block or Plural-Forms header is
                malformed. The previous catalog stays in place.
        """
        with self._reload_lock:
            try:
                catalog = build_catalog(lines)
            except PoCatalogError as e:
                logger.error("Failed to load catalog %s: %s", source, e)
                raise

            with self._lock.write():
                self._catalog = catalog

        logger.info(
            "Loaded catalog %s: %d messages, nplurals=%d (%s)",
            source,
            len(catalog),
            catalog.plural_rule.nplurals,
            "precompiled" if catalog.plural_rule.precompiled else "interpreted",
        )

    def load_from_string(self, text: "PoSource", *, source: str = "<string>") -> None:
        """Replace the catalog with one parsed from .po text.

        Raises:
            PoFormatError: If the catalog headers are malformed
        """
        self.load_from_lines(split_lines(text), source=source)

    def load_from_reader(self, reader: TextIO, *, source: str | None = None) -> None:
        """Replace the catalog with one read from an open text stream.

        The stream is consumed but not closed.

        Raises:
            PoFormatError: If the catalog headers are malformed
        """
        name = source if source is not None else getattr(reader, "name", "<stream>")
        self.load_from_lines(reader, source=str(name))

    def load_from_file(self, path: str | Path) -> None:
        """Replace the catalog with the content of a .po file.

        Raises:
            FileNotFoundError: If the file does not exist
            CatalogFileError: If the path does not end in .po
            PoFormatError: If the catalog headers are malformed
        """
        self.load_from_string(read_catalog_file(path), source=str(path))

    def load_from_loader(self, loader: "CatalogLoader", locale: "LocaleCode") -> None:
        """Replace the catalog with the one a loader provides for a locale.

        Raises:
            FileNotFoundError: If the loader has no catalog for the locale
            PoFormatError: If the catalog headers are malformed
        """
        self.load_from_string(loader.load(locale), source=loader.describe_path(locale))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_string(self, message_id: "MessageId") -> str:
        """Return the translation of an unscoped message.

        Returns:
            Translated text, or message_id if no translation exists
        """
        return self._singular(None, message_id)

    def get_particular_string(self, context: str, message_id: "MessageId") -> str:
        """Return the translation of a message within a context.

        Returns:
            Translated text, or message_id if no translation exists
        """
        return self._singular(context, message_id)

    def get_plural_string(
        self, message_id: "MessageId", message_id_plural: "MessageId", n: int
    ) -> str:
        """Return the translation of an unscoped message for count n.

        Returns:
            Translated form selected by the catalog's plural rule, or
            message_id_plural if n != 1 else message_id when untranslated
        """
        return self._plural(None, message_id, message_id_plural, n)

    def get_particular_plural_string(
        self,
        context: str,
        message_id: "MessageId",
        message_id_plural: "MessageId",
        n: int,
    ) -> str:
        """Return the translation of a message within a context for count n.

        Returns:
            Translated form selected by the catalog's plural rule, or
            message_id_plural if n != 1 else message_id when untranslated
        """
        return self._plural(context, message_id, message_id_plural, n)

    def _singular(self, context: str | None, message_id: str) -> str:
        message = self.catalog.find(context, message_id)
        if message is None or not message.translations[0]:
            logger.debug("No translation for '%s'", message_id[:_LOG_TRUNCATE])
            return message_id
        return message.translations[0]

    def _plural(
        self, context: str | None, message_id: str, message_id_plural: str, n: int
    ) -> str:
        catalog = self.catalog
        message = catalog.find(context, message_id)
        if message is not None:
            translation = self._select_form(catalog, message, n)
            if translation:
                return translation

        logger.debug("No plural translation for '%s' (n=%d)", message_id[:_LOG_TRUNCATE], n)
        # Untranslated text is in the source language: English split.
        return message_id_plural if n != 1 else message_id

    @staticmethod
    def _select_form(catalog: Catalog, message: "Message", n: int) -> str:
        try:
            index = catalog.plural_rule(n)
        except PluralFormulaError as e:
            logger.warning("Plural rule failed for n=%d: %s", n, e)
            return ""

        nplurals = catalog.plural_rule.nplurals
        if not 0 <= index < nplurals:
            logger.warning(
                "Plural index %d out of range for '%s' (nplurals=%d)",
                index,
                (message.id or "")[:_LOG_TRUNCATE],
                nplurals,
            )
            return ""
        # Entries parsed before the header may hold fewer slots than nplurals.
        return message.translation(index)
