"""Catalog loading shell.

Everything that touches the file system lives here, outside the parser
and the lookup core: reading a .po file, rejecting paths that are not
.po files, and mapping a locale code to a catalog path.

Components:
    read_catalog_file - Read one .po file as text
    CatalogLoader - Protocol for locale-keyed catalog sources
    PathCatalogLoader - Disk-based loader with path-traversal prevention

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from pocatalog.constants import DEFAULT_ENCODING, PO_FILE_SUFFIX
from pocatalog.diagnostics import CatalogFileError, ErrorTemplate
from pocatalog.localization.types import LocaleCode, PoSource

__all__ = [
    "CatalogLoader",
    "PathCatalogLoader",
    "read_catalog_file",
]

logger = logging.getLogger(__name__)


def read_catalog_file(path: str | Path) -> PoSource:
    """Read a .po catalog from disk.

    Args:
        path: Path to a file with the .po suffix

    Returns:
        File content decoded as UTF-8 (a leading BOM is dropped)

    Raises:
        FileNotFoundError: If the file does not exist
        CatalogFileError: If the path does not end in .po
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(str(file_path))

    if file_path.suffix != PO_FILE_SUFFIX:
        raise CatalogFileError(ErrorTemplate.file_not_po(str(file_path)))

    logger.debug("Reading catalog file: %s", file_path)
    return file_path.read_text(encoding=DEFAULT_ENCODING)


class CatalogLoader(Protocol):
    """Protocol for loading the catalog of a locale.

    This is a Protocol (structural typing) rather than ABC so any object
    with matching methods can feed PoFile.load_from_loader().

    Example:
        >>> class DictLoader:
        ...     def __init__(self, catalogs: dict[str, str]) -> None:
        ...         self.catalogs = catalogs
        ...     def load(self, locale: str) -> str:
        ...         return self.catalogs[locale]
        ...     def describe_path(self, locale: str) -> str:
        ...         return f"<memory:{locale}>"
    """

    def load(self, locale: LocaleCode) -> PoSource:
        """Return the .po text for a locale.

        Raises:
            FileNotFoundError: If no catalog exists for the locale
        """

    def describe_path(self, locale: LocaleCode) -> str:
        """Return a human-readable location for diagnostics."""
        return f"<{locale}>"


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system loader using a path template.

    The template must contain a ``{locale}`` placeholder, e.g.
    ``"locales/{locale}/LC_MESSAGES/messages.po"``.

    Security:
        Locale codes containing path separators or ".." are rejected, so
        a locale taken from user input cannot escape the template.

    Attributes:
        path_template: Path with a {locale} placeholder
    """

    path_template: str

    def __post_init__(self) -> None:
        """Validate the template at construction.

        Raises:
            ValueError: If path_template lacks the {locale} placeholder
        """
        if "{locale}" not in self.path_template:
            msg = (
                f"path_template must contain '{{locale}}' placeholder, "
                f"got: '{self.path_template}'"
            )
            raise ValueError(msg)

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        if not locale:
            raise CatalogFileError(ErrorTemplate.locale_invalid(locale, "empty"))
        if ".." in locale:
            raise CatalogFileError(
                ErrorTemplate.locale_invalid(locale, "path traversal sequence")
            )
        if "/" in locale or "\\" in locale:
            raise CatalogFileError(ErrorTemplate.locale_invalid(locale, "path separator"))

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the path the template resolves to for a locale.

        Raises:
            CatalogFileError: If the locale code is unsafe
        """
        self._validate_locale(locale)
        return self.path_template.replace("{locale}", locale)

    def load(self, locale: LocaleCode) -> PoSource:
        """Read the catalog for a locale.

        Raises:
            CatalogFileError: If the locale code is unsafe or the path is not .po
            FileNotFoundError: If the catalog file does not exist
        """
        return read_catalog_file(self.describe_path(locale))
