"""Catalog loading package.

Provides the file-system shell around the parsing core: reading .po
files, locale-keyed loaders, and type aliases for call sites.

Python 3.13+. Zero external dependencies.
"""

from pocatalog.localization.loading import CatalogLoader, PathCatalogLoader, read_catalog_file
from pocatalog.localization.types import LocaleCode, MessageId, PoSource

__all__ = [
    "CatalogLoader",
    "LocaleCode",
    "MessageId",
    "PathCatalogLoader",
    "PoSource",
    "read_catalog_file",
]
