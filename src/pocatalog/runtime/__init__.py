"""Catalog runtime package.

Provides the immutable Catalog snapshot, its builder, header parsing,
the readers-writer lock and the PoFile lookup API.
Depends on syntax and plurals packages.

Python 3.13+.
"""

from .catalog import EMPTY_CATALOG, Catalog, CatalogBuilder, build_catalog
from .headers import parse_headers
from .pofile import PoFile
from .rwlock import RWLock

__all__ = [
    "EMPTY_CATALOG",
    "Catalog",
    "CatalogBuilder",
    "PoFile",
    "RWLock",
    "build_catalog",
    "parse_headers",
]
