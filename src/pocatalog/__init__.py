"""pocatalog - gettext .po catalogs with precompiled plural rules.

Loads a gettext message catalog (the .po text format) into an immutable
in-memory snapshot and resolves message ids, optionally scoped by a
context and optionally pluralized by a count, to their translations.
Plural-Forms headers are served by precompiled rules for the common
language families and by a small formula interpreter otherwise.

Public API:
    PoFile - Load a catalog and look up translations
    Catalog - Immutable snapshot of one loaded catalog
    PluralRule - Resolved Plural-Forms rule
    parse_plural_forms - Build a PluralRule from a header value
    compile_plural_formula - Compile a bare plural expression
    PathCatalogLoader - Locale-keyed .po file loader

Exceptions:
    PoCatalogError - Base exception class
    PoFormatError - Malformed catalog content (raised by loads)
    HeaderFormatError - Header line without a colon
    PluralFormsError - Malformed Plural-Forms header
    PluralFormulaError - Uncompilable plural formula
    MissingHeaderError - get_header() on an undeclared header
    CatalogFileError - Loader refused a path

Submodules:
    pocatalog.syntax - Message record and PO line parser
    pocatalog.plurals - Plural rule table and formula interpreter
    pocatalog.runtime - Catalog snapshot, builder and PoFile
    pocatalog.localization - File loading shell
    pocatalog.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    CatalogFileError,
    HeaderFormatError,
    MissingHeaderError,
    PluralFormsError,
    PluralFormulaError,
    PoCatalogError,
    PoFormatError,
)
from .localization import PathCatalogLoader
from .plurals import PluralRule, compile_plural_formula, parse_plural_forms
from .runtime import Catalog, PoFile

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("pocatalog")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Catalog",
    "CatalogFileError",
    "HeaderFormatError",
    "MissingHeaderError",
    "PathCatalogLoader",
    "PluralFormsError",
    "PluralFormulaError",
    "PluralRule",
    "PoCatalogError",
    "PoFile",
    "PoFormatError",
    "__version__",
    "compile_plural_formula",
    "parse_plural_forms",
]
