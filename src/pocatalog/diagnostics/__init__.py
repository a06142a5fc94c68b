"""Diagnostic system for catalog errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogFileError,
    HeaderFormatError,
    MissingHeaderError,
    PluralFormsError,
    PluralFormulaError,
    PoCatalogError,
    PoFormatError,
)
from .templates import ErrorTemplate

__all__ = [
    "CatalogFileError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "HeaderFormatError",
    "MissingHeaderError",
    "PluralFormsError",
    "PluralFormulaError",
    "PoCatalogError",
    "PoFormatError",
]
