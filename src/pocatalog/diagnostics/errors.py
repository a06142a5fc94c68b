"""Catalog exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object and
keep the Diagnostic for programmatic inspection.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CatalogFileError",
    "HeaderFormatError",
    "MissingHeaderError",
    "PluralFormsError",
    "PluralFormulaError",
    "PoCatalogError",
    "PoFormatError",
]


class PoCatalogError(Exception):
    """Base exception for all catalog errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PoCatalogError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PoFormatError(PoCatalogError, ValueError):
    """Catalog content could not be interpreted.

    Raised during load only. Aborts the whole load: the previously
    published catalog stays in place.
    """


class HeaderFormatError(PoFormatError):
    """Header block line without a ``name: value`` colon separator."""


class PluralFormsError(PoFormatError):
    """Plural-Forms header does not match ``nplurals=N; plural=EXPR;``.

    Also raised when nplurals is outside 1..MAX_PLURAL_FORMS.
    """


class PluralFormulaError(PoFormatError):
    """Plural formula cannot be compiled or evaluated.

    Compilation failures surface when the formula is constructed, never
    on first evaluation. Evaluation failures (modulo by a computed zero)
    are caught by lookups, which fall back to the untranslated text.
    """


class MissingHeaderError(PoCatalogError, KeyError):
    """Requested header was not declared by the loaded catalog."""

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes.
        return str(self.args[0]) if self.args else ""


class CatalogFileError(PoCatalogError, ValueError):
    """Loader was given a path it refuses to read (e.g. not a .po file)."""
