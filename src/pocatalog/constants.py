"""Shared constants for pocatalog.

This module provides centralized configuration constants used across
the syntax, plurals and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Message keys: Composite key construction for context-scoped messages
- Plural defaults: Rule in effect before a Plural-Forms header is parsed
- Formula limits: DoS prevention for the plural formula interpreter
- File loading: Suffix and encoding used by the loader shell

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Message keys
    "CONTEXT_SEPARATOR",
    # Plural defaults
    "DEFAULT_NPLURALS",
    "DEFAULT_PLURAL_FORMULA",
    "PLURAL_FORMS_HEADER",
    # Formula limits
    "MAX_PLURAL_FORMS",
    "MAX_FORMULA_DEPTH",
    "MAX_FORMULA_LENGTH",
    # File loading
    "PO_FILE_SUFFIX",
    "DEFAULT_ENCODING",
]

# ============================================================================
# MESSAGE KEYS
# ============================================================================

# Joins msgctxt and msgid into one storage key. Never occurs in real
# catalog content, so ("a", "b$c") and ("a$b", "c") cannot collide.
CONTEXT_SEPARATOR: str = "$__//_$_//__$"

# ============================================================================
# PLURAL DEFAULTS
# ============================================================================

# Germanic two-form rule: index 0 for n == 1, index 1 otherwise.
# Active for catalogs that never declare Plural-Forms.
DEFAULT_NPLURALS: int = 2
DEFAULT_PLURAL_FORMULA: str = "(n != 1)"

# Header carrying the plural declaration in the empty-id message.
PLURAL_FORMS_HEADER: str = "Plural-Forms"

# ============================================================================
# FORMULA LIMITS
# ============================================================================

# Upper bound on nplurals and on N in msgstr[N]. Real languages use at
# most 6 forms; the bound keeps a corrupt index from allocating memory.
MAX_PLURAL_FORMS: int = 256

# Maximum nesting accepted by the formula parser, and maximum height of
# the compiled expression tree. Real gettext formulas stay under 12; 50
# keeps parsing and evaluation far below the default recursion limit.
MAX_FORMULA_DEPTH: int = 50

# Maximum formula length in characters. The longest formula in common
# use (Arabic, 6 forms) is under 120 characters.
MAX_FORMULA_LENGTH: int = 4096

# ============================================================================
# FILE LOADING
# ============================================================================

PO_FILE_SUFFIX: str = ".po"

# utf-8-sig drops a leading BOM written by some editors.
DEFAULT_ENCODING: str = "utf-8-sig"
