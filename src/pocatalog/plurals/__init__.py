"""Plural rule package.

Turns a gettext Plural-Forms header into a callable mapping a count to
a plural category index, using precompiled rules for the common
language families and a formula interpreter for everything else.

Python 3.13+. Zero external dependencies.
"""

from .formula import PluralFormula, compile_plural_formula
from .known import KNOWN_PLURAL_RULES, PluralFunction, lookup_known_rule, normalize_plural_forms
from .rules import DEFAULT_PLURAL_RULE, PluralRule, parse_plural_forms

__all__ = [
    "DEFAULT_PLURAL_RULE",
    "KNOWN_PLURAL_RULES",
    "PluralFormula",
    "PluralFunction",
    "PluralRule",
    "compile_plural_formula",
    "lookup_known_rule",
    "normalize_plural_forms",
    "parse_plural_forms",
]
