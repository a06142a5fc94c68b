"""Plural rule resolution from the Plural-Forms header.

A PluralRule bundles the declared form count, the formula text and the
evaluator chosen for it: a precompiled rule from the known table when
the header matches one exactly, the generic interpreter otherwise.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from dataclasses import dataclass

from pocatalog.constants import DEFAULT_NPLURALS, DEFAULT_PLURAL_FORMULA, MAX_PLURAL_FORMS
from pocatalog.diagnostics import ErrorTemplate, PluralFormsError
from pocatalog.plurals.formula import compile_plural_formula
from pocatalog.plurals.known import PluralFunction, lookup_known_rule

__all__ = [
    "DEFAULT_PLURAL_RULE",
    "PluralRule",
    "parse_plural_forms",
]

logger = logging.getLogger(__name__)

# The character class is the only gate between catalog content and the
# interpreter; anything outside it is rejected before compilation.
_PLURAL_FORMS_PATTERN = re.compile(
    r"^nplurals=(?P<nplurals>[0-9]+);\s*plural=(?P<plural>[0-9n?:()!=\s%<>|&]+);?$"
)


@dataclass(frozen=True, slots=True)
class PluralRule:
    """Active plural rule of a catalog.

    Attributes:
        nplurals: Number of plural categories (>= 1)
        formula: Expression text from the header (after ``plural=``)
        evaluator: Maps a count to a category index
        precompiled: True if evaluator came from the known-rule table

    Example:
        >>> rule = parse_plural_forms("nplurals=2; plural=(n != 1);")
        >>> rule(1), rule(2)
        (0, 1)
    """

    nplurals: int
    formula: str
    evaluator: PluralFunction
    precompiled: bool = False

    def __call__(self, n: int) -> int:
        """Return the category index for count n.

        Negative counts are evaluated by magnitude, the way gettext's
        unsigned count treats them in every shipped formula.

        Raises:
            PluralFormulaError: If an interpreted formula divides by zero
        """
        return self.evaluator(abs(n))


def _default_evaluator(n: int) -> int:
    return 0 if n == 1 else 1


DEFAULT_PLURAL_RULE: PluralRule = PluralRule(
    nplurals=DEFAULT_NPLURALS,
    formula=DEFAULT_PLURAL_FORMULA,
    evaluator=_default_evaluator,
    precompiled=True,
)
"""Two-form rule in effect until a Plural-Forms header is parsed."""


def parse_plural_forms(value: str) -> PluralRule:
    """Build the plural rule declared by a Plural-Forms header value.

    Args:
        value: Raw header value, e.g. "nplurals=3; plural=(n==1 ? 0 : 1);"

    Returns:
        PluralRule with a precompiled evaluator when the header is a known
        gettext form, otherwise an interpreted one

    Raises:
        PluralFormsError: If the value does not match
            ``nplurals=<digits>; plural=<expr>;`` or nplurals is out of range
        PluralFormulaError: If the expression passes the character check
            but cannot be compiled
    """
    match = _PLURAL_FORMS_PATTERN.match(value.strip())
    if match is None:
        raise PluralFormsError(ErrorTemplate.plural_forms_invalid(value))

    nplurals = int(match.group("nplurals"))
    if not 1 <= nplurals <= MAX_PLURAL_FORMS:
        raise PluralFormsError(ErrorTemplate.plural_count_invalid(nplurals))

    formula = match.group("plural").strip()

    known = lookup_known_rule(value)
    if known is not None:
        logger.debug("Plural-Forms matched precompiled rule: %s", formula)
        return PluralRule(nplurals, formula, known, precompiled=True)

    logger.debug("Plural-Forms compiled by interpreter: %s", formula)
    return PluralRule(nplurals, formula, compile_plural_formula(formula))
