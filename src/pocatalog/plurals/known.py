"""Precompiled plural rules for the common gettext Plural-Forms headers.

Covers the formulas gettext ships for the vast majority of languages.
Each rule is plain Python arithmetic, so catalogs using one of these
headers never go through the formula interpreter.

Lookup keys are full Plural-Forms header values with all whitespace
removed, exactly as gettext writes them. A header that differs in any
other way (extra parentheses, reordered operands) misses the table and
is compiled by the interpreter instead; that is not an error.

Reference: https://www.gnu.org/software/gettext/manual/html_node/Plural-forms.html

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TypeAlias

__all__ = [
    "KNOWN_PLURAL_RULES",
    "PluralFunction",
    "lookup_known_rule",
    "normalize_plural_forms",
]

PluralFunction: TypeAlias = Callable[[int], int]
"""Maps a count to a zero-based plural category index."""


# ============================================================================
# ONE FORM
# ============================================================================


def _single(n: int) -> int:
    """Japanese, Chinese, Korean, Vietnamese, Thai, Indonesian..."""
    return 0


# ============================================================================
# TWO FORMS
# ============================================================================


def _one_other(n: int) -> int:
    """English, German, Dutch, Swedish, Italian, Spanish..."""
    return int(n != 1)


def _icelandic(n: int) -> int:
    return 0 if n % 10 == 1 and n % 100 != 11 else 1


def _zero_one_singular(n: int) -> int:
    """French, Brazilian Portuguese, Turkish (gettext variant)."""
    return int(n > 1)


# ============================================================================
# THREE FORMS
# ============================================================================


def _latvian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    return 1 if n != 0 else 2


def _lithuanian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    return 1 if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20) else 2


def _east_slavic(n: int) -> int:
    """Russian, Ukrainian, Belarusian, Serbian, Croatian."""
    if n % 10 == 1 and n % 100 != 11:
        return 0
    return 1 if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20) else 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20) else 2


def _czech(n: int) -> int:
    """Czech, Slovak."""
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _romanian(n: int) -> int:
    if n == 1:
        return 0
    return 2 if n % 100 > 19 or (n % 100 == 0 and n != 0) else 1


# ============================================================================
# FOUR FORMS
# ============================================================================


def _slovenian(n: int) -> int:
    match n % 100:
        case 1:
            return 0
        case 2:
            return 1
        case 3 | 4:
            return 2
    return 3


def _maltese(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 < n % 100 < 11:
        return 1
    if 10 < n % 100 < 20:
        return 2
    return 3


def _scottish_gaelic(n: int) -> int:
    if n in (1, 11):
        return 0
    if n in (2, 12):
        return 1
    return 2 if 2 < n < 20 else 3


def _welsh(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2 if n not in (8, 11) else 3


def _cornish(n: int) -> int:
    if n in (1, 2, 3):
        return n - 1
    return 3


# ============================================================================
# FIVE AND SIX FORMS
# ============================================================================


def _irish(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n < 7:
        return 2
    return 3 if n < 11 else 4


def _arabic(n: int) -> int:
    if n in (0, 1, 2):
        return n
    if 3 <= n % 100 <= 10:
        return 3
    return 4 if 11 <= n % 100 <= 99 else 5


# ============================================================================
# TABLE
# ============================================================================

KNOWN_PLURAL_RULES: Mapping[str, PluralFunction] = MappingProxyType({
    "nplurals=1;plural=0;": _single,
    "nplurals=2;plural=(n!=1);": _one_other,
    "nplurals=2;plural=(n%10==1&&n%100!=11)?0:1;": _icelandic,
    "nplurals=2;plural=(n>1);": _zero_one_singular,
    "nplurals=3;plural=(n%10==1&&n%100!=11?0:n!=0?1:2);": _latvian,
    "nplurals=3;plural=(n%10==1&&n%100!=11?0:n%10>=2&&(n%100<10||n%100>=20)?1:2);": (
        _lithuanian
    ),
    "nplurals=3;plural=(n%10==1&&n%100!=11?0:n%10>=2&&n%10<=4&&(n%100<10||n%100>=20)?1:2);": (
        _east_slavic
    ),
    "nplurals=3;plural=(n==1?0:n%10>=2&&n%10<=4&&(n%100<10||n%100>=20)?1:2);": _polish,
    # Unbalanced parenthesis: widespread in Polish catalogs generated by
    # older tools. Only the table can serve it; the interpreter rejects it.
    "nplurals=3;plural=(n==1?0:n%10>=2&&n%10<=4&&(n%100<10||n%100>=20)?1:2;": _polish,
    "nplurals=3;plural=(n==1)?0:(n>=2&&n<=4)?1:2;": _czech,
    "nplurals=3;plural=(n==1?0:(((n%100>19)||((n%100==0)&&(n!=0)))?2:1));": _romanian,
    "nplurals=4;plural=(n%100==1?0:n%100==2?1:n%100==3||n%100==4?2:3);": _slovenian,
    "nplurals=4;plural=(n==1?0:n==0||(n%100>1&&n%100<11)?1:(n%100>10&&n%100<20)?2:3);": (
        _maltese
    ),
    "nplurals=4;plural=(n==1||n==11)?0:(n==2||n==12)?1:(n>2&&n<20)?2:3;": _scottish_gaelic,
    "nplurals=4;plural=(n==1)?0:(n==2)?1:(n!=8&&n!=11)?2:3;": _welsh,
    "nplurals=4;plural=(n==1)?0:(n==2)?1:(n==3)?2:3;": _cornish,
    "nplurals=5;plural=(n==1?0:n==2?1:n<7?2:n<11?3:4);": _irish,
    "nplurals=6;plural=(n==0?0:n==1?1:n==2?2:n%100>=3&&n%100<=10?3:n%100>=11&&n%100<=99?4:5);": (
        _arabic
    ),
})
"""Whitespace-free Plural-Forms header → precompiled rule. Read-only."""


def normalize_plural_forms(value: str) -> str:
    """Remove all whitespace from a Plural-Forms header value.

    Example:
        >>> normalize_plural_forms("nplurals=2; plural=(n != 1);")
        'nplurals=2;plural=(n!=1);'
    """
    return "".join(value.split())


def lookup_known_rule(plural_forms: str) -> PluralFunction | None:
    """Return the precompiled rule for a Plural-Forms header, if any.

    Args:
        plural_forms: Header value, whitespace allowed

    Returns:
        Precompiled rule, or None when the header is not in the table

    Example:
        >>> rule = lookup_known_rule("nplurals=2; plural=(n != 1);")
        >>> rule(1), rule(5)
        (0, 1)
        >>> lookup_known_rule("nplurals=2; plural=(n > 2);") is None
        True
    """
    return KNOWN_PLURAL_RULES.get(normalize_plural_forms(plural_forms))
