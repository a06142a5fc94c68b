"""Cross-check of plural resolution against Babel's gettext plural table.

Babel ships the Plural-Forms expression gettext tools write for each
language. Every one of them must resolve, either through the
precompiled table or through the interpreter, and must select an index
inside the declared form count.
"""

from __future__ import annotations

import pytest
from babel.messages.plurals import PLURALS, get_plural

from pocatalog.plurals import PluralFormula, parse_plural_forms

_COUNTS = (*range(0, 130), 1000, 1001, 1002, 1011, 1_000_000)


@pytest.mark.parametrize("language", sorted(PLURALS))
def test_expression_compiles_and_stays_in_range(language: str) -> None:
    nplurals, expression = PLURALS[language]
    formula = PluralFormula(expression)

    for n in _COUNTS:
        assert 0 <= formula(n) < nplurals, (language, n)


@pytest.mark.parametrize("language", sorted(PLURALS))
def test_header_resolves_like_expression(language: str) -> None:
    nplurals, expression = PLURALS[language]
    rule = parse_plural_forms(f"nplurals={nplurals}; plural={expression};")
    formula = PluralFormula(expression)

    assert rule.nplurals == nplurals
    assert [rule(n) for n in _COUNTS] == [formula(n) for n in _COUNTS]


@pytest.mark.parametrize("locale", ["de", "en", "es", "fr"])
def test_common_locales_hit_precompiled_table(locale: str) -> None:
    plural_forms = get_plural(locale).plural_forms

    assert parse_plural_forms(plural_forms).precompiled, plural_forms
