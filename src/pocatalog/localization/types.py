"""Type aliases for the loading domain.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "MessageId",
    "PoSource",
]

MessageId: TypeAlias = str
"""Untranslated message text used as a lookup key (msgid)."""

LocaleCode: TypeAlias = str
"""Locale code substituted into loader paths (e.g. 'de', 'pt_BR')."""

PoSource: TypeAlias = str
"""Raw .po catalog text as a Python string."""
