"""Enumerations for pocatalog type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class BlockType(StrEnum):
    """Field that quoted continuation lines are appended to.

    StrEnum provides automatic string conversion: str(BlockType.ID) == "id"
    """

    NONE = "none"
    """No field selected: quoted lines are ignored."""

    CONTEXT = "context"
    """msgctxt "..." """

    ID = "id"
    """msgid "..." """

    ID_PLURAL = "id_plural"
    """msgid_plural "..." """

    STR = "str"
    """msgstr "..." or msgstr[N] "..." """


__all__ = [
    "BlockType",
]
