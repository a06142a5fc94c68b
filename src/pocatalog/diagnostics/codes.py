"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing headers)
        2000-2999: Header errors (malformed header block, Plural-Forms)
        3000-3999: Plural formula errors (compilation, evaluation)
        4000-4999: Loading errors (file boundary)
    """

    # Lookup errors (1000-1999)
    HEADER_NOT_FOUND = 1001

    # Header errors (2000-2999)
    HEADER_LINE_INVALID = 2001
    PLURAL_FORMS_INVALID = 2002
    PLURAL_COUNT_INVALID = 2003

    # Plural formula errors (3000-3999)
    FORMULA_UNEXPECTED_CHARACTER = 3001
    FORMULA_UNEXPECTED_TOKEN = 3002
    FORMULA_UNEXPECTED_END = 3003
    FORMULA_TOO_DEEP = 3004
    FORMULA_TOO_LONG = 3005
    FORMULA_DIVISION_BY_ZERO = 3006

    # Loading errors (4000-4999)
    FILE_NOT_PO = 4001
    LOCALE_INVALID = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        position: Character offset in the offending text (formula errors)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    position: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[PLURAL_FORMS_INVALID]: Invalid Plural-Forms value: 'nplurals=x'
              --> position 9
              = help: Expected 'nplurals=<count>; plural=<expression>;'

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.position is not None:
            lines.append(f"  --> position {self.position}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
