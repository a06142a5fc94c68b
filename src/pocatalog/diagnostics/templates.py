"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from pocatalog.constants import MAX_PLURAL_FORMS

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

# Longest excerpt of user-supplied text embedded in a message.
_EXCERPT_LIMIT: int = 80


def _excerpt(text: str) -> str:
    if len(text) <= _EXCERPT_LIMIT:
        return text
    return text[:_EXCERPT_LIMIT] + "..."


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def header_not_found(name: str) -> Diagnostic:
        """Header requested by name was never parsed.

        Args:
            name: Header name (e.g. "Language")

        Returns:
            Diagnostic for HEADER_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.HEADER_NOT_FOUND,
            message=f"Header '{name}' missing",
            hint="Headers are read from the msgstr of the message with an empty msgid",
        )

    @staticmethod
    def header_line_invalid(line: str) -> Diagnostic:
        """Header block line lacks a colon.

        Args:
            line: The offending header line

        Returns:
            Diagnostic for HEADER_LINE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.HEADER_LINE_INVALID,
            message=f"Invalid header line: {_excerpt(line)!r}",
            hint="Each header line must have the form 'Name: value'",
        )

    @staticmethod
    def plural_forms_invalid(value: str) -> Diagnostic:
        """Plural-Forms header failed the grammar check.

        Args:
            value: Raw header value

        Returns:
            Diagnostic for PLURAL_FORMS_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FORMS_INVALID,
            message=f"Invalid Plural-Forms value: {_excerpt(value)!r}",
            hint=(
                "Expected 'nplurals=<count>; plural=<expression>;' using only "
                "digits, n, and the operators ? : ( ) ! = % < > | &"
            ),
        )

    @staticmethod
    def plural_count_invalid(nplurals: int) -> Diagnostic:
        """Plural-Forms declared a form count outside 1..MAX_PLURAL_FORMS.

        Args:
            nplurals: Declared count

        Returns:
            Diagnostic for PLURAL_COUNT_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.PLURAL_COUNT_INVALID,
            message=f"nplurals must be between 1 and {MAX_PLURAL_FORMS}, got {nplurals}",
        )

    @staticmethod
    def formula_unexpected_character(char: str, position: int) -> Diagnostic:
        """Formula contains a character outside the accepted grammar.

        Args:
            char: The offending character
            position: Offset in the formula

        Returns:
            Diagnostic for FORMULA_UNEXPECTED_CHARACTER
        """
        return Diagnostic(
            code=DiagnosticCode.FORMULA_UNEXPECTED_CHARACTER,
            message=f"Unexpected character {char!r} in plural formula",
            hint="Use '&&' and '||' for logical operators",
            position=position,
        )

    @staticmethod
    def formula_unexpected_token(token: str, position: int) -> Diagnostic:
        """Formula token appears where the grammar does not allow it.

        Args:
            token: The offending token text
            position: Offset in the formula

        Returns:
            Diagnostic for FORMULA_UNEXPECTED_TOKEN
        """
        return Diagnostic(
            code=DiagnosticCode.FORMULA_UNEXPECTED_TOKEN,
            message=f"Unexpected {token!r} in plural formula",
            position=position,
        )

    @staticmethod
    def formula_unexpected_end(expected: str, position: int) -> Diagnostic:
        """Formula ended before the expression was complete.

        Args:
            expected: Description of what the parser was waiting for
            position: Offset of the end of the formula

        Returns:
            Diagnostic for FORMULA_UNEXPECTED_END
        """
        return Diagnostic(
            code=DiagnosticCode.FORMULA_UNEXPECTED_END,
            message=f"Plural formula ended early, expected {expected}",
            position=position,
        )

    @staticmethod
    def formula_too_deep(max_depth: int, position: int | None = None) -> Diagnostic:
        """Formula nesting exceeds the configured limit.

        Args:
            max_depth: Configured nesting limit
            position: Offset where the limit was hit, None when found after parsing

        Returns:
            Diagnostic for FORMULA_TOO_DEEP
        """
        return Diagnostic(
            code=DiagnosticCode.FORMULA_TOO_DEEP,
            message=f"Plural formula nesting exceeds {max_depth} levels",
            position=position,
        )

    @staticmethod
    def formula_too_long(length: int, max_length: int) -> Diagnostic:
        """Formula exceeds the configured length limit.

        Args:
            length: Actual formula length
            max_length: Configured length limit

        Returns:
            Diagnostic for FORMULA_TOO_LONG
        """
        return Diagnostic(
            code=DiagnosticCode.FORMULA_TOO_LONG,
            message=f"Plural formula is {length} characters, limit is {max_length}",
        )

    @staticmethod
    def formula_division_by_zero(formula: str, n: int | None = None) -> Diagnostic:
        """Modulo by zero, at compile time (literal) or evaluation time.

        Args:
            formula: Formula source
            n: Count being evaluated (None for a literal zero divisor)

        Returns:
            Diagnostic for FORMULA_DIVISION_BY_ZERO
        """
        suffix = "" if n is None else f" for n={n}"
        return Diagnostic(
            code=DiagnosticCode.FORMULA_DIVISION_BY_ZERO,
            message=f"Modulo by zero in plural formula {_excerpt(formula)!r}{suffix}",
        )

    @staticmethod
    def file_not_po(path: str) -> Diagnostic:
        """Loader refused a path without the .po suffix.

        Args:
            path: The rejected path

        Returns:
            Diagnostic for FILE_NOT_PO
        """
        return Diagnostic(
            code=DiagnosticCode.FILE_NOT_PO,
            message=f"File is not a PO file: {path}",
            hint="Compiled .mo catalogs are not supported; load the .po source",
        )

    @staticmethod
    def locale_invalid(locale: str, reason: str) -> Diagnostic:
        """Locale code cannot be substituted into a loader path.

        Args:
            locale: The rejected locale code
            reason: Why it was rejected

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=f"Invalid locale code {locale!r}: {reason}",
        )
