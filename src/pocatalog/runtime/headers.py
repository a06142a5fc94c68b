"""Catalog header parsing.

Headers live in the msgstr of the message whose msgid is empty, one
``Name: value`` pair per line:

    msgid ""
    msgstr ""
    "Language: de\\n"
    "Plural-Forms: nplurals=2; plural=(n != 1);\\n"

Python 3.13+. Zero external dependencies.
"""

import logging

from pocatalog.diagnostics import ErrorTemplate, HeaderFormatError
from pocatalog.syntax import split_lines

__all__ = ["parse_headers"]

logger = logging.getLogger(__name__)


def parse_headers(text: str) -> dict[str, str]:
    """Parse a header block into a name → value mapping.

    Blank lines are ignored. Names and values are stripped. A name that
    appears twice keeps its last value.

    Args:
        text: msgstr of the empty-id message, already unescaped

    Returns:
        Header mapping in declaration order

    Raises:
        HeaderFormatError: If a non-blank line has no colon

    Example:
        >>> parse_headers("Language: de\\nMIME-Version: 1.0\\n")
        {'Language': 'de', 'MIME-Version': '1.0'}
    """
    headers: dict[str, str] = {}
    for line in split_lines(text):
        if not line.strip():
            continue

        name, separator, value = line.partition(":")
        if not separator:
            raise HeaderFormatError(ErrorTemplate.header_line_invalid(line))

        name = name.strip()
        if name in headers:
            logger.warning("Duplicate header '%s' overwritten", name)
        headers[name] = value.strip()
    return headers
