"""Line-oriented gettext PO parser.

Reconstructs Message records from .po text using a small block-type
state machine. The parser is tolerant: it never raises on malformed
input. Lines it cannot attribute to a field reset the block type so
their content is dropped instead of being appended to the wrong field.

Recognized lines (after stripping surrounding whitespace):
    # ...                  comment, skipped
    <blank>                record separator
    msgctxt "..."          context
    msgid "..."            singular id
    msgid_plural "..."     plural id
    msgstr "..."           translation (index 0)
    msgstr[N] "..."        translation for plural category N
    "..."                  continuation of the current field

Escapes:
    \\t → tab, \\r\\n → CRLF, \\n → newline, \\" → quote.
    \\\\ is kept literally as two backslashes, so "\\\\n" is not a newline.
    Any other backslash sequence is kept verbatim.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from collections.abc import Iterable, Iterator

from pocatalog.constants import DEFAULT_NPLURALS, MAX_PLURAL_FORMS
from pocatalog.enums import BlockType
from pocatalog.syntax.message import Message

__all__ = ["PoParser", "parse_lines", "split_lines", "unescape"]

logger = logging.getLogger(__name__)

# Logging truncation limit for message ids.
_LOG_TRUNCATE: int = 50

# Payload between the first and the last double quote on a line.
_QUOTED_PAYLOAD = re.compile(r'"(.*)"', re.DOTALL)

# Indexed translation: msgstr[2] "..."
_INDEXED_MSGSTR = re.compile(r"^msgstr\[([0-9]+)\]")

# gettext line terminators. Other Unicode separators (U+2028, U+0085,
# form feed) are ordinary characters inside quoted strings.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Single left-to-right pass so an escaped backslash is consumed before
# the character after it can be read as the start of another escape.
_ESCAPE_SEQUENCE = re.compile(r'\\(\\|r\\n|t|n|")')

_ESCAPE_REPLACEMENTS: dict[str, str] = {
    "\\": "\\\\",
    "r\\n": "\r\n",
    "t": "\t",
    "n": "\n",
    '"': '"',
}

# Keyword prefixes in match priority order. msgid_plural must be tested
# before msgid, which is its prefix.
_KEYWORDS: tuple[tuple[str, BlockType], ...] = (
    ("msgctxt", BlockType.CONTEXT),
    ("msgid_plural", BlockType.ID_PLURAL),
    ("msgid", BlockType.ID),
    ("msgstr", BlockType.STR),
)


def unescape(text: str) -> str:
    """Resolve PO string escapes in one quoted fragment.

    Args:
        text: Raw payload between the quotes of one physical line

    Returns:
        Text with recognized escapes replaced

    Example:
        >>> unescape(r"Neue\\nZeile")
        'Neue\\nZeile'
        >>> unescape(r'say \\"hi\\"')
        'say "hi"'
    """
    if "\\" not in text:
        return text
    return _ESCAPE_SEQUENCE.sub(lambda m: _ESCAPE_REPLACEMENTS[m.group(1)], text)


def split_lines(text: str) -> list[str]:
    """Split text at CRLF, CR and LF only.

    Unlike str.splitlines(), characters such as U+2028 or form feed stay
    inside the line, the way a text stream with universal newlines reads
    them.

    Example:
        >>> split_lines('msgstr "a\\u2028b"\\r\\nmsgid "c"')
        ['msgstr "a\\u2028b"', 'msgid "c"']
    """
    return _LINE_BREAK.split(text)


def _block_type_for(line: str, current: BlockType) -> BlockType:
    for keyword, block_type in _KEYWORDS:
        if line.startswith(keyword):
            return block_type
    if not line.startswith('"'):
        return BlockType.NONE
    return current


class PoParser:
    """Block-type state machine turning PO lines into Message records.

    The parser is a generator: each finalized Message is yielded as soon
    as its block closes. Consumers that resolve the header block update
    ``nplurals`` before resuming iteration, so later msgid_plural blocks
    reserve the right number of translation slots.

    Attributes:
        nplurals: Plural form count reserved for msgid_plural entries

    Example:
        >>> parser = PoParser()
        >>> [m.translations for m in parser.parse(['msgid "File"', 'msgstr "Datei"'])]
        [['Datei']]
    """

    __slots__ = ("nplurals",)

    def __init__(self, *, nplurals: int = DEFAULT_NPLURALS) -> None:
        self.nplurals = nplurals

    def parse(self, lines: Iterable[str]) -> Iterator[Message]:
        """Parse lines into messages.

        Records without an id, or with only empty translations, are
        dropped. The last record does not need a trailing blank line.

        Args:
            lines: Text lines, with or without line terminators

        Yields:
            Finalized Message records in source order
        """
        message = Message()
        block_type = BlockType.NONE
        str_index = 0

        for raw_line in lines:
            line = raw_line.strip()

            if line.startswith("#"):
                continue

            if not line:
                if self._is_complete(message):
                    yield message
                message = Message()
                continue

            block_type = _block_type_for(line, block_type)
            if block_type is BlockType.ID_PLURAL:
                message.ensure_space(self.nplurals)
            elif block_type is BlockType.STR and line.startswith("msgstr"):
                str_index = self._translation_index(line)
                if str_index >= MAX_PLURAL_FORMS:
                    block_type = BlockType.NONE

            if block_type is BlockType.NONE:
                continue

            payload = _QUOTED_PAYLOAD.search(line)
            if payload is None:
                continue
            value = unescape(payload.group(1))

            match block_type:
                case BlockType.CONTEXT:
                    message.context = (message.context or "") + value
                case BlockType.ID:
                    message.id = (message.id or "") + value
                case BlockType.ID_PLURAL:
                    message.id_plural = (message.id_plural or "") + value
                case BlockType.STR:
                    message.ensure_space(str_index + 1)
                    message.translations[str_index] += value

        if self._is_complete(message):
            yield message

    @staticmethod
    def _translation_index(line: str) -> int:
        # Continuation lines keep the index of the msgstr line above them.
        match = _INDEXED_MSGSTR.match(line)
        return int(match.group(1)) if match else 0

    @staticmethod
    def _is_complete(message: Message) -> bool:
        if message.id is None:
            return False
        if message.is_empty:
            logger.debug("Discarded untranslated message: %s", message.id[:_LOG_TRUNCATE])
            return False
        return True


def parse_lines(lines: Iterable[str], *, nplurals: int = DEFAULT_NPLURALS) -> list[Message]:
    """Parse lines into a list of messages with a fixed plural count.

    Convenience wrapper for callers that do not resolve headers while
    parsing.

    Args:
        lines: Text lines
        nplurals: Plural form count reserved for msgid_plural entries

    Returns:
        Finalized messages in source order
    """
    return list(PoParser(nplurals=nplurals).parse(lines))
