"""PO syntax package.

Provides the Message record and the line-oriented PO parser.
Depends only on constants and enums.

Python 3.13+. Zero external dependencies.
"""

from .message import Message, message_key
from .parser import PoParser, parse_lines, split_lines, unescape

__all__ = [
    "Message",
    "PoParser",
    "message_key",
    "parse_lines",
    "split_lines",
    "unescape",
]
