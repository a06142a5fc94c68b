"""Immutable catalog snapshot and the builder that produces it.

A Catalog is everything one load produced: messages, headers and the
plural rule, published together. PoFile swaps whole Catalog objects, so
a reader holding one never sees messages from one load paired with the
plural rule of another.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pocatalog.constants import PLURAL_FORMS_HEADER
from pocatalog.diagnostics import ErrorTemplate, MissingHeaderError
from pocatalog.plurals import DEFAULT_PLURAL_RULE, PluralRule, parse_plural_forms
from pocatalog.runtime.headers import parse_headers
from pocatalog.syntax import Message, PoParser, message_key

__all__ = ["EMPTY_CATALOG", "Catalog", "CatalogBuilder", "build_catalog"]

logger = logging.getLogger(__name__)

# Logging truncation limit for message ids.
_LOG_TRUNCATE: int = 50


def _empty_mapping() -> MappingProxyType:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Catalog:
    """Read-only result of loading one catalog.

    Attributes:
        messages: Storage key → Message
        headers: Header name → raw value
        plural_rule: Rule selecting the translation index for a count
    """

    messages: Mapping[str, Message] = field(default_factory=_empty_mapping)
    headers: Mapping[str, str] = field(default_factory=_empty_mapping)
    plural_rule: PluralRule = DEFAULT_PLURAL_RULE

    def find(self, context: str | None, message_id: str) -> Message | None:
        """Return the message stored for (context, id), if any."""
        return self.messages.get(message_key(context, message_id))

    def get_header(self, name: str) -> str:
        """Return a header value.

        Raises:
            MissingHeaderError: If the catalog did not declare the header
        """
        try:
            return self.headers[name]
        except KeyError:
            raise MissingHeaderError(ErrorTemplate.header_not_found(name)) from None

    def __len__(self) -> int:
        return len(self.messages)


EMPTY_CATALOG: Catalog = Catalog()
"""Catalog with no messages, no headers and the default plural rule."""


class CatalogBuilder:
    """Accumulates parsed messages into a Catalog.

    Headers are resolved as soon as the empty-id message arrives, so the
    plural count is known before any later msgid_plural block is parsed.

    Example:
        >>> builder = CatalogBuilder()
        >>> for message in PoParser().parse(['msgid "File"', 'msgstr "Datei"']):
        ...     builder.add(message)
        >>> builder.build().find(None, "File").translations
        ['Datei']
    """

    __slots__ = ("_headers", "_messages", "_plural_rule")

    def __init__(self) -> None:
        self._messages: dict[str, Message] = {}
        self._headers: dict[str, str] = {}
        self._plural_rule: PluralRule = DEFAULT_PLURAL_RULE

    @property
    def plural_rule(self) -> PluralRule:
        """Plural rule resolved so far."""
        return self._plural_rule

    def add(self, message: Message) -> None:
        """Insert a finalized message; the last message with a key wins.

        Raises:
            HeaderFormatError: If the message is the header block and a
                line lacks a colon
            PluralFormsError: If the Plural-Forms header is malformed
            PluralFormulaError: If the Plural-Forms formula cannot be compiled
        """
        key = message.key
        if key in self._messages:
            logger.warning("Duplicate message '%s' overwritten", key[:_LOG_TRUNCATE])
        self._messages[key] = message
        logger.debug("Registered message: %s", key[:_LOG_TRUNCATE])

        if message.id == "" and message.context is None:
            self._add_headers(message.translations[0])

    def _add_headers(self, text: str) -> None:
        for name, value in parse_headers(text).items():
            if name in self._headers:
                logger.warning("Duplicate header '%s' overwritten", name)
            self._headers[name] = value

        plural_forms = self._headers.get(PLURAL_FORMS_HEADER)
        if plural_forms is not None:
            self._plural_rule = parse_plural_forms(plural_forms)

    def build(self) -> Catalog:
        """Freeze the accumulated state into a Catalog."""
        return Catalog(
            messages=MappingProxyType(dict(self._messages)),
            headers=MappingProxyType(dict(self._headers)),
            plural_rule=self._plural_rule,
        )


def build_catalog(lines: Iterable[str]) -> Catalog:
    """Parse PO lines into a Catalog.

    Args:
        lines: Text lines of a .po catalog

    Returns:
        Fully built Catalog

    Raises:
        PoFormatError: If the header block or Plural-Forms header is invalid
    """
    parser = PoParser(nplurals=DEFAULT_PLURAL_RULE.nplurals)
    builder = CatalogBuilder()
    for message in parser.parse(lines):
        builder.add(message)
        parser.nplurals = builder.plural_rule.nplurals
    return builder.build()
