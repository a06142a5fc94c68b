"""Catalog message record.

A Message is built incrementally by the parser, one line at a time,
and frozen in place once inserted into a Catalog. Nothing mutates a
Message after the parser yields it.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from pocatalog.constants import CONTEXT_SEPARATOR

__all__ = ["Message", "message_key"]


def message_key(context: str | None, message_id: str) -> str:
    """Build the storage key for a (context, id) pair.

    Args:
        context: msgctxt value, or None for unscoped messages
        message_id: msgid value

    Returns:
        message_id unchanged when context is None, otherwise context and
        id joined with CONTEXT_SEPARATOR

    Example:
        >>> message_key(None, "File")
        'File'
        >>> message_key("menu", "File")
        'menu$__//_$_//__$File'
    """
    if context is None:
        return message_id
    return f"{context}{CONTEXT_SEPARATOR}{message_id}"


@dataclass(slots=True)
class Message:
    """One catalog entry.

    Attributes:
        context: Disambiguation scope (msgctxt), None if unscoped
        id: Untranslated singular key (msgid), None until a msgid line is seen
        id_plural: Untranslated plural key (msgid_plural), None if not plural
        translations: msgstr values indexed by plural category. Starts as a
            single empty string; slots never written stay empty.
    """

    context: str | None = None
    id: str | None = None
    id_plural: str | None = None
    translations: list[str] = field(default_factory=lambda: [""])

    @property
    def key(self) -> str:
        """Storage key combining context and id.

        Raises:
            ValueError: If id was never set
        """
        if self.id is None:
            msg = "Message has no id"
            raise ValueError(msg)
        return message_key(self.context, self.id)

    @property
    def is_empty(self) -> bool:
        """True when no translation slot holds text."""
        return not any(self.translations)

    def ensure_space(self, count: int) -> None:
        """Grow translations to hold at least count plural forms."""
        missing = count - len(self.translations)
        if missing > 0:
            self.translations.extend([""] * missing)

    def translation(self, index: int) -> str:
        """Return translations[index], or "" when the slot does not exist."""
        if 0 <= index < len(self.translations):
            return self.translations[index]
        return ""
