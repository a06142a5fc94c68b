"""Tests for the PO line parser.

Tests verify:
- Escape handling (canonical rule, literal backslashes)
- Block-type state machine (keywords, continuation lines, comments)
- Record boundaries (blank lines, end of input)
- Discard rules (no id, all translations empty)
- Plural slot reservation and indexed msgstr
- Tolerance of malformed lines
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pocatalog.syntax import Message, PoParser, parse_lines, split_lines, unescape

# ============================================================================
# UNESCAPE
# ============================================================================


class TestUnescape:
    """Escape sequences inside one quoted fragment."""

    def test_plain_text_unchanged(self) -> None:
        assert unescape("Datei") == "Datei"

    def test_newline(self) -> None:
        assert unescape(r"Neue\nZeile") == "Neue\nZeile"

    def test_tab(self) -> None:
        assert unescape(r"a\tb") == "a\tb"

    def test_crlf(self) -> None:
        assert unescape(r"a\r\nb") == "a\r\nb"

    def test_quote(self) -> None:
        assert unescape(r"say \"hi\"") == 'say "hi"'

    def test_escaped_backslash_kept_literally(self) -> None:
        # \\n is an escaped backslash followed by n, not a newline.
        assert unescape(r"C:\\new") == r"C:\\new"

    def test_lone_carriage_return_escape_kept(self) -> None:
        assert unescape(r"a\rb") == r"a\rb"

    def test_unknown_escape_kept(self) -> None:
        assert unescape(r"\u00e4") == r"\u00e4"

    @given(st.text(alphabet=st.characters(blacklist_characters="\\")))
    def test_text_without_backslash_is_identity(self, text: str) -> None:
        assert unescape(text) == text


# ============================================================================
# LINE SPLITTING
# ============================================================================


class TestSplitLines:
    """Line terminators recognized in .po text."""

    def test_lf_crlf_and_cr(self) -> None:
        assert split_lines("a\nb\r\nc\rd") == ["a", "b", "c", "d"]

    def test_trailing_terminator_leaves_empty_line(self) -> None:
        assert split_lines("a\n") == ["a", ""]

    @pytest.mark.parametrize(
        "separator", ["\u2028", "\u2029", "\u0085", "\x0b", "\x0c", "\x1c", "\x1d", "\x1e"]
    )
    def test_unicode_separators_do_not_split(self, separator: str) -> None:
        assert split_lines(f'msgstr "a{separator}b"\nx') == [f'msgstr "a{separator}b"', "x"]

    def test_split_translation_survives_parsing(self) -> None:
        messages = parse_lines(split_lines('msgid "A"\nmsgstr "x\u2028y"\n'))

        assert messages[0].translations == ["x\u2028y"]


# ============================================================================
# BASIC RECORDS
# ============================================================================


class TestBasicRecords:
    """Single and multiple message blocks."""

    def test_single_message(self) -> None:
        messages = parse_lines(['msgid "File"', 'msgstr "Datei"'])

        assert messages == [Message(id="File", translations=["Datei"])]

    def test_last_record_without_trailing_blank_line(self) -> None:
        messages = parse_lines(["", 'msgid "A"', 'msgstr "B"'])

        assert [m.id for m in messages] == ["A"]

    def test_blank_lines_separate_records(self) -> None:
        messages = parse_lines(
            ['msgid "A"', 'msgstr "1"', "", 'msgid "B"', 'msgstr "2"', ""]
        )

        assert [(m.id, m.translations[0]) for m in messages] == [("A", "1"), ("B", "2")]

    def test_whitespace_only_line_is_blank(self) -> None:
        messages = parse_lines(['msgid "A"', 'msgstr "1"', "   \t", 'msgid "B"', 'msgstr "2"'])

        assert len(messages) == 2

    def test_surrounding_whitespace_and_newlines_stripped(self) -> None:
        messages = parse_lines(['  msgid "A"\n', '\tmsgstr "B"  \r\n'])

        assert messages[0].id == "A"
        assert messages[0].translations == ["B"]

    def test_context(self) -> None:
        messages = parse_lines(['msgctxt "menu"', 'msgid "File"', 'msgstr "Datei"'])

        assert messages[0].context == "menu"
        assert messages[0].key == "menu$__//_$_//__$File"

    def test_empty_context_is_distinct_from_no_context(self) -> None:
        messages = parse_lines(['msgctxt ""', 'msgid "File"', 'msgstr "Datei"'])

        assert messages[0].context == ""
        assert messages[0].key != "File"


# ============================================================================
# COMMENTS
# ============================================================================


class TestComments:
    """Comment lines are skipped without changing the block type."""

    def test_comments_skipped(self) -> None:
        messages = parse_lines(
            ["# translator comment", "#: src/a.py:1", 'msgid "A"', "#, fuzzy", 'msgstr "B"']
        )

        assert messages == [Message(id="A", translations=["B"])]

    def test_comment_between_continuation_lines_keeps_block(self) -> None:
        messages = parse_lines(['msgid "A"', 'msgstr "one "', "# note", '"two"'])

        assert messages[0].translations == ["one two"]

    def test_obsolete_entries_ignored(self) -> None:
        messages = parse_lines(['#~ msgid "Old"', '#~ msgstr "Alt"'])

        assert messages == []


# ============================================================================
# MULTI-LINE VALUES
# ============================================================================


class TestContinuationLines:
    """Quoted lines continue the field opened by the last keyword."""

    def test_multiline_id_and_translation(self) -> None:
        messages = parse_lines(
            ['msgid ""', '"New\\n"', '"Line 2"', 'msgstr ""', '"Neue\\n"', '"Zeile 2"']
        )

        assert messages[0].id == "New\nLine 2"
        assert messages[0].translations == ["Neue\nZeile 2"]

    def test_fragments_unescaped_separately(self) -> None:
        messages = parse_lines(['msgid "A"', 'msgstr "tab\\t"', '"quote\\""'])

        assert messages[0].translations == ['tab\tquote"']

    def test_continuation_of_indexed_msgstr_stays_in_slot(self) -> None:
        messages = parse_lines(
            [
                'msgid "{0} file"',
                'msgid_plural "{0} files"',
                'msgstr[0] "{0} "',
                '"Datei"',
                'msgstr[1] "{0} "',
                '"Dateien"',
            ]
        )

        assert messages[0].translations == ["{0} Datei", "{0} Dateien"]

    def test_index_at_plural_form_limit_dropped(self) -> None:
        messages = parse_lines(
            [
                'msgid "{0} file"',
                'msgid_plural "{0} files"',
                'msgstr[0] "eins"',
                'msgstr[256] "zu viel"',
                '"noch mehr"',
            ]
        )

        assert messages[0].translations == ["eins", ""]

    def test_payload_between_first_and_last_quote(self) -> None:
        messages = parse_lines(['msgid "A"', 'msgstr "He said \\"no\\" twice"'])

        assert messages[0].translations == ['He said "no" twice']


# ============================================================================
# PLURALS
# ============================================================================


class TestPluralEntries:
    """msgid_plural reserves slots; msgstr[N] fills them."""

    def test_plural_slots_reserved_for_default_count(self) -> None:
        messages = parse_lines(
            ['msgid "{0} file"', 'msgid_plural "{0} files"', 'msgstr[0] "{0} Datei"']
        )

        assert messages[0].id_plural == "{0} files"
        assert messages[0].translations == ["{0} Datei", ""]

    def test_plural_slots_follow_parser_nplurals(self) -> None:
        parser = PoParser(nplurals=3)
        messages = list(
            parser.parse(['msgid "a"', 'msgid_plural "b"', 'msgstr[2] "c"'])
        )

        assert messages[0].translations == ["", "", "c"]

    def test_nplurals_update_applies_to_following_records(self) -> None:
        parser = PoParser()
        lines = [
            'msgid "a"', 'msgid_plural "as"', 'msgstr[0] "x"', "",
            'msgid "b"', 'msgid_plural "bs"', 'msgstr[0] "y"',
        ]
        seen: list[Message] = []
        for message in parser.parse(lines):
            seen.append(message)
            parser.nplurals = 4

        assert len(seen[0].translations) == 2
        assert len(seen[1].translations) == 4

    def test_index_beyond_reserved_slots_grows_translations(self) -> None:
        messages = parse_lines(['msgid "a"', 'msgid_plural "b"', 'msgstr[4] "e"'])

        assert messages[0].translations == ["", "", "", "", "e"]

    def test_absurd_index_is_dropped(self) -> None:
        messages = parse_lines(['msgid "a"', 'msgstr "ok"', 'msgstr[100000] "x"'])

        assert messages[0].translations == ["ok"]


# ============================================================================
# DISCARD RULES
# ============================================================================


class TestDiscardedRecords:
    """Records without an id or without translations never reach the store."""

    def test_untranslated_message_discarded(self) -> None:
        assert parse_lines(['msgid "File"', 'msgstr ""']) == []

    def test_all_plural_forms_empty_discarded(self) -> None:
        lines = ['msgid "a"', 'msgid_plural "b"', 'msgstr[0] ""', 'msgstr[1] ""']

        assert parse_lines(lines) == []

    def test_message_without_id_discarded(self) -> None:
        assert parse_lines(['msgstr "orphan"']) == []

    def test_header_message_kept(self) -> None:
        messages = parse_lines(['msgid ""', 'msgstr ""', '"Language: de\\n"'])

        assert messages[0].id == ""
        assert messages[0].translations == ["Language: de\n"]

    def test_empty_input(self) -> None:
        assert parse_lines([]) == []


# ============================================================================
# MALFORMED INPUT
# ============================================================================


class TestMalformedInput:
    """The parser tolerates junk instead of raising."""

    def test_unknown_keyword_stops_accumulation(self) -> None:
        messages = parse_lines(['msgid "A"', 'msgstr "B"', 'garbage "C"', '"D"'])

        assert messages[0].translations == ["B"]

    def test_keyword_without_quotes_contributes_nothing(self) -> None:
        messages = parse_lines(["msgid A", 'msgstr "B"'])

        assert messages == []

    def test_unterminated_quote_ignored(self) -> None:
        messages = parse_lines(['msgid "A"', 'msgstr "B', 'msgstr "C"'])

        assert messages[0].translations == ["C"]

    @given(st.lists(st.text(max_size=40), max_size=30))
    def test_never_raises(self, lines: list[str]) -> None:
        for message in parse_lines(lines):
            assert message.id is not None
            assert not message.is_empty

    def test_parsing_is_deterministic(self) -> None:
        lines = ['msgctxt "c"', 'msgid "a"', 'msgid_plural "b"', 'msgstr[0] "x"', 'msgstr[1] "y"']

        assert parse_lines(lines) == parse_lines(lines)


# ============================================================================
# FUZZ
# ============================================================================

_PO_LINE = st.one_of(
    st.sampled_from(["", "#", "#, fuzzy", 'msgctxt "c"', 'msgid ""', 'msgid_plural "p"']),
    st.builds(lambda text: f'msgid "{text}"', st.text(max_size=10)),
    st.builds(
        lambda index, text: f'msgstr[{index}] "{text}"',
        st.integers(min_value=0, max_value=300),
        st.text(max_size=10),
    ),
    st.builds(lambda text: f'"{text}"', st.text(max_size=10)),
    st.text(max_size=20),
)


@pytest.mark.fuzz
@settings(max_examples=5000)
@given(st.lists(_PO_LINE, max_size=60), st.integers(min_value=1, max_value=8))
def test_fuzz_structured_lines(lines: list[str], nplurals: int) -> None:
    for message in parse_lines(lines, nplurals=nplurals):
        assert message.id is not None
        assert any(message.translations)
        assert len(message.translations) <= 256
