"""Quickstart example for pocatalog.

This example demonstrates loading a gettext .po catalog and looking up
singular, contextual and plural translations.

Note: Lookups never raise. An unknown or untranslated message returns
the source text, so a missing translation shows up as English in the UI
rather than as an exception.
"""

import tempfile
from pathlib import Path

from pocatalog import MissingHeaderError, PluralFormsError, PoFile

RUSSIAN = r"""
msgid ""
msgstr ""
"Language: ru\n"
"Plural-Forms: nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);\n"

msgid "File"
msgstr "Файл"

msgctxt "verb"
msgid "File"
msgstr "Подать"

msgid "{0} file"
msgid_plural "{0} files"
msgstr[0] "{0} файл"
msgstr[1] "{0} файла"
msgstr[2] "{0} файлов"
"""

# Example 1: Simple lookup
print("=" * 50)
print("Example 1: Simple Lookup")
print("=" * 50)

po = PoFile.from_string(RUSSIAN)
print(po.get_string("File"))
# Output: Файл

print(po.get_string("Folder"))
# Output: Folder (untranslated ids come back unchanged)

# Example 2: Context
print("\n" + "=" * 50)
print("Example 2: Message Context")
print("=" * 50)

print(po.get_particular_string("verb", "File"))
# Output: Подать

# Example 3: Plurals
print("\n" + "=" * 50)
print("Example 3: Plural Forms")
print("=" * 50)

for count in (1, 2, 5, 21, 111):
    print(po.get_plural_string("{0} file", "{0} files", count).format(count))
# Output:
# 1 файл
# 2 файла
# 5 файлов
# 21 файл
# 111 файлов

print(f"Rule: {po.plural_rule.formula}")
print(f"Precompiled: {po.plural_rule.precompiled}")
# Output: Precompiled: True

# Example 4: Headers
print("\n" + "=" * 50)
print("Example 4: Headers")
print("=" * 50)

print(po.get_header("Language"))
# Output: ru

try:
    po.get_header("X-Generator")
except MissingHeaderError as e:
    print(f"Missing header: {e.diagnostic.message if e.diagnostic else e}")
# Output: Missing header: Header 'X-Generator' missing

# Example 5: Loading from disk
print("\n" + "=" * 50)
print("Example 5: Loading From Disk")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmpdir:
    path = Path(tmpdir) / "ru.po"
    path.write_text(RUSSIAN, encoding="utf-8")

    po_from_disk = PoFile(path)
    print(repr(po_from_disk))
    # Output: PoFile(messages=4, nplurals=3)

# Example 6: Failed reloads keep the previous catalog
print("\n" + "=" * 50)
print("Example 6: Failed Reload")
print("=" * 50)

try:
    po.load_from_string('msgid ""\nmsgstr "Plural-Forms: nplurals=2; plural=n+1;\\n"\n')
except PluralFormsError as e:
    print(f"Rejected: {e.diagnostic.message if e.diagnostic else e}")

print(po.get_string("File"))
# Output: Файл (previous catalog still active)
