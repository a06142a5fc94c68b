"""Thread Safety Example - Reloading a PoFile while other threads read it.

Thread Safety:
    PoFile is ALWAYS thread-safe. A reload parses the new catalog
    outside any lock, then publishes it with one reference swap under
    a readers-writer lock. Lookups therefore see the old catalog or the
    new one, never messages from one and the plural rule of the other.

Demonstrates:
1. Concurrent lookups from a shared PoFile
2. Hot reload while lookups are running

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from pocatalog import PoFile

GERMAN = r"""
msgid ""
msgstr "Plural-Forms: nplurals=2; plural=(n != 1);\n"

msgid "{0} file"
msgid_plural "{0} files"
msgstr[0] "{0} Datei"
msgstr[1] "{0} Dateien"
"""

POLISH = r"""
msgid ""
msgstr "Plural-Forms: nplurals=3; plural=(n==1 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);\n"

msgid "{0} file"
msgid_plural "{0} files"
msgstr[0] "{0} plik"
msgstr[1] "{0} pliki"
msgstr[2] "{0} plików"
"""


def example_1_concurrent_lookups() -> None:
    """Many threads reading one catalog."""
    print("=" * 60)
    print("Example 1: Concurrent Lookups")
    print("=" * 60)

    po = PoFile.from_string(GERMAN)

    def lookup(count: int) -> str:
        return po.get_plural_string("{0} file", "{0} files", count).format(count)

    with ThreadPoolExecutor(max_workers=4) as executor:
        for result in executor.map(lookup, range(6)):
            print(f"  {result}")


def example_2_hot_reload() -> None:
    """Swap catalogs while readers are active."""
    print("\n" + "=" * 60)
    print("Example 2: Hot Reload")
    print("=" * 60)

    po = PoFile.from_string(GERMAN)
    done = threading.Event()
    seen: set[str] = set()
    seen_lock = threading.Lock()

    def reader() -> None:
        local: set[str] = set()
        while not done.is_set():
            local.add(po.get_plural_string("{0} file", "{0} files", 5))
        with seen_lock:
            seen.update(local)

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()

    for i in range(100):
        po.load_from_string(POLISH if i % 2 == 0 else GERMAN)
    done.set()

    for t in threads:
        t.join()

    print(f"  Forms observed for n=5: {sorted(seen)}")
    # Output: only '{0} Dateien' and '{0} plików', never a mix


if __name__ == "__main__":
    example_1_concurrent_lookups()
    example_2_hot_reload()
