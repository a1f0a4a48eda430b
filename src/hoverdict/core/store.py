# src/hoverdict/core/store.py
"""
In-memory dictionary store.

Maps lowercase words to DictionaryRecord.
"cat" → DictionaryRecord(phonetic="kæt", ...)

Populated once from the ECDICT csv, read-only afterwards.
"""

import threading
from pathlib import Path
from typing import Iterable

from hoverdict.core.record import DictionaryRecord


FIELD_COUNT = 5
ECDICT_HEADER = ("word", "phonetic", "definition", "translation", "pos")


class DictionaryStore:
    def __init__(self):
        self._records: dict[str, DictionaryRecord] = {}
        self._lock = threading.Lock()
        self.initialized = False
        self.path: Path | None = None

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key) -> bool:
        return self.lookup(key) is not None

    def lookup(self, key: str) -> DictionaryRecord | None:
        """Exact lookup of a word. Misses instead of raising."""
        if not isinstance(key, str) or not key:
            return None
        return self._records.get(key.lower())

    def load(self, lines: Iterable[str], delimiter: str = ",") -> int:
        """
        Load rows of `key,phonetic,definition,translation,pos,...`.

        Rows with fewer than 5 fields are dropped. Existing keys are
        overwritten, nothing is reset. Returns the number of rows stored.
        """
        count = 0
        for line in lines:
            items = line.rstrip("\r\n").split(delimiter)
            if len(items) < FIELD_COUNT:
                continue
            self._records[items[0].lower()] = DictionaryRecord(
                phonetic=items[1],
                definition=items[2],
                translation=items[3],
                pos=items[4],
            )
            count += 1
        return count

    def load_file(self, path: str | Path) -> int:
        """Stream a dataset file into the store, skipping the csv header."""
        path = Path(path)
        with path.open(encoding="utf-8", errors="replace", newline="") as f:
            first = f.readline()
            count = 0
            if tuple(first.rstrip("\r\n").split(",")[:FIELD_COUNT]) != ECDICT_HEADER:
                count += self.load([first])
            count += self.load(f)
        return count

    def initialize(self, path: str | Path) -> bool:
        """
        Populate the store from `path` exactly once.

        Returns True if this call did the loading, False if the store
        was already initialized.
        """
        with self._lock:
            if self.initialized:
                return False
            self.load_file(path)
            self.path = Path(path)
            self.initialized = True
            return True
