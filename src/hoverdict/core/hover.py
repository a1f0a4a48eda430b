# src/hoverdict/core/hover.py
"""
Hover provider.

Given a line of text and a cursor column, find the word under the cursor,
resolve it against the store and render the hit as markdown.
"""

import re
from dataclasses import dataclass

from hoverdict.core.format import render_doc
from hoverdict.core.resolve import find_entry
from hoverdict.core.store import DictionaryStore


WORD_PATTERN = re.compile(r"[\w-]+")


@dataclass(frozen=True)
class WordRange:
    start: int
    end: int  # exclusive

    def text(self, line: str) -> str:
        return line[self.start:self.end]


@dataclass(frozen=True)
class Hover:
    value: str
    kind: str = "markdown"

    def to_dict(self) -> dict:
        return {"contents": {"kind": self.kind, "value": self.value}}


def word_range_at(line: str, character: int) -> WordRange | None:
    """Range of the word containing `character`, or ending right at it."""
    for match in WORD_PATTERN.finditer(line):
        if match.start() <= character <= match.end():
            return WordRange(match.start(), match.end())
        if match.start() > character:
            break
    return None


def provide_hover(store: DictionaryStore, line: str, character: int) -> Hover | None:
    word_range = word_range_at(line, character)
    if word_range is None:
        return None

    match = find_entry(store, word_range.text(line), character - word_range.start)
    if match is None:
        return None

    return Hover(render_doc(match.word, match.record))
