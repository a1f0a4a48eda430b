# src/hoverdict/core/resolve.py
"""
Resolve the text under a cursor into dictionary keys.

Strategies are tried in order until one hits the store:

    exact       "HelloWorld"       → "helloworld"
    normalized  "helloWorld"       → "hello world"
                "foo-bar"          → "foo bar"
    subtoken    "helloWorld" @ 6   → "world"
"""

import re
from dataclasses import dataclass
from typing import Callable

from hoverdict.core.record import DictionaryRecord
from hoverdict.core.store import DictionaryStore


DELIMITERS = "-_"
SPLIT_PATTERN = re.compile(r"\B([A-Z])|-+|_+", re.ASCII)


@dataclass(frozen=True)
class Candidate:
    key: str        # case-folded, what the store is queried with
    display: str    # original casing, shown in the hover header
    strategy: str


@dataclass(frozen=True)
class Match:
    word: str
    record: DictionaryRecord
    strategy: str


def _is_delimiter(ch: str) -> bool:
    return ch in DELIMITERS


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def exact(text: str, offset: int) -> str:
    return text


def normalized(text: str, offset: int) -> str:
    return SPLIT_PATTERN.sub(lambda m: " " + (m.group(1) or ""), text)


def subtoken(text: str, offset: int) -> str:
    """The camelCase / snake_case / kebab-case segment under `offset`."""
    n = len(text)
    idx = min(max(offset, 0), n)

    while idx < n and _is_delimiter(text[idx]):
        idx += 1
    if idx == n:
        idx = n - 1
        while idx >= 0 and _is_delimiter(text[idx]):
            idx -= 1
    if idx < 0:
        return ""

    start = idx
    while start > 0 and not _is_upper(text[start]):
        if _is_delimiter(text[start - 1]):
            break
        start -= 1

    end = idx + 1
    while end < n and not (_is_upper(text[end]) or _is_delimiter(text[end])):
        end += 1

    return text[start:end]


STRATEGIES: list[tuple[str, Callable[[str, int], str]]] = [
    ("exact", exact),
    ("normalized", normalized),
    ("subtoken", subtoken),
]


def resolve(text: str, offset: int) -> list[Candidate]:
    """Candidate keys for `text` with the cursor at `offset`, in try order."""
    if not text:
        return []

    candidates = []
    seen = set()
    for name, strategy in STRATEGIES:
        display = strategy(text, offset)
        key = display.lower()
        if not key or key in seen:
            continue
        seen.add(key)
        candidates.append(Candidate(key=key, display=display, strategy=name))
    return candidates


def find_entry(store: DictionaryStore, text: str, offset: int) -> Match | None:
    """First candidate that the store knows about."""
    for candidate in resolve(text, offset):
        record = store.lookup(candidate.key)
        if record is not None:
            return Match(word=candidate.display, record=record, strategy=candidate.strategy)
    return None
