# src/hoverdict/core/record.py
"""
A single dictionary entry.
"""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class DictionaryRecord:
    phonetic: str = ""
    definition: str = ""     # lines joined by a literal "\n"
    translation: str = ""    # same convention
    pos: str = ""            # may contain real newlines

    def to_dict(self) -> dict:
        return asdict(self)
