# src/hoverdict/core/format.py
"""
Render a dictionary record as markdown lines for a hover.
"""

from hoverdict.core.record import DictionaryRecord


LINE_MARKER = "\\n"  # literal backslash-n, as stored in the dataset

PHONETIC_LABEL = "__音标：__"
DEFINITION_LABEL = "__英文解释：__"
TRANSLATION_LABEL = "__中文解释：__"
POS_LABEL = "__词语位置：__"


def split_field(value: str) -> list[str]:
    lines = []
    for line in value.split(LINE_MARKER):
        if line.startswith('"'):
            line = line[1:]
        lines.append(line)
    return lines


def format_doc(word: str, record: DictionaryRecord) -> list[str]:
    values = [f"_{word}_"]
    if record.phonetic:
        values += ["", f"{PHONETIC_LABEL}{record.phonetic}"]
    if record.definition:
        values += ["", DEFINITION_LABEL, "", *split_field(record.definition)]
    if record.translation:
        values += ["", TRANSLATION_LABEL, "", *split_field(record.translation)]
    if record.pos:
        pos = record.pos.replace("\n", " ")
        values += ["", f"{POS_LABEL}{pos}"]
    return values


def render_doc(word: str, record: DictionaryRecord) -> str:
    return "\n".join(format_doc(word, record))
