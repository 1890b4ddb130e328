from __future__ import annotations
from typing import List, Tuple

from .model import Footnote
from .text import collapse_spaces

NOTE_SENTINEL = "#"


def normalize_note(note: str) -> str:
    """
    Clean accumulated note text:
    - collapse repeated interior spaces to one
    - a leading "# " becomes "#"
    """
    note = collapse_spaces(note)
    if note.startswith(NOTE_SENTINEL + " "):
        note = NOTE_SENTINEL + note[len(NOTE_SENTINEL) + 1:]
    return note


def footnote_marker(index: int) -> str:
    return f"[n{index}]"


class FootnoteCollector:
    """Hands out sequential footnote ids for one assembly call."""

    def __init__(self) -> None:
        self.counter = 0
        self.footnotes: List[Footnote] = []

    def next_footnote(self, note_text: str) -> Tuple[str, Footnote]:
        marker = footnote_marker(self.counter)
        footnote = Footnote(id=marker, note=normalize_note(note_text))
        self.footnotes.append(footnote)
        self.counter += 1
        return marker, footnote
