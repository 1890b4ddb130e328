from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .catalog import BOOKS
from .diagnostics import Diagnostic, DiagnosticKind, report
from .model import Verse


@dataclass
class MachineReference:
    book: str
    chapter: str
    verse: Optional[str] = None
    translation_id: Optional[str] = None


def verse_number(machine_reference: str) -> Optional[str]:
    """Third dot-separated field of "PSA.1.1"; None when the shape is wrong."""
    parts = machine_reference.split(".")
    if len(parts) < 3:
        return None
    return parts[2]


def human_verse_reference(page_human_reference: str, machine_reference: str) -> str:
    num = verse_number(machine_reference)
    if num is None:
        num = machine_reference
    return f"{page_human_reference}:{num}"


def normalize_references(
    verses: Iterable[Verse],
    page_human_reference: str = "",
    diagnostics: Optional[List[Diagnostic]] = None,
) -> None:
    """
    Post-pass: set each verse's human_reference to "<Book Chapter>:<verse>".
    A reference without three dot-separated fields falls back to the raw string.
    """
    sink = diagnostics if diagnostics is not None else []
    for verse in verses:
        if verse_number(verse.machine_reference) is None:
            report(
                sink,
                DiagnosticKind.MALFORMED_REFERENCE,
                f"unexpected verse reference {verse.machine_reference!r}",
            )
        verse.human_reference = human_verse_reference(page_human_reference, verse.machine_reference)


def chapter_reference(page_human_reference: str, version: str) -> str:
    """Chapter-level display reference, e.g. "Psalm 1 NVT"."""
    if not page_human_reference and not version:
        return ""
    return f"{page_human_reference} {version}"


def bible_reference(
    book: str,
    chapter: Union[int, str],
    verse_start: Optional[int] = None,
    verse_end: Optional[int] = None,
    translation_id: Optional[Union[int, str]] = None,
) -> str:
    """
    Build a site reference from a book name and chapter/verse numbers.
      ("Genesis", 1)            -> "GEN.1"
      ("Genesis", 1, 1)         -> "GEN.1.1.<translation>"
      ("Genesis", 1, 1, 3)      -> "GEN.1.1-3.<translation>"
    """
    code = BOOKS.get(book)
    if code is None:
        raise ValueError(f"Unknown book {book!r}; see catalog.BOOKS for valid names")
    if not chapter:
        raise ValueError("A chapter number is required")
    ref = f"{code}.{chapter}"
    if verse_start:
        span = f"{verse_start}-{verse_end}" if verse_end else f"{verse_start}"
        ref = f"{ref}.{span}"
        if translation_id:
            ref = f"{ref}.{translation_id}"
    return ref


def parse_reference(ref: str) -> MachineReference:
    """
    Split "PSA.1", "PSA.1.1" or "PSA.1.1.129" into its parts.
    Raises ValueError for anything without at least book and chapter.
    """
    parts = ref.strip().split(".")
    if len(parts) < 2 or not all(parts) or len(parts) > 4:
        raise ValueError(f"Malformed reference {ref!r}; expected e.g. 'PSA.1' or 'PSA.1.1'")
    book = parts[0].upper()
    return MachineReference(
        book=book,
        chapter=parts[1],
        verse=parts[2] if len(parts) > 2 else None,
        translation_id=parts[3] if len(parts) > 3 else None,
    )
