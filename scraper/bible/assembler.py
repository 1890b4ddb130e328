from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional

from .diagnostics import Diagnostic, DiagnosticKind, report
from .footnotes import NOTE_SENTINEL, FootnoteCollector
from .model import Chapter, Run, RunKind, Verse
from .tokens import Token, TokenTag


@dataclass
class AssemblyState:
    # Machine reference of the verse being accumulated ("" = none yet)
    current_reference: str = ""
    content_buffer: List[Run] = field(default_factory=list)
    # Trailing titles moved off a closing verse, re-attached to the next one
    pending_heading_carry: List[Run] = field(default_factory=list)
    # Reference owning content_buffer once a verse boundary has been seen;
    # the flush itself waits for the next Content token
    pending_flush_reference: Optional[str] = None
    inside_note: bool = False
    note_accumulator: str = ""
    inside_heading: bool = False
    merge_without_separator: bool = False
    line_break_requested: bool = False
    last_heading_style: Optional[FrozenSet[str]] = None
    past_chapter_boundary: bool = False


class ChapterAssembler:
    """
    Single-pass state machine turning a classified token stream into verses.
    Instances are single-use; assemble() builds a fresh one per call.
    """

    def __init__(self, *, include_footnotes: bool = False) -> None:
        self.include_footnotes = include_footnotes
        self.state = AssemblyState()
        self.collector = FootnoteCollector()
        self.verses: List[Verse] = []
        self.diagnostics: List[Diagnostic] = []

    def feed(self, token: Token) -> None:
        st = self.state
        if not st.past_chapter_boundary:
            if not token.has(TokenTag.CHAPTER_BOUNDARY):
                return
            st.past_chapter_boundary = True

        if token.has(TokenTag.LINE_BREAK_HINT):
            st.line_break_requested = True
            st.merge_without_separator = False

        if token.has(TokenTag.LABEL) and token.text == NOTE_SENTINEL:
            # Only closes the note; its text stays queued for the next footnote
            st.inside_note = False

        if token.has(TokenTag.NOTE):
            self._accumulate_note(token)

        if token.has(TokenTag.VERSE):
            self._mark_verse_boundary(token)

        if token.has(TokenTag.INLINE_EMPHASIS):
            st.merge_without_separator = True

        if token.has(TokenTag.HEADING):
            self._add_heading(token)
        elif token.has(TokenTag.CONTENT):
            self._add_content(token)

    def finish(self) -> Chapter:
        st = self.state
        if st.content_buffer:
            # With no content after the last boundary the buffer still
            # belongs to the pending verse, not the current one
            ref = st.pending_flush_reference if st.pending_flush_reference is not None else st.current_reference
            if ref:
                self._emit(ref, st.content_buffer)
            else:
                report(
                    self.diagnostics,
                    DiagnosticKind.MALFORMED_REFERENCE,
                    f"text without a verse reference dropped: {len(st.content_buffer)} run(s)",
                )
            st.content_buffer = []
            st.pending_flush_reference = None
        if self.include_footnotes and st.inside_note and st.note_accumulator:
            report(
                self.diagnostics,
                DiagnosticKind.DANGLING_NOTE,
                f"note never attached, discarded: {st.note_accumulator!r}",
            )
        if not self.verses:
            report(self.diagnostics, DiagnosticKind.EMPTY_TOKEN_STREAM, "no verses assembled")
        return Chapter(
            verses=self.verses,
            footnotes=list(self.collector.footnotes) if self.include_footnotes else [],
            diagnostics=self.diagnostics,
        )

    def _accumulate_note(self, token: Token) -> None:
        st = self.state
        if st.inside_heading:
            # Notes inside headings have no run to attach to
            report(
                self.diagnostics,
                DiagnosticKind.HEADING_DURING_OPEN_NOTE,
                f"note inside heading dropped: {token.text!r}",
            )
            return
        st.note_accumulator += token.text
        st.inside_note = True

    def _mark_verse_boundary(self, token: Token) -> None:
        st = self.state
        ref = token.machine_reference
        if not ref or ref == st.current_reference:
            return
        if ref == st.pending_flush_reference:
            # Came back to the verse still owning the buffer before any content
            st.pending_flush_reference = None
        elif st.current_reference and st.pending_flush_reference is None:
            st.pending_flush_reference = st.current_reference
        st.current_reference = ref

    def _add_heading(self, token: Token) -> None:
        st = self.state
        style = token.style_key
        if token.text:
            tail = st.content_buffer[-1] if st.content_buffer else None
            if (
                tail is not None
                and tail.is_title
                and st.merge_without_separator
                and style == st.last_heading_style
            ):
                tail.text += token.text
                st.merge_without_separator = False
            else:
                st.content_buffer.append(Run(token.text, RunKind.TITLE))
        st.last_heading_style = style
        st.inside_heading = True

    def _add_content(self, token: Token) -> None:
        st = self.state
        text = token.text
        if not text:
            return
        st.inside_heading = False

        if self.include_footnotes and st.inside_note and text.strip() != NOTE_SENTINEL:
            marker, _ = self.collector.next_footnote(st.note_accumulator)
            text = marker + text
            st.note_accumulator = ""
            st.inside_note = False

        if st.pending_flush_reference is not None:
            self._flush_pending()

        tail = st.content_buffer[-1] if st.content_buffer else None
        if tail is not None and not tail.is_title and not st.line_break_requested:
            tail.text += text
        else:
            st.content_buffer.append(Run(text, RunKind.VERSE))
        st.line_break_requested = False
        st.merge_without_separator = False

    def _flush_pending(self) -> None:
        st = self.state
        buf = st.content_buffer
        split = len(buf)
        while split > 0 and buf[split - 1].is_title:
            split -= 1
        st.pending_heading_carry = buf[split:]
        self._emit(st.pending_flush_reference, buf[:split])
        st.content_buffer = st.pending_heading_carry
        st.pending_heading_carry = []
        st.pending_flush_reference = None

    def _emit(self, reference: str, runs: List[Run]) -> None:
        # A verse whose runs all moved on as headings has nothing left to show
        if not runs:
            return
        self.verses.append(Verse(machine_reference=reference, content=list(runs)))


def assemble(tokens: Iterable[Token], *, include_footnotes: bool = False) -> Chapter:
    """
    Build the verse list (and footnotes, when requested) of one chapter.
    Reference, version and audio fields are left for the caller to fill from
    page metadata. Never raises on malformed input.
    """
    assembler = ChapterAssembler(include_footnotes=include_footnotes)
    for token in tokens:
        assembler.feed(token)
    return assembler.finish()


def assemble_plain(tokens: Iterable[Token]) -> Chapter:
    """
    Title-less chapter mode: verse body text grouped by verse reference,
    fragments joined with a single space. Headings and notes are skipped.
    """
    verses: List[Verse] = []
    diagnostics: List[Diagnostic] = []
    current_reference = ""
    past_boundary = False
    for token in tokens:
        if not past_boundary:
            if not token.has(TokenTag.CHAPTER_BOUNDARY):
                continue
            past_boundary = True
        if token.has(TokenTag.VERSE) and token.machine_reference:
            current_reference = token.machine_reference
        if token.has(TokenTag.HEADING) or not token.has(TokenTag.CONTENT):
            continue
        text = token.text.strip()
        if not text or not current_reference:
            continue
        if verses and verses[-1].machine_reference == current_reference:
            run = verses[-1].content[0]
            run.text = (run.text + " " + text).strip()
        else:
            verses.append(Verse(machine_reference=current_reference, content=[Run(text, RunKind.VERSE)]))
    if not verses:
        report(diagnostics, DiagnosticKind.EMPTY_TOKEN_STREAM, "no verses assembled")
    return Chapter(verses=verses, diagnostics=diagnostics)
