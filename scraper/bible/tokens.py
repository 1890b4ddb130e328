from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple
import re


class TokenTag(Enum):
    CHAPTER_BOUNDARY = "chapter-boundary"
    HEADING = "heading"
    VERSE = "verse"
    CONTENT = "content"
    NOTE = "note"
    LABEL = "label"
    LINE_BREAK_HINT = "line-break-hint"
    INLINE_EMPHASIS = "inline-emphasis"


# Page class names look like "ChapterContent_heading__ZZgR7"; the middle
# segment is the style name.
STYLE_CLASS_RE = re.compile(r"^ChapterContent_([A-Za-z0-9]+)_")

STYLE_CAPABILITIES = {
    "chapter": TokenTag.CHAPTER_BOUNDARY,
    "heading": TokenTag.HEADING,
    "verse": TokenTag.VERSE,
    "content": TokenTag.CONTENT,
    "note": TokenTag.NOTE,
    "label": TokenTag.LABEL,
}

# Poetry / block-quote lines start a new run
LINE_BREAK_STYLES = frozenset(
    ["q", "q1", "q2", "q3", "q4", "qc", "qr", "qa", "qm", "qm1", "qm2", "qm3"]
)

# Styles the site uses to split one word into separately formatted spans
INLINE_EMPHASIS_STYLES = frozenset(["sc", "bd", "bdit", "it", "nd"])


def style_name(tag: str) -> Optional[str]:
    """
    Return the bare style name of a raw class tag.
    "ChapterContent_sc__1Yj6V" -> "sc"; a bare "sc" is accepted as-is.
    """
    tag = tag.strip()
    if not tag:
        return None
    m = STYLE_CLASS_RE.match(tag)
    if m:
        return m.group(1)
    if "_" in tag:
        return None
    return tag


def classify_tags(tags: Iterable[str]) -> FrozenSet[TokenTag]:
    """Map a token's raw style tags to the capability set; unknown tags are ignored."""
    caps = set()
    for tag in tags:
        name = style_name(tag)
        if name is None:
            continue
        if name in STYLE_CAPABILITIES:
            caps.add(STYLE_CAPABILITIES[name])
        elif name in LINE_BREAK_STYLES:
            caps.add(TokenTag.LINE_BREAK_HINT)
        elif name in INLINE_EMPHASIS_STYLES:
            caps.add(TokenTag.INLINE_EMPHASIS)
    return frozenset(caps)


@dataclass(frozen=True)
class Token:
    text: str
    tags: Tuple[str, ...] = ()
    machine_reference: Optional[str] = None
    capabilities: FrozenSet[TokenTag] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        # accept any iterable of tags, e.g. a set or a class string split
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "capabilities", classify_tags(self.tags))

    def has(self, tag: TokenTag) -> bool:
        return tag in self.capabilities

    @property
    def style_key(self) -> FrozenSet[str]:
        """Tag set used to decide whether two heading fragments belong together."""
        return frozenset(self.tags)


def make_token(text: str = "", tags: Iterable[str] = (), machine_reference: Optional[str] = None) -> Token:
    return Token(text=text or "", tags=tuple(tags), machine_reference=machine_reference or None)
