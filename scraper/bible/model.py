from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
import orjson

from .diagnostics import Diagnostic


class RunKind(Enum):
    VERSE = "v"
    TITLE = "t"


@dataclass
class Run:
    text: str
    kind: RunKind = RunKind.VERSE

    @property
    def is_title(self) -> bool:
        return self.kind is RunKind.TITLE

    def to_dict(self) -> Dict[str, str]:
        return {"text": self.text, "type": self.kind.value}


@dataclass
class Verse:
    machine_reference: str
    content: List[Run] = field(default_factory=list)
    # Filled in by the reference normalizer
    human_reference: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reference": self.human_reference,
            "content": [r.to_dict() for r in self.content],
        }


@dataclass
class Footnote:
    id: str  # "[nK]"
    note: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "note": self.note}


@dataclass
class PageMetadata:
    human_reference: str = ""
    version_abbreviation: str = ""
    audio_url: Optional[str] = None
    copyright_text: str = ""
    audio_copyright_text: Optional[str] = None


@dataclass
class Chapter:
    human_reference: str = ""
    version: str = ""
    audio_url: Optional[str] = None
    copyright: str = ""
    audio_copyright: Optional[str] = None
    verses: List[Verse] = field(default_factory=list)
    footnotes: List[Footnote] = field(default_factory=list)
    # Not serialized; for callers that want to surface warnings
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reference": self.human_reference,
            "version": self.version,
            "audioBibleUrl": self.audio_url,
            "copyright": self.copyright,
            "audioBibleCopyright": self.audio_copyright,
            "verses": [v.to_dict() for v in self.verses],
            "notes": [f.to_dict() for f in self.footnotes],
        }

    def to_json(self, *, indent: bool = False) -> str:
        opts = orjson.OPT_INDENT_2 if indent else 0
        return orjson.dumps(self.to_dict(), option=opts).decode("utf-8")


@dataclass
class VerseText:
    """A single verse fetched from a verse page (no titles, no notes)."""
    content: str = ""
    reference: str = ""
    version: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"content": self.content, "reference": self.reference, "version": self.version}

    def to_json(self) -> str:
        return orjson.dumps(self.to_dict()).decode("utf-8")
