from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List
import logging

logger = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    MISSING_METADATA = "missing-metadata"
    EMPTY_TOKEN_STREAM = "empty-token-stream"
    MALFORMED_REFERENCE = "malformed-reference"
    DANGLING_NOTE = "dangling-note"
    HEADING_DURING_OPEN_NOTE = "heading-during-open-note"


# None of these stop assembly; the level only decides how loudly they are logged
_LEVELS = {
    DiagnosticKind.MISSING_METADATA: logging.WARNING,
    DiagnosticKind.EMPTY_TOKEN_STREAM: logging.DEBUG,
    DiagnosticKind.MALFORMED_REFERENCE: logging.WARNING,
    DiagnosticKind.DANGLING_NOTE: logging.DEBUG,
    DiagnosticKind.HEADING_DURING_OPEN_NOTE: logging.DEBUG,
}


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


def report(sink: List[Diagnostic], kind: DiagnosticKind, message: str) -> Diagnostic:
    diag = Diagnostic(kind, message)
    sink.append(diag)
    logger.log(_LEVELS[kind], "%s", diag)
    return diag
