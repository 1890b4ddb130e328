"""
Parse command handler - assemble a saved chapter page without network access.
"""
import sys
from pathlib import Path

from ..client import build_chapter
from .common import write_output


def cmd_parse(args) -> int:
    src = Path(args.input)
    if not src.exists():
        print(f"Input not found: {src}", file=sys.stderr)
        return 1
    chapter = build_chapter(src.read_bytes(), include_footnotes=bool(args.footnotes), titles=not args.plain)
    if args.verbose:
        for diag in chapter.diagnostics:
            print(f"  ! {diag}", file=sys.stderr)
    write_output(chapter.to_json(indent=True), getattr(args, "output", None))
    return 0
