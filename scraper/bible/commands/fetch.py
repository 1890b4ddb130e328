"""
Fetch command handlers - single chapter or verse from the site.
"""
import sys

from ..client import FetchError
from ..references import parse_reference
from .common import scraper_from_args, write_output


def cmd_chapter(args) -> int:
    """Fetch one chapter and print it as JSON."""
    try:
        ref = parse_reference(args.reference)
        scraper = scraper_from_args(args)
        ref_text = f"{ref.book}.{ref.chapter}"
        if args.titles:
            chapter = scraper.chapter_with_titles(ref_text)
        else:
            chapter = scraper.chapter(ref_text)
    except (OSError, ValueError, KeyError, FetchError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    if args.verbose:
        for diag in chapter.diagnostics:
            print(f"  ! {diag}", file=sys.stderr)
    write_output(chapter.to_json(indent=True), getattr(args, "output", None))
    return 0


def cmd_verse(args) -> int:
    """Fetch one verse and print it as JSON."""
    try:
        ref = parse_reference(args.reference)
        if ref.verse is None:
            raise ValueError(f"{args.reference!r} has no verse number, e.g. 'JHN.3.16'")
        scraper = scraper_from_args(args)
        verse = scraper.verse(f"{ref.book}.{ref.chapter}.{ref.verse}")
    except (OSError, ValueError, KeyError, FetchError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    if not verse.content:
        print(f"No verse text found for {args.reference}", file=sys.stderr)
        return 1
    print(verse.to_json())
    return 0
