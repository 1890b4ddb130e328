"""
Book command handler - fetch a range of chapters into the output layout.
"""
import sys
import time

from tqdm import tqdm

from ..catalog import book_code
from ..client import FetchError
from ..io_layout import Layout
from .common import config_from_args, parse_chapter_range, scraper_from_args


def cmd_book(args) -> int:
    """Fetch chapters of one book, one JSON file per chapter."""
    try:
        cfg = config_from_args(args)
        code = book_code(args.book)
        chapters = parse_chapter_range(args.chapters)
        scraper = scraper_from_args(args, cfg)
    except (OSError, ValueError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    layout = Layout(cfg.out_dir)
    layout.ensure()
    interval = 1.0 / cfg.rate_per_sec
    failed = []
    written = 0
    with tqdm(total=len(chapters), desc=f"Fetching {code}", unit="ch") as pbar:
        for n in chapters:
            ref = f"{code}.{n}"
            try:
                if args.titles:
                    chapter = scraper.chapter_with_titles(ref)
                else:
                    chapter = scraper.chapter(ref)
            except FetchError as e:
                failed.append((ref, str(e)))
                pbar.update(1)
                continue
            out_path = layout.chapter_path(cfg.translation, ref)
            out_path.write_text(chapter.to_json(indent=True), encoding="utf-8")
            written += 1
            pbar.update(1)
            if n != chapters[-1]:
                time.sleep(interval)

    print(f"Wrote {written} chapter(s) to {layout.chapters_dir}")
    if failed:
        print(f"⚠ {len(failed)} chapter(s) failed:", file=sys.stderr)
        for ref, err in failed[:10]:
            print(f"  {ref}: {err}", file=sys.stderr)
        if len(failed) > 10:
            print(f"  ... and {len(failed) - 10} more", file=sys.stderr)
        return 1
    return 0
