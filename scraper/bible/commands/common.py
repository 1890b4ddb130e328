"""
Helpers shared by the command handlers.
"""
import sys
from typing import List, Optional

from ..catalog import translation_id
from ..client import BibleScraper
from ..config import Config, load_config


def config_from_args(args) -> Config:
    return load_config(
        config_file=getattr(args, "config", None),
        translation=getattr(args, "translation", None),
        include_footnotes=True if getattr(args, "footnotes", False) else None,
        out_dir=getattr(args, "out", None),
    )


def scraper_from_args(args, cfg: Optional[Config] = None) -> BibleScraper:
    cfg = cfg or config_from_args(args)
    return BibleScraper(translation_id(cfg.translation), config=cfg)


def write_output(text: str, output: Optional[str]) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
        print(f"Wrote: {output}", file=sys.stderr)
    else:
        print(text)


def parse_chapter_range(value: str) -> List[int]:
    """
    "3" -> [3]; "1-3" -> [1, 2, 3]; "1,4-5" -> [1, 4, 5].
    """
    out: List[int] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            lo, hi = part.split("-", 1)
            start, end = int(lo), int(hi)
            if start < 1 or end < start:
                raise ValueError(f"Bad chapter range {part!r}")
            out.extend(range(start, end + 1))
        else:
            n = int(part)
            if n < 1:
                raise ValueError(f"Bad chapter number {part!r}")
            out.append(n)
    if not out:
        raise ValueError("No chapters given")
    return out
