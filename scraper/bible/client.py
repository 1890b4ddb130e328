from __future__ import annotations
from typing import Optional, Union
import logging
import time

import requests

from .adapters.page_tokens import Markup, extract_page_metadata, extract_tokens, extract_verse
from .assembler import assemble, assemble_plain
from .config import Config, load_config
from .diagnostics import DiagnosticKind, report
from .model import Chapter, PageMetadata, VerseText
from .references import chapter_reference, normalize_references

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    pass


def _apply_metadata(chapter: Chapter, meta: Optional[PageMetadata]) -> Chapter:
    if meta is None:
        report(chapter.diagnostics, DiagnosticKind.MISSING_METADATA, "page has no usable __NEXT_DATA__ block")
        meta = PageMetadata()
    chapter.human_reference = chapter_reference(meta.human_reference, meta.version_abbreviation)
    chapter.version = meta.version_abbreviation
    chapter.audio_url = meta.audio_url
    chapter.copyright = meta.copyright_text
    chapter.audio_copyright = meta.audio_copyright_text
    normalize_references(chapter.verses, meta.human_reference, chapter.diagnostics)
    return chapter


def build_chapter(html: Markup, *, include_footnotes: bool = False, titles: bool = True) -> Chapter:
    """
    Turn a fetched chapter page into a Chapter: tokens -> assembler ->
    reference post-pass, with page metadata filled in. Does no I/O.
    """
    tokens = extract_tokens(html)
    if titles:
        chapter = assemble(tokens, include_footnotes=include_footnotes)
    else:
        chapter = assemble_plain(tokens)
    return _apply_metadata(chapter, extract_page_metadata(html))


class BibleScraper:
    """
    Retrieves verses and chapters from bible.com.

        scraper = BibleScraper(TRANSLATIONS["NVT"])
        chapter = scraper.chapter_with_titles("PSA.1", include_footnotes=True)
        print(chapter.to_json())
    """

    def __init__(
        self,
        translation_id: Union[int, str, None],
        *,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
        retry_delay: float = 1.0,
    ) -> None:
        if not translation_id:
            raise ValueError("Bible translation ID is required and is available via catalog.TRANSLATIONS")
        self.translation_id = translation_id
        self.config = config or load_config()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})
        self.retry_delay = retry_delay

    def url(self, reference: str) -> str:
        return f"{self.config.base_url}/{self.translation_id}/{reference}"

    def fetch(self, reference: str) -> str:
        url = self.url(reference)
        last_error: Optional[Exception] = None
        for attempt in range(1, self.config.max_retries + 1):
            try:
                r = self.session.get(url, timeout=self.config.timeout)
                r.raise_for_status()
                return r.text
            except requests.RequestException as e:
                last_error = e
                logger.warning("fetch %s failed (attempt %d/%d): %s", url, attempt, self.config.max_retries, e)
                if attempt < self.config.max_retries:
                    time.sleep(self.retry_delay * attempt)
        raise FetchError(f"Failed to fetch {url}: {last_error}")

    def verse(self, reference: str) -> VerseText:
        verse = extract_verse(self.fetch(reference))
        return verse if verse is not None else VerseText()

    def chapter(self, reference: str) -> Chapter:
        """Chapter verses as plain text, titles and notes left out."""
        return build_chapter(self.fetch(reference), titles=False)

    def chapter_with_titles(self, reference: str, include_footnotes: Optional[bool] = None) -> Chapter:
        if include_footnotes is None:
            include_footnotes = self.config.include_footnotes
        return build_chapter(self.fetch(reference), include_footnotes=include_footnotes)
