from __future__ import annotations
from typing import Any, List, Optional, Union
import logging

from bs4 import BeautifulSoup
import orjson

from ..model import PageMetadata, VerseText
from ..text import strip_invisible_chars, strip_invisible_text
from ..tokens import Token, make_token

logger = logging.getLogger(__name__)

# Chapter markup: every block and inline element carries a
# "ChapterContent_<style>__<hash>" class
TOKEN_SELECTOR = 'div[class*="ChapterContent_"], span[class*="ChapterContent_"]'
NEXT_DATA_SELECTOR = "script#__NEXT_DATA__"

# Legacy verse page layout
FALLBACK_VERSE_SELECTOR = "p.text-19"
FALLBACK_REFERENCE_SELECTOR = "h2.mbe-2"

Markup = Union[str, bytes]


def _soup(html: Markup) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def _dig(data: Any, *path: Union[str, int]) -> Any:
    """Walk nested dicts/lists; any missing step yields None."""
    cur = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(cur, list) or len(cur) <= step:
                return None
        elif not isinstance(cur, dict) or step not in cur:
            return None
        cur = cur[step]
    return cur


def _str_or(value: Any, default: Optional[str]) -> Optional[str]:
    return value if isinstance(value, str) else default


def extract_tokens(html: Markup) -> List[Token]:
    """
    Flatten the chapter markup into tokens in document order.
    Nested elements yield their own tokens after their parent; text is the
    element's full text with whitespace preserved.
    """
    soup = _soup(html)
    tokens: List[Token] = []
    for el in soup.select(TOKEN_SELECTOR):
        classes = el.get("class") or []
        if isinstance(classes, str):
            classes = classes.split()
        text = strip_invisible_chars(el.get_text())
        tokens.append(make_token(text, classes, el.get("data-usfm")))
    logger.debug("extracted %d tokens", len(tokens))
    return tokens


def load_next_data(html: Markup) -> Optional[dict]:
    """Parse the page's embedded __NEXT_DATA__ JSON block, or None."""
    soup = _soup(html)
    script = soup.select_one(NEXT_DATA_SELECTOR)
    if script is None:
        return None
    # orjson only takes exact str or bytes, not bs4 string subclasses
    raw = str(script.string or script.get_text())
    if not raw or not raw.strip():
        return None
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        logger.warning("unparsable __NEXT_DATA__ block: %s", e)
        return None
    return data if isinstance(data, dict) else None


def _audio_url(raw: Any) -> Optional[str]:
    if not isinstance(raw, str) or not raw:
        return None
    # protocol-relative on the site
    if raw.startswith("//"):
        return "https:" + raw
    return raw


def metadata_from_next_data(data: dict) -> PageMetadata:
    props = _dig(data, "props", "pageProps") or {}
    info = _dig(props, "chapterInfo") or {}
    return PageMetadata(
        human_reference=_str_or(_dig(info, "reference", "human"), ""),
        version_abbreviation=_str_or(_dig(props, "versionData", "local_abbreviation"), ""),
        audio_url=_audio_url(_dig(info, "audioChapterInfo", 0, "download_urls", "format_mp3_32k")),
        copyright_text=_str_or(_dig(info, "copyright", "text"), ""),
        audio_copyright_text=_str_or(_dig(props, "audioVersionInfo", "copyright_short", "text"), None),
    )


def extract_page_metadata(html: Markup) -> Optional[PageMetadata]:
    data = load_next_data(html)
    if data is None:
        return None
    return metadata_from_next_data(data)


def extract_verse(html: Markup) -> Optional[VerseText]:
    """
    Single-verse page: prefer the JSON block, fall back to the rendered
    verse paragraph and heading.
    """
    data = load_next_data(html)
    if data is not None:
        props = _dig(data, "props", "pageProps") or {}
        content = _dig(props, "verses", 0, "content")
        human = _dig(props, "verses", 0, "reference", "human")
        version = _str_or(_dig(props, "version", "local_abbreviation"), "")
        if isinstance(content, str) and content and isinstance(human, str) and human:
            return VerseText(content=content, reference=f"{human} {version}", version=version)

    soup = _soup(html)
    para = soup.select_one(FALLBACK_VERSE_SELECTOR)
    heading = soup.select_one(FALLBACK_REFERENCE_SELECTOR)
    if para is None and heading is None:
        return None
    return VerseText(
        content=strip_invisible_text(para.get_text()) if para is not None else "",
        reference=strip_invisible_text(heading.get_text()) if heading is not None else "",
    )
