"""
Tests for the page adapter (scraper/bible/adapters/page_tokens.py)
"""

from pages import CHAPTER_PAGE, CHAPTER_PAGE_NO_DATA, LEGACY_VERSE_PAGE, VERSE_PAGE, page
from scraper.bible.adapters.page_tokens import (
    extract_page_metadata,
    extract_tokens,
    extract_verse,
    load_next_data,
)
from scraper.bible.model import PageMetadata, VerseText
from scraper.bible.tokens import TokenTag


class TestExtractTokens:
    def test_document_order(self):
        tokens = extract_tokens(CHAPTER_PAGE)
        assert tokens[0].has(TokenTag.CHAPTER_BOUNDARY)
        headings = [t.text for t in tokens if t.has(TokenTag.HEADING)]
        assert headings == ["The Two Ways"]
        refs = [t.machine_reference for t in tokens if t.has(TokenTag.VERSE)]
        assert refs == ["PSA.1.1", "PSA.1.1", "PSA.1.2"]

    def test_content_whitespace_preserved(self):
        tokens = extract_tokens(CHAPTER_PAGE)
        contents = [t.text for t in tokens if t.has(TokenTag.CONTENT)]
        assert contents[0] == "Oh, the joys of those who do not "
        assert contents[2] == "But they delight in the law of the "

    def test_poetry_divs_are_line_breaks(self):
        tokens = extract_tokens(CHAPTER_PAGE)
        assert sum(1 for t in tokens if t.has(TokenTag.LINE_BREAK_HINT)) == 3

    def test_no_reference_is_none(self):
        tokens = extract_tokens(CHAPTER_PAGE)
        heading = next(t for t in tokens if t.has(TokenTag.HEADING))
        assert heading.machine_reference is None

    def test_page_without_chapter_markup(self):
        assert extract_tokens(page("<p>nothing here</p>")) == []


class TestPageMetadata:
    def test_all_fields(self):
        meta = extract_page_metadata(CHAPTER_PAGE)
        assert meta == PageMetadata(
            human_reference="Psalm 1",
            version_abbreviation="NLT",
            audio_url="https://audio.example.com/psa1.mp3",
            copyright_text="Holy Bible, New Living Translation",
            audio_copyright_text="Audio (c) Tyndale",
        )

    def test_missing_block(self):
        assert extract_page_metadata(CHAPTER_PAGE_NO_DATA) is None

    def test_next_data_parsed(self, caplog):
        data = load_next_data(CHAPTER_PAGE)
        assert data["props"]["pageProps"]["versionData"] == {"local_abbreviation": "NLT"}
        assert "unparsable" not in caplog.text

    def test_next_data_from_bytes(self):
        data = load_next_data(CHAPTER_PAGE.encode("utf-8"))
        assert data["props"]["pageProps"]["chapterInfo"]["reference"] == {"human": "Psalm 1"}

    def test_partial_data_defaults(self):
        meta = extract_page_metadata(page("", {"props": {"pageProps": {"chapterInfo": {"reference": {"human": "Jude 1"}}}}}))
        assert meta.human_reference == "Jude 1"
        assert meta.version_abbreviation == ""
        assert meta.audio_url is None
        assert meta.copyright_text == ""
        assert meta.audio_copyright_text is None

    def test_broken_json(self):
        broken = '<html><body><script id="__NEXT_DATA__">{"props": </script></body></html>'
        assert load_next_data(broken) is None


class TestExtractVerse:
    def test_from_json(self):
        assert extract_verse(VERSE_PAGE) == VerseText(
            content="For God so loved the world",
            reference="John 3:16 KJV",
            version="KJV",
        )

    def test_legacy_fallback(self):
        verse = extract_verse(LEGACY_VERSE_PAGE)
        assert verse.content == "For God so loved the world"
        assert verse.reference == "John 3:16"
        assert verse.version == ""

    def test_nothing_found(self):
        assert extract_verse(page("<p>empty</p>")) is None
