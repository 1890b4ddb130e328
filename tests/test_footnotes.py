from scraper.bible.footnotes import FootnoteCollector, footnote_marker, normalize_note
from scraper.bible.model import Footnote


class TestNormalizeNote:
    def test_collapses_spaces(self):
        assert normalize_note("see   also  v2") == "see also v2"

    def test_leading_label_joined(self):
        assert normalize_note("# 1:1 Or counsel") == "#1:1 Or counsel"

    def test_label_already_joined(self):
        assert normalize_note("#1:1 Or counsel") == "#1:1 Or counsel"

    def test_hash_elsewhere_untouched(self):
        assert normalize_note("see # 2") == "see # 2"

    def test_empty(self):
        assert normalize_note("") == ""


class TestCollector:
    def test_marker_format(self):
        assert footnote_marker(0) == "[n0]"
        assert footnote_marker(12) == "[n12]"

    def test_sequential_ids(self):
        c = FootnoteCollector()
        m0, f0 = c.next_footnote("first")
        m1, f1 = c.next_footnote("second  note")
        assert (m0, m1) == ("[n0]", "[n1]")
        assert f1 == Footnote(id="[n1]", note="second note")
        assert c.footnotes == [f0, f1]
        assert c.counter == 2

    def test_collectors_independent(self):
        FootnoteCollector().next_footnote("x")
        marker, _ = FootnoteCollector().next_footnote("y")
        assert marker == "[n0]"
