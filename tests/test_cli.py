import json

import pytest

from pages import CHAPTER_PAGE
from scraper.bible.cli import build_parser, main
from scraper.bible.client import build_chapter
from scraper.bible.commands import book as book_module
from scraper.bible.commands.common import parse_chapter_range


class TestParseChapterRange:
    def test_single(self):
        assert parse_chapter_range("3") == [3]

    def test_range_and_list(self):
        assert parse_chapter_range("1,4-6") == [1, 4, 5, 6]

    @pytest.mark.parametrize("bad", ["", "0", "5-2", "x"])
    def test_bad(self, bad):
        with pytest.raises(ValueError):
            parse_chapter_range(bad)


class TestMain:
    def test_no_args_prints_help(self, capsys):
        assert main([]) == 2
        assert "bible-scraper" in capsys.readouterr().err

    def test_unknown_command(self):
        with pytest.raises(SystemExit) as exc:
            main(["nope"])
        assert exc.value.code == 2

    def test_translations(self, capsys):
        assert main(["translations"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["translations"]["NVT"] == 1930

    def test_books(self, capsys):
        assert main(["books"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["books"]["Genesis"] == "GEN"

    def test_parse_saved_page(self, clean_env, capsys):
        src = clean_env / "PSA.1.html"
        src.write_text(CHAPTER_PAGE, encoding="utf-8")
        assert main(["parse", "--input", str(src)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["reference"] == "Psalm 1 NLT"
        assert [v["reference"] for v in data["verses"]] == ["Psalm 1:1", "Psalm 1:2"]
        assert data["verses"][0]["content"][0] == {"text": "The Two Ways", "type": "t"}

    def test_parse_to_file(self, clean_env):
        src = clean_env / "PSA.1.html"
        src.write_text(CHAPTER_PAGE, encoding="utf-8")
        out = clean_env / "psa1.json"
        assert main(["parse", "--input", str(src), "--plain", "-o", str(out)]) == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert all(len(v["content"]) == 1 for v in data["verses"])

    def test_parse_missing_input(self, clean_env):
        assert main(["parse", "--input", str(clean_env / "missing.html")]) == 1

    def test_chapter_bad_reference(self, clean_env, capsys):
        assert main(["chapter", "PSA"]) == 1
        assert "Malformed reference" in capsys.readouterr().err

    def test_chapter_unknown_translation(self, clean_env, capsys):
        assert main(["chapter", "PSA.1", "--translation", "XYZ"]) == 1

    def test_verse_needs_verse_number(self, clean_env, capsys):
        assert main(["verse", "JHN.3"]) == 1

    def test_book_bad_range(self, clean_env):
        assert main(["book", "Genesis", "--chapters", "3-1"]) == 1

    def test_missing_config_file(self, clean_env, capsys):
        missing = str(clean_env / "nope.yml")
        assert main(["--config", missing, "chapter", "PSA.1"]) == 1
        assert "Config file not found" in capsys.readouterr().err
        assert main(["--config", missing, "book", "Genesis", "--chapters", "1"]) == 1

    def test_config_file_from_env(self, clean_env, monkeypatch, capsys):
        monkeypatch.setenv("BIBLE_SCRAPER_CONFIG", str(clean_env / "nope.yml"))
        assert main(["verse", "JHN.3.16"]) == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_invalid_config_file(self, clean_env, capsys):
        (clean_env / "@scraper.yml").write_text("translation: [kjv\n", encoding="utf-8")
        assert main(["chapter", "PSA.1"]) == 1
        assert "not valid YAML" in capsys.readouterr().err

    def test_chapter_options(self):
        args = build_parser().parse_args(["-v", "chapter", "PSA.1", "--footnotes", "-t", "kjv"])
        assert args.footnotes is True
        assert args.titles is False
        assert args.translation == "kjv"
        assert args.verbose is True


class FakeScraper:
    def __init__(self):
        self.refs = []

    def chapter_with_titles(self, ref):
        self.refs.append(ref)
        return build_chapter(CHAPTER_PAGE)

    def chapter(self, ref):
        self.refs.append(ref)
        return build_chapter(CHAPTER_PAGE, titles=False)


class TestBookCommand:
    def test_writes_one_file_per_chapter(self, clean_env, monkeypatch):
        fake = FakeScraper()
        monkeypatch.setattr(book_module, "scraper_from_args", lambda args, cfg=None: fake)
        monkeypatch.setenv("BIBLE_SCRAPER_RATE", "1000")
        out = clean_env / "out"
        assert main(["book", "Psalms", "--chapters", "1-2", "--titles", "--out", str(out), "-t", "NLT"]) == 0
        assert fake.refs == ["PSA.1", "PSA.2"]
        written = sorted(p.name for p in (out / "chapters").iterdir())
        assert written == ["NLT-PSA.1.json", "NLT-PSA.2.json"]
        data = json.loads((out / "chapters" / "NLT-PSA.1.json").read_text(encoding="utf-8"))
        assert data["verses"][0]["content"][0]["type"] == "t"
