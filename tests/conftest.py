import pytest

from scraper.bible.tokens import Token


def tok(styles: str, text: str = "", ref=None) -> Token:
    """Token with bare style names, e.g. tok("verse", ref="PSA.1.1")."""
    return Token(text=text, tags=tuple(styles.split()), machine_reference=ref)


BOUNDARY = tok("chapter")


ENV_VARS = [
    "BIBLE_SCRAPER_BASE_URL",
    "BIBLE_SCRAPER_TRANSLATION",
    "BIBLE_SCRAPER_TIMEOUT",
    "BIBLE_SCRAPER_RETRIES",
    "BIBLE_SCRAPER_USER_AGENT",
    "BIBLE_SCRAPER_FOOTNOTES",
    "BIBLE_SCRAPER_OUT",
    "BIBLE_SCRAPER_RATE",
    "BIBLE_SCRAPER_CONFIG",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No scraper env vars and a working directory without @scraper.yml."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
