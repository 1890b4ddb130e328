import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_BASE_URL = "https://www.bible.com/bible"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; bible-scraper)"
DEFAULT_CONFIG_FILE = "@scraper.yml"


@dataclass
class Config:
    base_url: str
    translation: str
    timeout: float
    max_retries: int
    user_agent: str
    include_footnotes: bool
    out_dir: str
    rate_per_sec: float


def _truthy(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip() not in ("", "0", "false", "False", "no")


def _number(name: str, raw: Any, cast):
    try:
        return cast(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {raw!r}")


def load_file_settings(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read optional YAML settings. An explicit path must exist; the default
    @scraper.yml is used only when present in the working directory.
    """
    explicit = path or os.getenv("BIBLE_SCRAPER_CONFIG")
    p = Path(explicit) if explicit else Path(DEFAULT_CONFIG_FILE)
    if not p.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {p}")
        return {}
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Config file {p} is not valid YAML: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"Config file {p} must contain a mapping")
    return data


def load_config(
    *,
    config_file: Optional[str] = None,
    base_url: Optional[str] = None,
    translation: Optional[str] = None,
    timeout: Optional[float] = None,
    max_retries: Optional[int] = None,
    user_agent: Optional[str] = None,
    include_footnotes: Optional[bool] = None,
    out_dir: Optional[str] = None,
    rate_per_sec: Optional[float] = None,
) -> Config:
    """
    Load configuration from function arguments, env and an optional YAML file.
    Precedence: function args > env > file > defaults.
    """
    file_cfg = load_file_settings(config_file)

    def pick(arg: Any, env: str, key: str, default: Any) -> Any:
        if arg is not None:
            return arg
        env_val = os.getenv(env)
        if env_val is not None and env_val.strip() != "":
            return env_val.strip()
        if file_cfg.get(key) is not None:
            return file_cfg[key]
        return default

    url = str(pick(base_url, "BIBLE_SCRAPER_BASE_URL", "base_url", DEFAULT_BASE_URL)).rstrip("/")
    trans = str(pick(translation, "BIBLE_SCRAPER_TRANSLATION", "translation", "NVT")).upper()
    to = _number("BIBLE_SCRAPER_TIMEOUT", pick(timeout, "BIBLE_SCRAPER_TIMEOUT", "timeout", 30), float)
    retries = _number("BIBLE_SCRAPER_RETRIES", pick(max_retries, "BIBLE_SCRAPER_RETRIES", "max_retries", 3), int)
    ua = str(pick(user_agent, "BIBLE_SCRAPER_USER_AGENT", "user_agent", DEFAULT_USER_AGENT))
    notes = _truthy(pick(include_footnotes, "BIBLE_SCRAPER_FOOTNOTES", "include_footnotes", False))
    out = str(pick(out_dir, "BIBLE_SCRAPER_OUT", "out_dir", "out"))
    rps = _number("BIBLE_SCRAPER_RATE", pick(rate_per_sec, "BIBLE_SCRAPER_RATE", "rate_per_sec", 1), float)

    if retries < 1:
        raise ValueError("BIBLE_SCRAPER_RETRIES must be at least 1")
    if rps <= 0:
        raise ValueError("BIBLE_SCRAPER_RATE must be positive")

    return Config(
        base_url=url,
        translation=trans,
        timeout=to,
        max_retries=retries,
        user_agent=ua,
        include_footnotes=notes,
        out_dir=out,
        rate_per_sec=rps,
    )
