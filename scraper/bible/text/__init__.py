"""
Text normalization functions for scraped chapter content.
"""
from .normalization import (
    collapse_spaces,
    strip_invisible_chars,
    strip_invisible_text,
)

__all__ = [
    "collapse_spaces",
    "strip_invisible_chars",
    "strip_invisible_text",
]
