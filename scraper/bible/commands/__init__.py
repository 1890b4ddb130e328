"""
CLI command handlers for the scraper.
"""
from .book import cmd_book
from .catalog import cmd_books, cmd_translations
from .fetch import cmd_chapter, cmd_verse
from .parse import cmd_parse

__all__ = [
    "cmd_book",
    "cmd_books",
    "cmd_chapter",
    "cmd_parse",
    "cmd_translations",
    "cmd_verse",
]
