"""
Catalog command handlers - list translations and books.
"""
import orjson

from ..catalog import BOOKS, TRANSLATIONS


def cmd_translations(args) -> int:
    print(orjson.dumps({"translations": TRANSLATIONS}, option=orjson.OPT_INDENT_2).decode("utf-8"))
    return 0


def cmd_books(args) -> int:
    print(orjson.dumps({"books": BOOKS}, option=orjson.OPT_INDENT_2).decode("utf-8"))
    return 0
