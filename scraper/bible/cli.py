import argparse
import logging
import sys

from .commands import cmd_book, cmd_books, cmd_chapter, cmd_parse, cmd_translations, cmd_verse


class HelpOnErrorArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        print("", file=sys.stderr)
        self.print_usage(sys.stderr)
        self.exit(2, f"\nerror: {message}\n\nUse -h or --help for detailed usage.\n\n")
    def print_help(self, file=None):
        if file is None:
            file = sys.stdout
        print("", file=file)
        super().print_help(file)
        print("", file=file)

class RichHelpFormatter(argparse.RawDescriptionHelpFormatter, argparse.ArgumentDefaultsHelpFormatter):
    pass


def build_parser() -> argparse.ArgumentParser:
    epilog = (
        "Examples:\n"
        "  bible-scraper chapter PSA.1 --translation NVT --titles --footnotes\n"
        "  bible-scraper verse JHN.3.16 --translation KJV\n"
        "  bible-scraper book Genesis --chapters 1-3 --titles\n"
        "  bible-scraper parse --input saved/PSA.1.html --footnotes\n"
        "  bible-scraper translations\n"
        "\n"
        "Environment:\n"
        "  BIBLE_SCRAPER_TRANSLATION  Default translation abbreviation (default NVT)\n"
        "  BIBLE_SCRAPER_BASE_URL     Site base URL (default https://www.bible.com/bible)\n"
        "  BIBLE_SCRAPER_TIMEOUT      Request timeout in seconds (default 30)\n"
        "  BIBLE_SCRAPER_RETRIES      Attempts per page (default 3)\n"
        "  BIBLE_SCRAPER_FOOTNOTES    1 to include footnotes by default\n"
        "  BIBLE_SCRAPER_RATE         Requests per second for 'book' (default 1)\n"
        "  BIBLE_SCRAPER_OUT          Output dir for 'book' (default out)\n"
        "  BIBLE_SCRAPER_CONFIG       YAML settings file (default ./@scraper.yml if present)\n"
    )
    welcome = (
        "Bible Scraper\n"
        "-------------\n"
        "Fetch chapters and verses from bible.com and rebuild them as structured JSON:\n"
        "titles, verse runs and (optionally) footnotes.\n"
    )
    p = HelpOnErrorArgumentParser(
        prog="bible-scraper",
        description=welcome,
        epilog=epilog,
        formatter_class=RichHelpFormatter,
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging and print assembly diagnostics")
    p.add_argument("--config", metavar="PATH", help="YAML settings file")
    sub = p.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False, formatter_class=RichHelpFormatter)
    common.add_argument("--translation", "-t", help="Translation abbreviation, e.g. NVT, KJV (see 'translations')")

    assembly = argparse.ArgumentParser(add_help=False, formatter_class=RichHelpFormatter)
    assembly.add_argument("--titles", action="store_true", help="Keep section titles as separate runs")
    assembly.add_argument("--footnotes", action="store_true", help="Inline [nK] markers and collect notes (implies titles)")

    sp = sub.add_parser(
        "chapter",
        parents=[common, assembly],
        help="Fetch one chapter as JSON",
        description="Fetch a chapter (e.g. PSA.1) and print its verses as JSON.",
        formatter_class=RichHelpFormatter,
    )
    sp.add_argument("reference", help="Chapter reference, e.g. PSA.1")
    sp.add_argument("--output", "-o", metavar="PATH", help="Write JSON to a file instead of stdout")
    sp.set_defaults(func=cmd_chapter)

    sp = sub.add_parser(
        "verse",
        parents=[common],
        help="Fetch one verse as JSON",
        formatter_class=RichHelpFormatter,
    )
    sp.add_argument("reference", help="Verse reference, e.g. JHN.3.16")
    sp.set_defaults(func=cmd_verse)

    sp = sub.add_parser(
        "book",
        parents=[common, assembly],
        help="Fetch a range of chapters into the output directory",
        description=(
            "Fetch chapters of one book and write <out>/chapters/<TRANSLATION>-<REF>.json.\n"
            "Requests are spaced according to BIBLE_SCRAPER_RATE.\n"
        ),
        formatter_class=RichHelpFormatter,
    )
    sp.add_argument("book", help="Book name or USFM code, e.g. Genesis or GEN")
    sp.add_argument("--chapters", required=True, metavar="RANGE", help="Chapters, e.g. 1-3 or 1,4,7-9")
    sp.add_argument("--out", metavar="DIR", help="Output directory")
    sp.set_defaults(func=cmd_book)

    sp = sub.add_parser(
        "parse",
        help="Assemble a saved chapter page offline",
        formatter_class=RichHelpFormatter,
    )
    sp.add_argument("--input", required=True, metavar="PATH", help="Saved chapter page (HTML)")
    sp.add_argument("--footnotes", action="store_true", help="Inline [nK] markers and collect notes")
    sp.add_argument("--plain", action="store_true", help="Plain verse text without titles")
    sp.add_argument("--output", "-o", metavar="PATH", help="Write JSON to a file instead of stdout")
    sp.set_defaults(func=cmd_parse)

    sp = sub.add_parser("translations", help="List known translation ids", formatter_class=RichHelpFormatter)
    sp.set_defaults(func=cmd_translations)

    sp = sub.add_parser("books", help="List book names and USFM codes", formatter_class=RichHelpFormatter)
    sp.set_defaults(func=cmd_books)

    return p


def main(argv=None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    # Show help when no args supplied
    if not argv:
        print("", file=sys.stderr)
        parser.print_help(sys.stderr)
        print("", file=sys.stderr)
        return 2
    args = parser.parse_args(argv)
    if getattr(args, "footnotes", False) and hasattr(args, "titles"):
        args.titles = True
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
