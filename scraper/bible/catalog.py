"""
Lookup tables for the site's translation ids and USFM book codes.
"""
from typing import Dict

# Translation ids as listed on https://www.bible.com/versions
ENGLISH_TRANSLATIONS: Dict[str, int] = {
    "AMP": 1588, "AMPC": 8, "ASV": 12, "BOOKS": 31, "BSB": 3034, "CEB": 37,
    "CEV": 392, "CEVDCI": 303, "CEVUK": 294, "CJB": 1275, "CPDV": 42,
    "CSB": 1713, "DARBY": 478, "DRC1752": 55, "EASY": 2079, "ERV": 406,
    "ESV": 59, "FBV": 1932, "FNVNT": 3633, "GNBDC": 416, "GNBDK": 431,
    "GNBUK": 296, "GNT": 68, "GNTD": 69, "GNV": 2163, "GW": 70, "GWC": 1047,
    "HCSB": 72, "ICB": 1359, "JUB": 1077, "KJV": 1, "KJVAAE": 546,
    "KJVAE": 547, "LEB": 90, "LSB": 3345, "MEV": 1171, "MP1650": 1365,
    "MP1781": 3051, "MSG": 97, "NABRE": 463, "NASB1995": 100,
    "NASB2020": 2692, "NCV": 105, "NET": 107, "NIRV": 110, "NIV": 111,
    "NIVUK": 113, "NKJV": 114, "NLT": 116, "NMV": 2135, "NRSV": 2015,
    "NRSVUE": 3523, "PEV": 2530, "RAD": 2753, "RSV": 2017, "RSVCI": 3548,
    "RV1885": 477, "RV1895": 1922, "TCENT": 3427, "TEG": 3010, "TLV": 314,
    "TOJB2011": 130, "TPT": 1849, "TS2009": 316, "WBMS": 2407,
    "WEBBE": 1204, "WEBUS": 206, "WMB": 1209, "WMBBE": 1207, "YLT98": 821,
}

PORTUGUESE_TRANSLATIONS: Dict[str, int] = {
    "A21": 2645, "ARA": 1608, "ARC": 212, "BLT": 324, "MZNVI": 4094,
    "NAA": 1840, "NBV_P": 1966, "NTLH": 211, "NVI": 129, "NVT": 1930,
    "TC60DO": 3658, "TB": 277, "VFL": 200,
}

OTHER_TRANSLATIONS: Dict[str, int] = {
    "VULG": 823,    # Latin Vulgate
    "ICL00D": 1196,  # Italian
    "NR06": 122,    # Italian
}

TRANSLATIONS: Dict[str, int] = {
    **ENGLISH_TRANSLATIONS,
    **OTHER_TRANSLATIONS,
    **PORTUGUESE_TRANSLATIONS,
}

# Display name -> USFM code, see https://ubsicap.github.io/usfm/identification/books.html
BOOKS: Dict[str, str] = {
    "Genesis": "GEN", "Exodus": "EXO", "Leviticus": "LEV", "Numbers": "NUM",
    "Deuteronomy": "DEU", "Joshua": "JOS", "Judges": "JDG", "Ruth": "RUT",
    "1 Samuel": "1SA", "2 Samuel": "2SA", "1 Kings": "1KI", "2 Kings": "2KI",
    "1 Chronicles": "1CH", "2 Chronicles": "2CH", "Ezra": "EZR",
    "Nehemiah": "NEH", "Esther": "EST", "Job": "JOB", "Psalms": "PSA",
    "Psalm": "PSA", "Proverbs": "PRO", "Ecclesiastes": "ECC",
    "Song of Solomon": "SNG", "Isaiah": "ISA", "Jeremiah": "JER",
    "Lamentations": "LAM", "Ezekiel": "EZK", "Daniel": "DAN", "Hosea": "HOS",
    "Joel": "JOL", "Amos": "AMO", "Obadiah": "OBA", "Jonah": "JON",
    "Micah": "MIC", "Nahum": "NAM", "Habakkuk": "HAB", "Zephaniah": "ZEP",
    "Haggai": "HAG", "Zechariah": "ZEC", "Malachi": "MAL", "Matthew": "MAT",
    "Mark": "MRK", "Luke": "LUK", "John": "JHN", "Acts": "ACT",
    "Romans": "ROM", "1 Corinthians": "1CO", "2 Corinthians": "2CO",
    "Galatians": "GAL", "Ephesians": "EPH", "Philippians": "PHP",
    "Colossians": "COL", "1 Thessalonians": "1TH", "2 Thessalonians": "2TH",
    "1 Timothy": "1TI", "2 Timothy": "2TI", "Titus": "TIT", "Philemon": "PHM",
    "Hebrews": "HEB", "James": "JAS", "1 Peter": "1PE", "2 Peter": "2PE",
    "1 John": "1JN", "2 John": "2JN", "3 John": "3JN", "Jude": "JUD",
    "Revelation": "REV",
}

BOOK_NAMES = list(BOOKS)


def translation_id(abbreviation: str) -> int:
    """Case-insensitive lookup of a translation abbreviation (e.g. "nvt")."""
    key = abbreviation.strip().upper()
    if key not in TRANSLATIONS:
        raise KeyError(f"Unknown translation {abbreviation!r}; run 'bible-scraper translations' for the list")
    return TRANSLATIONS[key]


def book_code(name: str) -> str:
    """Resolve a display name (case-insensitive) or an existing USFM code."""
    wanted = name.strip().lower()
    for display, code in BOOKS.items():
        if display.lower() == wanted or code.lower() == wanted:
            return code
    raise KeyError(f"Unknown book {name!r}; run 'bible-scraper books' for the list")
