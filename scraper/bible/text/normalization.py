"""
Text normalization helpers for scraped chapter fragments.
"""
import re
import unicodedata

_SPACE_VARIANTS = {
    "\u00A0": " ",  # NBSP
    "\u202F": " ",  # NNBSP
    "\u2007": " ",  # figure space
}
_SPACE_RUN_RE = re.compile(r" {2,}")


def strip_invisible_chars(text: str) -> str:
    """
    Remove invisible/control characters without touching layout whitespace.
    - Removes all codepoints in Unicode category 'C*' except tab/newline/CR
    - Converts NBSP, NNBSP and figure space to regular spaces
    - Leading, trailing and repeated spaces are kept as-is
    """
    if not text:
        return text
    for variant, repl in _SPACE_VARIANTS.items():
        text = text.replace(variant, repl)
    cleaned_chars = []
    for ch in text:
        if ch in ("\t", "\n", "\r"):
            cleaned_chars.append(ch)
            continue
        if unicodedata.category(ch).startswith("C"):
            continue
        cleaned_chars.append(ch)
    return "".join(cleaned_chars)


def collapse_spaces(text: str) -> str:
    """Collapse runs of plain spaces to a single space."""
    if not text:
        return text
    return _SPACE_RUN_RE.sub(" ", text)


def strip_invisible_text(text: str) -> str:
    """
    Broad clean for display strings (not for verse fragments, whose
    whitespace is significant):
    - strip_invisible_chars, then collapse space/tab runs
    - trim the result
    """
    if not text:
        return text
    cleaned = strip_invisible_chars(text)
    cleaned = re.sub(r"[ \t]+", " ", cleaned)
    cleaned = re.sub(r"[ \t]+\n", "\n", cleaned)
    return cleaned.strip()
