"""Slug derivation for URL-safe, lowercase-hyphenated identifiers."""

import re
import unicodedata

_NON_WORD = re.compile(r"[^a-z0-9\s_-]")
_SEPARATORS = re.compile(r"[\s_-]+")


def slugify(text: str) -> str:
    """
    Convert text to a lowercase, hyphen-separated ASCII slug.

    Accents are folded to their base letters; anything else outside [a-z0-9] is
    dropped, and runs of whitespace, underscores or hyphens collapse to one hyphen.

    >>> slugify("AI & Machine Learning")
    'ai-machine-learning'
    """
    ascii_text = (
        unicodedata.normalize("NFKD", text or "").encode("ascii", "ignore").decode("ascii")
    )
    lowered = _NON_WORD.sub("", ascii_text.lower())
    return _SEPARATORS.sub("-", lowered).strip("-")
