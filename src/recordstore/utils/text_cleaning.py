import unicodedata
from typing import Any


def normalize(s: str) -> str:
    """
    Normalize a string for comparison by removing accents and standardizing case.

    This function:
    1. Decomposes Unicode characters (é becomes e + ´)
    2. Removes accent marks and diacritics
    3. Converts to lowercase using casefold() for proper Unicode handling

    Args:
        s (str): Input string to normalize

    Returns:
        str: Normalized string without accents in lowercase

    Example:
        "São José" -> "sao jose"
        "CAFÉ" -> "cafe"
    """
    decomposed = unicodedata.normalize("NFKD", s)

    # unicodedata.combining() returns non-zero for combining characters
    no_accents = "".join(ch for ch in decomposed if not unicodedata.combining(ch))

    # casefold() handles special cases like German ß -> ss
    return no_accents.casefold()


def contains_normalized(haystack: Any, needle: str) -> bool:
    """
    Case- and accent-insensitive substring test.

    Non-string haystacks (numbers stored by older clients) are compared
    through their string form. ``None`` never matches.
    """
    if haystack is None:
        return False
    if not isinstance(haystack, str):
        haystack = str(haystack)
    return normalize(needle) in normalize(haystack)
