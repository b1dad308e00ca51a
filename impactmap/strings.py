"""
Text comparison and search helpers.

Comparisons are case- and accent-insensitive so that names sort the way a
reader expects ("Écoles" next to "Ecology"), with the raw text as a final
tie-breaker to keep the order total and deterministic.
"""

from __future__ import annotations

import unicodedata
from typing import Optional, Tuple


def fold(text: Optional[str]) -> str:
    """Normalize text for comparison: strip accents, fold case."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", str(text))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def compare_key(text: Optional[str]) -> Tuple[str, str]:
    return (fold(text), "" if text is None else str(text))


def search(text: Optional[str], term: Optional[str]) -> int:
    """
    Search `term` in `text`.

    Returns:
        The position of the first match in the folded text (lower is a better
        match), or -1 if the term does not occur. A blank term matches at 0.
    """
    needle = fold(term).strip()
    if not needle:
        return 0
    return fold(text).find(needle)
