"""
Greek-aware tokenization.

Splits text into word tokens and single-character punctuation tokens. Every
character of Unicode general category P* counts as punctuation, plus the
marks Greek editions use as apostrophes and interpuncts.
"""

from __future__ import annotations

import unicodedata

__all__ = ["tokenize", "is_punctuation", "GREEK_PUNCTUATION"]

GREEK_PUNCTUATION = frozenset(
    "\u1fbd"  # koronis, used as elision apostrophe: δ᾽
    "\u02bc"  # modifier letter apostrophe
    "\u0387"  # ano teleia
    "\u00b7"  # middle dot (NFC of ano teleia)
    "\u2027"  # hyphenation point
    "\u2e31"  # word separator middle dot
    "\U00010101"  # Aegean word separator dot
    "\u037e"  # Greek question mark
    ".;"
)


def is_punctuation(ch: str) -> bool:
    """Return True if ch is a punctuation character."""
    return ch in GREEK_PUNCTUATION or unicodedata.category(ch).startswith("P")


def tokenize(text: str) -> list[str]:
    """
    Split text into words and punctuation marks.

    Whitespace separates tokens and is dropped; each punctuation character
    becomes a token of its own. No token is empty.

    Args:
        text: Greek text

    Returns:
        Tokens in original order

    Example:
        >>> tokenize("ἀγάπησις· καὶ γὰρ")
        ['ἀγάπησις', '·', 'καὶ', 'γὰρ']
    """
    spaced = "".join(f" {ch} " if is_punctuation(ch) else ch for ch in text)
    return spaced.split()
