"""
Unicode helpers for Greek text.

Script detection, NFC/NFD normalization, and two small inspection helpers
(codepoint escapes and character names) that are handy when debugging
precomposed vs. decomposed input.

No external dependencies, only unicodedata.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "is_greek",
    "to_nfc",
    "to_nfd",
    "unicode_points",
    "unicode_dump",
    "unicode_names",
]

# Codepoints with the Unicode Greek script property. The Greek and Coptic
# block is not all Greek: U+0374, U+037E, U+0385 and U+0387 are Common
# script and U+03E2-U+03EF are Coptic letters.
_GREEK_SCRIPT_RE = re.compile(
    "["
    "\u0370-\u0373\u0375-\u037d\u037f-\u0384\u0386\u0388-\u03e1\u03f0-\u03ff"
    "\u1d26-\u1d2a\u1d5d-\u1d61\u1d66-\u1d6a\u1dbf"
    "\u1f00-\u1ffe"
    "\u2126\uab65"
    "\U00010140-\U0001018e\U000101a0"
    "\U0001d200-\U0001d245"
    "]"
)


def is_greek(text: str) -> bool:
    """
    Return True if text contains at least one Greek-script codepoint.

    Combining marks (U+0300-U+036F) are script-neutral, so a string of bare
    accents is not Greek.

    Example:
        >>> is_greek("λόγος")
        True
        >>> is_greek("logos")
        False
    """
    return _GREEK_SCRIPT_RE.search(text) is not None


def to_nfc(text: str) -> str:
    """Canonical composition (precomposed polytonic letters)."""
    return unicodedata.normalize("NFC", text)


def to_nfd(text: str) -> str:
    """Canonical decomposition (base letter + combining marks)."""
    return unicodedata.normalize("NFD", text)


def unicode_points(text: str) -> list[str]:
    """
    Return a backslash-u escape for each codepoint in text.

    Example:
        >>> unicode_points("α")
        ['\\\\u03B1']
    """
    return [f"\\u{ord(ch):04X}" for ch in text]


def unicode_dump(text: str) -> dict[str, str]:
    """
    Map each distinct character of text to its codepoint escape.

    Keys keep first-occurrence order; values match unicode_points().
    """
    return {ch: f"\\u{ord(ch):04X}" for ch in text}


def unicode_names(text: str) -> list[str]:
    """
    Return the Unicode name of each codepoint in text.

    Codepoints without a name (controls, unassigned) yield an empty string.

    Example:
        >>> unicode_names("α")
        ['GREEK SMALL LETTER ALPHA']
    """
    return [unicodedata.name(ch, "") for ch in text]
