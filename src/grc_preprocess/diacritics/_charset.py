"""
Diacritic stripping for polytonic Greek.

Provides:
- strip_diacritics(): remove non-spacing marks from lowercase letters,
  uppercase letters, or both
- CaseScope: which letters a stripping pass touches
- base_char(): the bare form of a single character
- The capital-letter composite fixup table
"""

from __future__ import annotations

import re
import unicodedata
from enum import Enum
from typing import Union

from grc_preprocess._errors import NoGreekContent
from grc_preprocess._unicode import is_greek, to_nfc, to_nfd

__all__ = [
    "CaseScope",
    "strip_diacritics",
    "base_char",
    "GREEK_VOWELS",
    "CAPITAL_FIXUPS",
]

# Lowercase base vowels; rho is the only consonant that takes a breathing
GREEK_VOWELS = frozenset("αεηιουω")


class CaseScope(str, Enum):
    """Which letters a stripping pass applies to."""

    LOWER = "lower"
    UPPER = "upper"
    BOTH = "both"


# Capitals whose marks do not come apart under NFD. Polytonic fonts and
# Beta Code converters often write the breathing and accent of a capital as
# a spacing sign (category Sk) before the letter, e.g. "῎Α" for "Ἄ", and a
# circumflex after a capital vowel as a spacing perispomeni, e.g. "Ω῀".
# NFD leaves these signs as separate non-Mn characters, so the generic rule
# never removes them. Applied in order to NFD text during the uppercase pass.
CAPITAL_FIXUPS: tuple[tuple[re.Pattern[str], str], ...] = (
    # psili/dasia sign, optionally with varia, oxia or perispomeni
    # (NFD of ῍ ῎ ῏ ῝ ῞ ῟), before a capital: "῾Ο" -> "Ο"
    (re.compile("[\u1fbf\u1ffe][\u0300\u0301\u0342]?(?=[\u0391-\u03a9])"), ""),
    # spacing oxia or tonos before a capital: "΄Α" -> "Α"
    (re.compile("[\u00b4\u0384](?=[\u0391-\u03a9])"), ""),
    # capital vowel followed by a spacing perispomeni, alone or with
    # dialytika (NFD of ῁): "Α῀" -> "Α"
    (re.compile("([\u0391\u0395\u0397\u0399\u039f\u03a5\u03a9])(?:\u1fc0|\u00a8\u0342)"), r"\1"),
)


def _is_mark(ch: str) -> bool:
    return unicodedata.category(ch) == "Mn"


def _strip_pass(text: str, upper: bool) -> str:
    """Strip marks from Greek letters of a single case."""
    decomposed = to_nfd(text)
    if upper:
        for pattern, replacement in CAPITAL_FIXUPS:
            decomposed = pattern.sub(replacement, decomposed)

    result = []
    strip = False
    for ch in decomposed:
        if _is_mark(ch):
            if not strip:
                result.append(ch)
            continue
        # New cluster: a base character followed by its marks
        strip = is_greek(ch) and (ch.isupper() if upper else ch.islower())
        result.append(ch)

    return to_nfc("".join(result))


def strip_diacritics(text: str, scope: Union[CaseScope, str] = CaseScope.BOTH) -> str:
    """
    Remove Greek diacritics, limited to lowercase or uppercase letters.

    Decomposes to NFD, removes every non-spacing mark attached to a Greek
    letter of the selected case, then recomposes. Letters of the other case
    and non-Greek letters keep their marks. ``BOTH`` is the lowercase pass
    followed by the uppercase pass.

    Args:
        text: Greek text (possibly with polytonic diacritics)
        scope: CaseScope member or its string value

    Returns:
        NFC text with the selected diacritics removed

    Raises:
        NoGreekContent: if text contains no Greek
        ValueError: if scope is not a valid CaseScope

    Example:
        >>> strip_diacritics("ἄνθρωπος")
        'ανθρωπος'
        >>> strip_diacritics("Ἀθῆναι", CaseScope.LOWER)
        'Ἀθηναι'
    """
    scope = CaseScope(scope)
    if not is_greek(text):
        raise NoGreekContent(text)

    if scope is CaseScope.LOWER:
        return _strip_pass(text, upper=False)
    if scope is CaseScope.UPPER:
        return _strip_pass(text, upper=True)
    return _strip_pass(_strip_pass(text, upper=False), upper=True)


def base_char(ch: str) -> str:
    """
    Return the base character for a (possibly accented) character.

    Case is preserved. Returns "" for a bare combining mark.

    Args:
        ch: A single character

    Returns:
        The base character with all diacritics removed
    """
    base = "".join(c for c in to_nfd(ch) if not _is_mark(c))
    return to_nfc(base)
