"""
Accent conversion tables for polytonic Greek.

Character-for-character substitution between grave (varia) and acute
accents, and between the tonos and oxia codepoints of the acute.

Tables are spelled with escapes: several pairs are visually identical and
editors tend to normalize them away.
"""

from __future__ import annotations

from grc_preprocess._errors import NoGreekContent
from grc_preprocess._unicode import is_greek, to_nfc

__all__ = [
    "grave_to_acute",
    "acute_to_grave",
    "tonos_to_oxia",
    "oxia_to_tonos",
    "GRAVE_CHARS",
    "ACUTE_CHARS",
    "TONOS_CHARS",
    "OXIA_CHARS",
]

# Grave vowels and their acute counterparts, position by position. The acute
# side uses the tonos codepoint wherever NFC would produce it.
GRAVE_CHARS = (
    "\u1f02\u1f82\u1f03\u1f83\u1f70\u1fb2"  # alpha
    "\u1f12\u1f13\u1f72"  # epsilon
    "\u1f22\u1f92\u1f23\u1f93\u1f74\u1fc2"  # eta
    "\u1f32\u1f33\u1f76\u1fd2"  # iota
    "\u1f42\u1f43\u1f78"  # omicron
    "\u1f52\u1f53\u1f7a\u1fe2"  # upsilon
    "\u1f62\u1fa2\u1f63\u1fa3\u1f7c\u1ff2"  # omega
)
ACUTE_CHARS = (
    "\u1f04\u1f84\u1f05\u1f85\u03ac\u1fb4"
    "\u1f14\u1f15\u03ad"
    "\u1f24\u1f94\u1f25\u1f95\u03ae\u1fc4"
    "\u1f34\u1f35\u03af\u0390"
    "\u1f44\u1f45\u03cc"
    "\u1f54\u1f55\u03cd\u03b0"
    "\u1f64\u1fa4\u1f65\u1fa5\u03ce\u1ff4"
)

# Tonos letters and the Greek Extended oxia letters at the same positions.
# Each oxia letter is a singleton canonical decomposition of its tonos
# letter, so NFC folds oxia back into tonos.
TONOS_CHARS = (
    "\u03ac\u0386\u03ad\u0388\u03ae\u0389\u03af\u038a"
    "\u0390\u03cc\u038c\u03cd\u038e\u03b0\u03ce\u038f"
)
OXIA_CHARS = (
    "\u1f71\u1fbb\u1f73\u1fc9\u1f75\u1fcb\u1f77\u1fdb"
    "\u1fd3\u1f79\u1ff9\u1f7b\u1feb\u1fe3\u1f7d\u1ffb"
)

_GRAVE_TO_ACUTE = str.maketrans(GRAVE_CHARS, ACUTE_CHARS)
_ACUTE_TO_GRAVE = str.maketrans(ACUTE_CHARS, GRAVE_CHARS)

_TONOS_TO_OXIA = str.maketrans(TONOS_CHARS, OXIA_CHARS)
_OXIA_TO_TONOS = str.maketrans(OXIA_CHARS, TONOS_CHARS)


def _require_greek(text: str) -> None:
    if not is_greek(text):
        raise NoGreekContent(text)


def grave_to_acute(text: str) -> str:
    """
    Replace grave accents with acute accents.

    Example:
        >>> grave_to_acute("καὶ γὰρ")
        'καί γάρ'
    """
    _require_greek(text)
    return to_nfc(text).translate(_GRAVE_TO_ACUTE)


def acute_to_grave(text: str) -> str:
    """
    Replace acute accents with grave accents.

    Example:
        >>> acute_to_grave("ά")
        'ὰ'
    """
    _require_greek(text)
    return to_nfc(text).translate(_ACUTE_TO_GRAVE)


def tonos_to_oxia(text: str) -> str:
    """
    Replace tonos letters with their oxia codepoints.

    The result is not renormalized: any NFC pass turns the
    oxia letters back into tonos, so ``to_nfc(tonos_to_oxia(s)) == to_nfc(s)``.
    """
    _require_greek(text)
    return to_nfc(text).translate(_TONOS_TO_OXIA)


def oxia_to_tonos(text: str) -> str:
    """
    Replace oxia letters with their tonos codepoints.

    Equivalent to NFC for these letters; the table makes the intent explicit.
    """
    _require_greek(text)
    return to_nfc(text.translate(_OXIA_TO_TONOS))
