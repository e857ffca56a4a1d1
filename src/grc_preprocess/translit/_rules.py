"""
Rule-based Greek to Latin transliteration.

Each token goes through a fixed pipeline:

1. Non-Greek tokens pass through untouched.
2. A rough breathing on the vowels that open the token marks it for an
   ``h`` prefix.
3. ``ῥ`` becomes ``rh``; every other diacritic is stripped.
4. Letters are mapped one by one to lowercase Latin.
5. Contextual rules rewrite the Latin string (gamma nasal, rho gemination,
   upsilon diphthongs).

Contextual rules run on the Latin output, never on Greek: ``γγ`` is only
recognizable as ``gg`` once the accents are gone.

Example:
    >>> from grc_preprocess.translit import transliterate
    >>> transliterate("ἄγγελος")
    'angelos'

    >>> from grc_preprocess.translit import Transliterator
    >>> result = Transliterator().transliterate_detailed("υἱός")
    >>> result.tokens[0].rules
    ('diphthong_yi',)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from grc_preprocess._errors import NoGreekContent
from grc_preprocess._tokenize import tokenize
from grc_preprocess._unicode import is_greek, to_nfc
from grc_preprocess.diacritics import GREEK_VOWELS, CaseScope, base_char, strip_diacritics

__all__ = [
    "Transliterator",
    "TransliterationResult",
    "TokenTransliteration",
    "transliterate",
    "LATIN_MAP",
    "CONTEXTUAL_RULES",
    "ROUGH_BREATHING_VOWELS",
]

logger = logging.getLogger(__name__)

# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class TokenTransliteration:
    """Record of a single token's transliteration."""

    source: str
    output: str
    rough_breathing: bool = False
    rules: tuple[str, ...] = ()


@dataclass
class TransliterationResult:
    """Detailed result from transliteration."""

    original: str
    transliterated: str
    tokens: list[TokenTransliteration] = field(default_factory=list)


# =============================================================================
# Tables
# =============================================================================

LATIN_MAP: dict[str, str] = {
    "α": "a",
    "β": "b",
    "γ": "g",
    "δ": "d",
    "ε": "e",
    "ζ": "z",
    "η": "ē",
    "θ": "th",
    "ι": "i",
    "κ": "k",
    "λ": "l",
    "μ": "m",
    "ν": "n",
    "ξ": "x",
    "ο": "o",
    "π": "p",
    "ρ": "r",
    "ς": "s",
    "σ": "s",
    "τ": "t",
    "υ": "y",
    "φ": "ph",
    "χ": "ch",
    "ψ": "ps",
    "ω": "ō",
}

# Archaic letters, symbol variants and numeral signs have no Latin value and
# are dropped: heta/sampi/digamma (U+0371-U+037D), and the block from kai
# symbol to reversed lunate sigma (U+03CF-U+03FF).
LATIN_MAP.update(dict.fromkeys(map(chr, range(0x0371, 0x037E)), ""))
LATIN_MAP.update(dict.fromkeys(map(chr, range(0x03CF, 0x0400)), ""))

# Vowels with dasia, in any accent and iota subscript combination
ROUGH_BREATHING_VOWELS = frozenset(
    "\u1f01\u1f03\u1f05\u1f07\u1f09\u1f0b\u1f0d\u1f0f"  # alpha
    "\u1f11\u1f13\u1f15\u1f19\u1f1b\u1f1d"  # epsilon
    "\u1f21\u1f23\u1f25\u1f27\u1f29\u1f2b\u1f2d\u1f2f"  # eta
    "\u1f31\u1f33\u1f35\u1f37\u1f39\u1f3b\u1f3d\u1f3f"  # iota
    "\u1f41\u1f43\u1f45\u1f49\u1f4b\u1f4d"  # omicron
    "\u1f51\u1f53\u1f55\u1f57\u1f59\u1f5b\u1f5d\u1f5f"  # upsilon
    "\u1f61\u1f63\u1f65\u1f67\u1f69\u1f6b\u1f6d\u1f6f"  # omega
    "\u1f81\u1f83\u1f85\u1f87\u1f89\u1f8b\u1f8d\u1f8f"  # alpha + iota
    "\u1f91\u1f93\u1f95\u1f97\u1f99\u1f9b\u1f9d\u1f9f"  # eta + iota
    "\u1fa1\u1fa3\u1fa5\u1fa7\u1fa9\u1fab\u1fad\u1faf"  # omega + iota
)

# Rho with dasia keeps its aspiration
_RHO_DASIA = {"\u1fe5": "rh", "\u1fec": "rh"}

# Applied in order, each as one left-to-right pass over the Latin string
CONTEXTUAL_RULES: tuple[tuple[str, re.Pattern[str], str], ...] = (
    ("gamma_nasal_gg", re.compile("gg"), "ng"),
    ("gamma_nasal_gk", re.compile("gk"), "nk"),
    ("gamma_nasal_gx", re.compile("gx"), "nx"),
    ("gamma_nasal_gc", re.compile("gc"), "nc"),
    # ῤῥ already yields "rrh"
    ("rho_gemination", re.compile("rr(?!h)"), "rrh"),
    ("diphthong_ay", re.compile("ay"), "au"),
    ("diphthong_ey", re.compile("ey"), "eu"),
    ("diphthong_ēy", re.compile("ēy"), "ēu"),
    ("diphthong_oy", re.compile("oy"), "ou"),
    ("diphthong_yi", re.compile("yi"), "ui"),
)


# =============================================================================
# Character Helpers
# =============================================================================


def _is_vowel(char: str) -> bool:
    """Check if character is a Greek vowel, with or without diacritics."""
    return base_char(char).lower() in GREEK_VOWELS


def _has_rough_breathing(token: str) -> bool:
    """Check the vowels that open token for a rough breathing."""
    for char in token:
        if not _is_vowel(char):
            break
        if char in ROUGH_BREATHING_VOWELS:
            return True
    return False


def _map_char(char: str) -> str:
    """Map one character to Latin: exact match, then lowercase, then bare form."""
    if char in LATIN_MAP:
        return LATIN_MAP[char]
    lower = char.lower()
    if lower in LATIN_MAP:
        return LATIN_MAP[lower]
    return base_char(char)


# =============================================================================
# Transliterator
# =============================================================================


class Transliterator:
    """
    Token-based Greek to Latin transliterator.

    Args:
        rough_breathing: prefix ``h`` to tokens whose opening vowel group
            carries a rough breathing
        contextual: apply the digraph and diphthong rules

    Example:
        >>> Transliterator().transliterate("ῥήτωρ")
        'rhētōr'
        >>> Transliterator(contextual=False).transliterate("ἄγγελος")
        'aggelos'
    """

    def __init__(self, *, rough_breathing: bool = True, contextual: bool = True) -> None:
        self.rough_breathing = rough_breathing
        self.contextual = contextual

    def transliterate_token(self, token: str) -> TokenTransliteration:
        """
        Transliterate a single token.

        Tokens without Greek are returned as they are. A token with any
        Greek character is treated as Greek throughout.
        """
        if not is_greek(token):
            return TokenTransliteration(source=token, output=token)

        word = to_nfc(token)
        rough = self.rough_breathing and _has_rough_breathing(word)

        for rho, latin in _RHO_DASIA.items():
            word = word.replace(rho, latin)
        if is_greek(word):
            word = strip_diacritics(word, CaseScope.BOTH)

        latin = "".join(_map_char(char) for char in word)

        applied = []
        if self.contextual:
            for name, pattern, replacement in CONTEXTUAL_RULES:
                latin, count = pattern.subn(replacement, latin)
                if count:
                    applied.append(name)

        if rough:
            latin = "h" + latin

        logger.debug("transliterated %r -> %r (rules: %s)", token, latin, applied)
        return TokenTransliteration(
            source=token,
            output=latin,
            rough_breathing=rough,
            rules=tuple(applied),
        )

    def transliterate(self, text: str) -> str:
        """
        Transliterate Greek text to Latin script.

        Args:
            text: Greek text

        Returns:
            Transliterated tokens joined by single spaces

        Raises:
            NoGreekContent: if text contains no Greek
        """
        return self.transliterate_detailed(text).transliterated

    def transliterate_detailed(self, text: str) -> TransliterationResult:
        """
        Transliterate with a record of every token.

        Example:
            >>> result = Transliterator().transliterate_detailed("ὁ λόγος")
            >>> [t.output for t in result.tokens]
            ['ho', 'logos']
            >>> result.tokens[0].rough_breathing
            True
        """
        if not is_greek(text):
            raise NoGreekContent(text)

        tokens = [self.transliterate_token(token) for token in tokenize(text)]
        return TransliterationResult(
            original=text,
            transliterated=" ".join(t.output for t in tokens),
            tokens=tokens,
        )


# =============================================================================
# Module-level Convenience Function
# =============================================================================

# Singleton instance for convenience function
_default_transliterator: Optional[Transliterator] = None


def transliterate(text: str) -> str:
    """
    Transliterate Greek text to Latin script.

    Convenience function that uses a shared transliterator instance.

    Args:
        text: Greek text

    Returns:
        Transliterated text

    Raises:
        NoGreekContent: if text contains no Greek

    Example:
        >>> transliterate("ἄνθρωπος")
        'anthrōpos'
    """
    global _default_transliterator
    if _default_transliterator is None:
        _default_transliterator = Transliterator()
    return _default_transliterator.transliterate(text)
