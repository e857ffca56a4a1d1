"""
Diacritics utilities submodule.

Provides case-scoped diacritic stripping for polytonic Greek.

Basic usage:
    >>> from grc_preprocess.diacritics import strip_diacritics
    >>> strip_diacritics("ἄνθρωπος")
    'ανθρωπος'

    >>> from grc_preprocess.diacritics import CaseScope
    >>> strip_diacritics("Ἀθῆναι", CaseScope.UPPER)
    'Αθῆναι'

    >>> from grc_preprocess.diacritics import base_char
    >>> base_char("ἄ")
    'α'
"""

from grc_preprocess.diacritics._charset import (
    CAPITAL_FIXUPS,
    GREEK_VOWELS,
    CaseScope,
    base_char,
    strip_diacritics,
)

__all__ = [
    "CAPITAL_FIXUPS",
    "GREEK_VOWELS",
    "CaseScope",
    "base_char",
    "strip_diacritics",
]
