"""
grc-preprocess: Ancient Greek text preprocessing.

Script detection, Unicode normalization, diacritic stripping, accent and
case conversion, tokenization and Latin transliteration for polytonic Greek.

Basic usage:
    >>> from grc_preprocess import transliterate
    >>> transliterate("ἄνθρωπος")
    'anthrōpos'

Per-module usage:
    >>> from grc_preprocess.diacritics import CaseScope, strip_diacritics
    >>> strip_diacritics("ἄἈ", CaseScope.LOWER)
    'αἈ'

    >>> from grc_preprocess.translit import Transliterator
    >>> Transliterator().transliterate_detailed("ὁ λόγος").tokens[0]
    TokenTransliteration(source='ὁ', output='ho', rough_breathing=True, rules=())
"""

from grc_preprocess._errors import NoGreekContent
from grc_preprocess._unicode import (
    is_greek,
    to_nfc,
    to_nfd,
    unicode_dump,
    unicode_names,
    unicode_points,
)
from grc_preprocess._case import grc_downcase, grc_upcase
from grc_preprocess._tokenize import tokenize
from grc_preprocess.diacritics import CaseScope, base_char, strip_diacritics
from grc_preprocess.accents import (
    acute_to_grave,
    grave_to_acute,
    oxia_to_tonos,
    tonos_to_oxia,
)
from grc_preprocess.translit import (
    TokenTransliteration,
    TransliterationResult,
    Transliterator,
    transliterate,
)

__version__ = "0.1.0"
__all__ = [
    "NoGreekContent",
    "is_greek",
    "to_nfc",
    "to_nfd",
    "unicode_dump",
    "unicode_names",
    "unicode_points",
    "grc_downcase",
    "grc_upcase",
    "tokenize",
    "CaseScope",
    "base_char",
    "strip_diacritics",
    "acute_to_grave",
    "grave_to_acute",
    "oxia_to_tonos",
    "tonos_to_oxia",
    "TokenTransliteration",
    "TransliterationResult",
    "Transliterator",
    "transliterate",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name in ("GreekPreprocessorComponent", "TransliteratorComponent"):
        try:
            from grc_preprocess import spacy as _spacy
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install grc-preprocess[spacy]"
            )
        return getattr(_spacy, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
