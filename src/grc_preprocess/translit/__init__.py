"""
Transliteration submodule.

Re-exports the rule engine.
"""

from grc_preprocess.translit._rules import (
    CONTEXTUAL_RULES,
    LATIN_MAP,
    ROUGH_BREATHING_VOWELS,
    TokenTransliteration,
    TransliterationResult,
    Transliterator,
    transliterate,
)

__all__ = [
    "CONTEXTUAL_RULES",
    "LATIN_MAP",
    "ROUGH_BREATHING_VOWELS",
    "TokenTransliteration",
    "TransliterationResult",
    "Transliterator",
    "transliterate",
]
