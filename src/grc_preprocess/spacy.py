"""
spaCy integration for grc-preprocess.

Provides pipeline components for diacritic stripping and transliteration.

Example:
    >>> import spacy
    >>> import grc_preprocess.spacy
    >>> nlp = spacy.blank("grc")
    >>> nlp.add_pipe("grc_transliterator")
    >>> doc = nlp("ὁ λόγος")
    >>> doc._.transliterated
    'ho logos'
"""

import logging
from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from grc_preprocess._unicode import is_greek
from grc_preprocess.diacritics._charset import CaseScope, strip_diacritics
from grc_preprocess.translit._rules import Transliterator

__all__ = [
    "GreekPreprocessorComponent",
    "TransliteratorComponent",
    "create_greek_preprocessor",
    "create_transliterator",
    "get_transliterator_pipe",
]

logger = logging.getLogger(__name__)


def _register_extensions(*names: str) -> None:
    """Register Doc and Token extensions that are not registered yet."""
    for name in names:
        if not Doc.has_extension(name):
            Doc.set_extension(name, default=None)
        if not Token.has_extension(name):
            Token.set_extension(name, default=None)


# =============================================================================
# Unified Greek Preprocessor Component
# =============================================================================


@Language.factory(
    "grc_preprocessor",
    default_config={"strip": True, "transliterate": True, "scope": "both"},
    assigns=[
        "doc._.stripped",
        "doc._.transliterated",
        "token._.stripped",
        "token._.transliterated",
    ],
)
def create_greek_preprocessor(
    nlp: Language,
    name: str,
    strip: bool = True,
    transliterate: bool = True,
    scope: str = "both",
) -> "GreekPreprocessorComponent":
    """Create a unified Greek preprocessor pipeline component.

    Strips diacritics and transliterates, each of which can be disabled via
    config.
    """
    return GreekPreprocessorComponent(
        nlp, name, strip=strip, transliterate=transliterate, scope=scope
    )


class GreekPreprocessorComponent:
    """Unified spaCy pipeline component for Greek text preprocessing.

    Text without Greek is copied to the extensions unchanged instead of
    raising, so mixed-language documents pass through the pipeline.

    Extensions:
        - Doc._.stripped: Text with diacritics removed (None if strip=False).
        - Doc._.transliterated: Latin transliteration (None if
          transliterate=False).
        - Token._.stripped: Stripped token text.
        - Token._.transliterated: Transliterated token text.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        strip: bool = True,
        transliterate: bool = True,
        scope: str = "both",
    ) -> None:
        self.name = name
        self.strip = strip
        self.transliterate = transliterate
        self.scope = CaseScope(scope)

        self._transliterator = Transliterator() if transliterate else None

        _register_extensions("stripped", "transliterated")
        logger.debug(
            "created %s (strip=%s, transliterate=%s, scope=%s)",
            name, strip, transliterate, self.scope.value,
        )

    def _strip(self, text: str) -> str:
        if not is_greek(text):
            return text
        return strip_diacritics(text, self.scope)

    def _transliterate(self, text: str) -> str:
        if not is_greek(text):
            return text
        return self._transliterator.transliterate(text)

    def __call__(self, doc: Doc) -> Doc:
        if self.strip:
            doc._.stripped = self._strip(doc.text)
        if self._transliterator is not None:
            doc._.transliterated = self._transliterate(doc.text)

        for token in doc:
            if self.strip:
                token._.stripped = self._strip(token.text)
            if self._transliterator is not None:
                token._.transliterated = self._transliterator.transliterate_token(
                    token.text
                ).output

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "GreekPreprocessorComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "GreekPreprocessorComponent":
        return self


# =============================================================================
# Transliterator Component
# =============================================================================


@Language.factory(
    "grc_transliterator",
    default_config={"rough_breathing": True, "contextual": True},
    assigns=["doc._.transliterated", "token._.transliterated"],
)
def create_transliterator(
    nlp: Language,
    name: str,
    rough_breathing: bool = True,
    contextual: bool = True,
) -> "TransliteratorComponent":
    """Create a transliterator pipeline component."""
    return TransliteratorComponent(
        nlp, name, rough_breathing=rough_breathing, contextual=contextual
    )


class TransliteratorComponent:
    """
    spaCy pipeline component for Greek to Latin transliteration.

    Extensions:
        - Doc._.transliterated: Transliterated text (the original text if it
          has no Greek).
        - Token._.transliterated: Transliterated token text.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        rough_breathing: bool = True,
        contextual: bool = True,
    ) -> None:
        self.name = name
        self._transliterator = Transliterator(
            rough_breathing=rough_breathing, contextual=contextual
        )

        _register_extensions("transliterated")

    def __call__(self, doc: Doc) -> Doc:
        if is_greek(doc.text):
            doc._.transliterated = self._transliterator.transliterate(doc.text)
        else:
            doc._.transliterated = doc.text

        for token in doc:
            token._.transliterated = self._transliterator.transliterate_token(
                token.text
            ).output

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "TransliteratorComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "TransliteratorComponent":
        return self


# =============================================================================
# Utility Functions
# =============================================================================


def get_transliterator_pipe(nlp: Language) -> Optional[TransliteratorComponent]:
    """Get the transliterator component from a pipeline."""
    if "grc_transliterator" in nlp.pipe_names:
        return nlp.get_pipe("grc_transliterator")
    return None
