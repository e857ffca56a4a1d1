"""Exceptions raised by grc-preprocess."""

from __future__ import annotations

__all__ = ["NoGreekContent"]


class NoGreekContent(ValueError):
    """Raised when an operation that needs Greek input gets none.

    Diacritic stripping, accent conversion and transliteration all refuse
    text without a single Greek-script codepoint rather than returning it
    unchanged.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            "String does not contain any Greek. Summon the muse and try again."
        )
