"""
Case conversion for polytonic Greek.

``str.upper()`` applies the full Unicode case mapping, which turns a letter
with iota subscript into a capital plus a separate ``Ι`` ("ᾄ" -> "ἌΙ"). The
precomposed capitals with prosgegrammeni keep the letter intact.
See pages 1-7 of http://www.tlg.uci.edu/encoding/precomposed.pdf
"""

from __future__ import annotations

from grc_preprocess._unicode import is_greek, to_nfc, to_nfd

__all__ = ["grc_upcase", "grc_downcase", "IOTA_SUBSCRIPT_CAPITALS"]

# Alpha, eta and omega with ypogegrammeni (every breathing/accent combination
# that has a capital) and their capitals with prosgegrammeni.
_SUBSCRIPT_LOWER = (
    "\u1f80\u1f81\u1f82\u1f83\u1f84\u1f85\u1f86\u1f87"
    "\u1f90\u1f91\u1f92\u1f93\u1f94\u1f95\u1f96\u1f97"
    "\u1fa0\u1fa1\u1fa2\u1fa3\u1fa4\u1fa5\u1fa6\u1fa7"
    "\u1fb3\u1fc3\u1ff3"
)
_SUBSCRIPT_UPPER = (
    "\u1f88\u1f89\u1f8a\u1f8b\u1f8c\u1f8d\u1f8e\u1f8f"
    "\u1f98\u1f99\u1f9a\u1f9b\u1f9c\u1f9d\u1f9e\u1f9f"
    "\u1fa8\u1fa9\u1faa\u1fab\u1fac\u1fad\u1fae\u1faf"
    "\u1fbc\u1fcc\u1ffc"
)

IOTA_SUBSCRIPT_CAPITALS = dict(zip(_SUBSCRIPT_LOWER, _SUBSCRIPT_UPPER))

_CAPITALS = frozenset(_SUBSCRIPT_UPPER)


def grc_upcase(text: str) -> str:
    """
    Uppercase Greek text without losing iota subscripts.

    Non-Greek characters pass through unchanged.

    Example:
        >>> grc_upcase("ᾄ")
        'ᾌ'
        >>> grc_upcase("λόγῳ")
        'ΛΌΓῼ'
    """
    result = []
    for ch in to_nfc(text):
        if ch in IOTA_SUBSCRIPT_CAPITALS:
            result.append(IOTA_SUBSCRIPT_CAPITALS[ch])
        elif ch in _CAPITALS or not is_greek(ch):
            result.append(ch)
        else:
            result.append(ch.upper())
    return to_nfc("".join(result))


def grc_downcase(text: str) -> str:
    """
    Lowercase Greek text, resolving confusable precomposed forms.

    Lowercasing the decomposed form and recomposing keeps every mark.
    See https://www.w3.org/TR/charmod-norm/#PreNormalization

    Example:
        >>> grc_downcase("ᾌΝΘΡΩΠΟΣ")
        'ᾄνθρωπος'
    """
    return to_nfc(to_nfd(text).lower())
