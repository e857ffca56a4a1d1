"""
Accent conversion submodule.

Basic usage:
    >>> from grc_preprocess.accents import acute_to_grave, grave_to_acute
    >>> grave_to_acute("ὰ")
    'ά'
    >>> acute_to_grave("ά")
    'ὰ'
"""

from grc_preprocess.accents._tables import (
    ACUTE_CHARS,
    GRAVE_CHARS,
    OXIA_CHARS,
    TONOS_CHARS,
    acute_to_grave,
    grave_to_acute,
    oxia_to_tonos,
    tonos_to_oxia,
)

__all__ = [
    "ACUTE_CHARS",
    "GRAVE_CHARS",
    "OXIA_CHARS",
    "TONOS_CHARS",
    "acute_to_grave",
    "grave_to_acute",
    "oxia_to_tonos",
    "tonos_to_oxia",
]
