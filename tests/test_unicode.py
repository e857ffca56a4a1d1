"""Tests for script detection, normalization and inspection helpers."""

import pytest

from grc_preprocess import (
    is_greek,
    to_nfc,
    to_nfd,
    unicode_dump,
    unicode_names,
    unicode_points,
)


# =============================================================================
# is_greek
# =============================================================================


class TestIsGreek:
    def test_single_letter(self):
        assert is_greek("α") is True

    def test_latin_letter(self):
        assert is_greek("a") is False

    def test_non_greek(self, non_greek):
        assert is_greek(non_greek) is False

    def test_polytonic(self):
        assert is_greek("ᾄ") is True

    def test_decomposed(self):
        assert is_greek("ἄ") is True

    def test_mixed_script(self):
        assert is_greek("logos λόγος") is True

    def test_bare_combining_marks(self):
        # Combining marks are script-neutral
        assert is_greek("́̓ͅ") is False

    def test_coptic_letters_are_not_greek(self):
        assert is_greek("Ϣϣ") is False

    def test_greek_extended_punctuation(self):
        assert is_greek("᾽") is True

    def test_ohm_sign(self):
        assert is_greek("Ω") is True

    def test_common_script_signs(self):
        # Greek question mark and ano teleia are Common script
        assert is_greek(";·") is False


# =============================================================================
# Normalization
# =============================================================================


class TestNormalization:
    def test_nfc_composes(self):
        assert to_nfc("ᾄ") == "ᾄ"

    def test_nfd_decomposes(self):
        assert to_nfd("ᾄ") == "ᾄ"

    def test_nfc_is_stable(self):
        assert to_nfc("ᾄ") == "ᾄ"

    def test_oxia_folds_to_tonos(self):
        assert to_nfc("ά") == "ά"

    @pytest.mark.parametrize("text", [
        "ἄνθρωπος", "ᾌ", "τῷ λόγῳ", "Ἀθῆναι", "προϊέναι", "άΆ",
    ])
    def test_round_trip(self, text):
        assert to_nfc(to_nfd(text)) == to_nfc(text)


# =============================================================================
# Inspection helpers
# =============================================================================


class TestInspection:
    def test_unicode_points(self):
        assert unicode_points("α") == ["\\u03B1"]

    def test_unicode_points_decomposed(self):
        assert unicode_points(to_nfd("ἄ")) == ["\\u03B1", "\\u0313", "\\u0301"]

    def test_unicode_dump(self):
        assert unicode_dump("λόγος") == {
            "λ": "\\u03BB",
            "ό": "\\u03CC",
            "γ": "\\u03B3",
            "ο": "\\u03BF",
            "ς": "\\u03C2",
        }

    def test_unicode_dump_repeated_characters(self):
        dump = unicode_dump("ααβ")
        assert list(dump) == ["α", "β"]

    def test_unicode_dump_agrees_with_points(self, aristotle):
        dump = unicode_dump(aristotle)
        assert [dump[ch] for ch in aristotle] == unicode_points(aristotle)

    def test_unicode_names(self):
        assert unicode_names("α") == ["GREEK SMALL LETTER ALPHA"]

    def test_unicode_names_precomposed(self):
        assert unicode_names("ᾄ") == [
            "GREEK SMALL LETTER ALPHA WITH PSILI AND OXIA AND YPOGEGRAMMENI"
        ]

    def test_unicode_names_empty(self):
        assert unicode_names("") == []
