"""Tests for Greek-aware case conversion."""

import pytest

from grc_preprocess import grc_downcase, grc_upcase, to_nfd
from grc_preprocess._case import IOTA_SUBSCRIPT_CAPITALS


class TestUpcase:
    def test_iota_subscript_preserved(self):
        assert grc_upcase("ᾄ") == "ᾌ"

    def test_generic_upper_drops_subscript(self):
        # The reason the table exists
        assert "ᾄ".upper() == "ἌΙ"

    def test_table_size(self):
        assert len(IOTA_SUBSCRIPT_CAPITALS) == 27

    @pytest.mark.parametrize("lower, upper", list(IOTA_SUBSCRIPT_CAPITALS.items()))
    def test_every_entry(self, lower, upper):
        assert grc_upcase(lower) == upper

    def test_plain_greek(self):
        assert grc_upcase("λόγος") == "ΛΌΓΟΣ"

    def test_word_with_subscript(self):
        assert grc_upcase("λόγῳ") == "ΛΌΓῼ"

    def test_non_greek_untouched(self):
        assert grc_upcase("logos λόγος") == "logos ΛΌΓΟΣ"

    def test_no_greek_content_allowed(self):
        assert grc_upcase("hello") == "hello"

    def test_decomposed_input(self):
        assert grc_upcase(to_nfd("ᾄ")) == "ᾌ"

    def test_capitals_kept(self):
        assert grc_upcase("ᾼ ᾌ") == "ᾼ ᾌ"

    def test_idempotent(self):
        once = grc_upcase("ᾄνθρωπος τῷ")
        assert grc_upcase(once) == once


class TestDowncase:
    def test_capital_with_prosgegrammeni(self):
        assert grc_downcase("ᾌ") == "ᾄ"

    def test_final_sigma(self):
        assert grc_downcase("ΛΟΓΟΣ") == "λογος"

    def test_marks_kept(self):
        assert grc_downcase("Ἀθῆναι") == "ἀθῆναι"

    def test_round_trip_through_upcase(self):
        assert grc_downcase(grc_upcase("ᾄ")) == "ᾄ"
