"""Tests for Greek-aware tokenization."""

import pytest

from grc_preprocess import tokenize
from grc_preprocess._tokenize import is_punctuation


class TestTokenize:
    def test_elision_and_ano_teleia(self):
        assert tokenize("σημεῖον δ᾽ ἡ τῶν αἰσθήσεων ἀγάπησις· καὶ γὰρ") == [
            "σημεῖον", "δ", "᾽", "ἡ", "τῶν", "αἰσθήσεων", "ἀγάπησις", "·", "καὶ", "γὰρ",
        ]

    def test_full_passage(self, aristotle):
        tokens = tokenize(aristotle)
        assert tokens[:6] == ["Πάντες", "ἄνθρωποι", "τοῦ", "εἰδέναι", "ὀρέγονται", "φύσει"]
        assert tokens[6] == "."
        assert tokens[-3:] == ["δι", "᾽", "αὑτάς"]

    def test_no_empty_tokens(self, aristotle):
        assert all(tokens for tokens in tokenize(aristotle))

    def test_empty_string(self):
        assert tokenize("") == []

    def test_whitespace_only(self):
        assert tokenize("  \n\t ") == []

    def test_punctuation_sequence(self):
        assert tokenize("τί;;") == ["τί", ";", ";"]

    def test_leading_punctuation(self):
        assert tokenize("«λόγος»") == ["«", "λόγος", "»"]

    def test_greek_question_mark(self):
        assert tokenize("τί ἐστιν;") == ["τί", "ἐστιν", ";"]

    def test_hyphen(self):
        assert tokenize("ἀνα-γιγνώσκω") == ["ἀνα", "-", "γιγνώσκω"]

    def test_non_greek_text(self):
        assert tokenize("Arma virumque, cano") == ["Arma", "virumque", ",", "cano"]

    def test_rejoin_reconstructs_input(self, aristotle):
        tokens = tokenize(aristotle)
        assert "".join(tokens) == "".join(aristotle.split())


class TestIsPunctuation:
    @pytest.mark.parametrize("char", [
        ".", ",", ";", "·", "·", "‧", "⸱", "\U00010101", ";", "᾽", "ʼ", "—", "«",
    ])
    def test_punctuation(self, char):
        assert is_punctuation(char)

    @pytest.mark.parametrize("char", ["α", "ά", "a", " ", "1", "̓"])
    def test_not_punctuation(self, char):
        assert not is_punctuation(char)
