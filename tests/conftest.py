"""Shared fixtures for grc-preprocess tests."""

import pytest

from grc_preprocess.translit import Transliterator

# Metaphysics 980a21-27
ARISTOTLE = (
    "Πάντες ἄνθρωποι τοῦ εἰδέναι ὀρέγονται φύσει. σημεῖον δ᾽ ἡ τῶν "
    "αἰσθήσεων ἀγάπησις· καὶ γὰρ χωρὶς τῆς χρείας ἀγαπῶνται δι᾽ αὑτάς"
)


@pytest.fixture
def transliterator() -> Transliterator:
    """Return a fresh transliterator instance."""
    return Transliterator()


@pytest.fixture
def aristotle() -> str:
    """Return the opening of the Metaphysics."""
    return ARISTOTLE


@pytest.fixture(params=["hello", "123", "Caesar in Galliam contendit", "", "é́"])
def non_greek(request) -> str:
    """Strings without a single Greek-script codepoint."""
    return request.param
