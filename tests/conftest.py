"""Shared fixtures for the decompounder tests."""

from pathlib import Path

import pytest

from decompounder.filter import Decompounder
from decompounder.lexicon import Lexicon
from decompounder.segmenter import DictionarySegmenter

GERMAN_WORDS = [
    "Jahr",
    "feier",
    "Recht",
    "anwalt",
    "kanzlei",
    "Donau",
    "dampf",
    "schiff",
    "Ökosteuer",
    "gekosten",
    "Schlüssel",
    "wort",
    "Bindestrich",
    "Da",
]

README_SENTENCE = (
    "Die Jahresfeier der Rechtsanwaltskanzleien auf dem Donaudampfschiff "
    "hat viel Ökosteuer gekostet"
)


@pytest.fixture
def lexicon() -> Lexicon:
    return Lexicon(GERMAN_WORDS)


@pytest.fixture
def segmenter(lexicon) -> DictionarySegmenter:
    return DictionarySegmenter(lexicon)


@pytest.fixture
def decompounder(segmenter) -> Decompounder:
    return Decompounder(segmenter)


@pytest.fixture
def dictionary_file(tmp_path) -> Path:
    """Write the test vocabulary to a word list file."""
    path = tmp_path / "words.txt"
    lines = ["# test vocabulary", ""] + GERMAN_WORDS
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
