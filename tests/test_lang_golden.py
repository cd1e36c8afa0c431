"""
Expected guesses for real surnames against the bundled rule tables.

These pin the behaviour of the shipped rules so that edits to the rule data or to
the narrowing walk show up as explicit diffs. Words are given as callers pass them
(mixed case); the guesser lowercases them before matching.

Notable cases:
- Ashkenazi "vogel" and "גולדברג" hit rules whose language tag is malformed
  ("german," and "ebrew"); the candidate set empties and the guess is ANY
- Hebrew, Arabic, Cyrillic and Greek script each pin down one language in the
  generic table
"""

import sys
from pathlib import Path
from typing import List, Tuple

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from namelang.lang import LanguageGuesser, build_registry
from namelang.languages import ANY, ANY_LANGUAGE, LanguageSet, NameType

GENERIC_CASES: List[Tuple[str, Tuple[str, ...]]] = [
    ("Schwarzenegger", ("german",)),
    ("Kowalczyk", ("polish",)),
    ("Smith", ("english", "german")),
    ("Brown", ("dutch", "english", "german", "italian", "latvian", "polish", "portuguese")),
    ("O'Brien", ("english",)),
    ("McDonald", ("english",)),
    ("Fitzgerald", ("english",)),
    ("Nagy", ("hungarian",)),
    ("Papadopoulos", ("greeklatin",)),
    ("Müller", ("german", "hungarian", "portuguese", "spanish", "turkish")),
    ("Dvořák", ("czech",)),
    ("Yılmaz", ("turkish",)),
    ("Иванов", ("cyrillic",)),
    ("Αλεξανδρος", ("greek",)),
    ("כהן", ("hebrew",)),
    ("محمد", ("arabic",)),
]

ASHKENAZI_CASES: List[Tuple[str, Tuple[str, ...]]] = [
    ("Schwartz", ("german",)),
    ("Goldstein", ("german",)),
    ("Horowitz", ("german",)),
    ("Zhukov", ("english", "german", "russian")),
    ("Kaplan", ("english", "french", "german", "hungarian", "polish", "russian", "spanish")),
    ("Vogel", ()),
    ("גולדברג", ()),
]

SEPHARDIC_CASES: List[Tuple[str, Tuple[str, ...]]] = [
    ("Garcia", ("french", "italian", "portuguese", "spanish")),
    ("Abravanel", ("french", "italian", "portuguese", "spanish")),
    ("כהן", ("hebrew",)),
]

ALL_CASES = (
    [(NameType.GENERIC, word, expected) for word, expected in GENERIC_CASES]
    + [(NameType.ASHKENAZI, word, expected) for word, expected in ASHKENAZI_CASES]
    + [(NameType.SEPHARDIC, word, expected) for word, expected in SEPHARDIC_CASES]
)


@pytest.fixture(scope="session")
def guesser():
    """One guesser over the bundled registry for the whole session."""
    return LanguageGuesser(build_registry())


def test_bundled_tables_with_expected_results(guesser):
    """Every case yields exactly its expected candidate set."""
    failures = []

    for name_type, word, expected in ALL_CASES:
        expected_set = LanguageSet.from_set(expected) if expected else ANY_LANGUAGE
        result = guesser.guess_languages(word, name_type)
        if result != expected_set:
            failures.append(f"{name_type.value} '{word}': expected {expected_set!r}, got {result!r}")

    assert not failures, f"{len(failures)} of {len(ALL_CASES)} guesses changed:\n" + "\n".join(failures)


def test_single_language_guesses(guesser):
    for name_type, word, expected in ALL_CASES:
        language = guesser.guess_language(word, name_type)
        if len(expected) == 1:
            assert language == expected[0], f"{name_type.value} '{word}'"
        else:
            assert language == ANY, f"{name_type.value} '{word}'"
