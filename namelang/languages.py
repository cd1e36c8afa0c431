"""
Language tags, candidate language sets and per-name-type vocabularies.

A ``LanguageSet`` has exactly one of three shapes:

- ``NO_LANGUAGES``: every candidate was eliminated
- ``ANY_LANGUAGE``: unknown or ambiguous
- ``SomeLanguages``: a concrete, non-empty set of tags

All three are immutable values and compare structurally, so they can be shared
freely between threads.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional, Union

from namelang.config import LangConfig
from namelang.text_resources import iter_logical_lines, read_resource_lines

# Returned by guess_language() when no single language can be picked.
# Never a member of any vocabulary.
ANY = "any"


class NameType(Enum):
    """Naming conventions with their own vocabulary and rule table."""

    ASHKENAZI = "ash"
    GENERIC = "gen"
    SEPHARDIC = "sep"


# ════════════════════════════════════════════════════════════════════════════════
# LANGUAGE SETS
# ════════════════════════════════════════════════════════════════════════════════


class LanguageSet(ABC):
    """Candidate languages of a word."""

    __slots__ = ()

    @staticmethod
    def from_set(languages: Iterable[str]) -> "LanguageSet":
        """``SomeLanguages`` for a non-empty input, ``NO_LANGUAGES`` otherwise."""
        members = frozenset(languages)
        if not members:
            return NO_LANGUAGES
        return SomeLanguages(members)

    def is_singleton(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return False

    @abstractmethod
    def contains(self, language: str) -> bool:
        ...

    def get_any(self) -> str:
        """The sole member of a singleton set."""
        raise ValueError(f"{self!r} does not hold exactly one language")

    @abstractmethod
    def restrict_to(self, other: "LanguageSet") -> "LanguageSet":
        """Intersection; ANY_LANGUAGE is the identity."""

    @abstractmethod
    def merge(self, other: "LanguageSet") -> "LanguageSet":
        """Union; ANY_LANGUAGE absorbs."""

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        """Members in sorted order."""


class _NoLanguages(LanguageSet):
    __slots__ = ()

    def is_empty(self) -> bool:
        return True

    def contains(self, language: str) -> bool:
        return False

    def restrict_to(self, other: LanguageSet) -> LanguageSet:
        return self

    def merge(self, other: LanguageSet) -> LanguageSet:
        return other

    def __iter__(self) -> Iterator[str]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _NoLanguages)

    def __hash__(self) -> int:
        return hash("NO_LANGUAGES")

    def __repr__(self) -> str:
        return "NO_LANGUAGES"


class _AnyLanguage(LanguageSet):
    __slots__ = ()

    def contains(self, language: str) -> bool:
        return True

    def restrict_to(self, other: LanguageSet) -> LanguageSet:
        return other

    def merge(self, other: LanguageSet) -> LanguageSet:
        return self

    def __iter__(self) -> Iterator[str]:
        raise TypeError("ANY_LANGUAGE stands for an open set and cannot be enumerated")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _AnyLanguage)

    def __hash__(self) -> int:
        return hash("ANY_LANGUAGE")

    def __repr__(self) -> str:
        return "ANY_LANGUAGE"


NO_LANGUAGES: LanguageSet = _NoLanguages()
ANY_LANGUAGE: LanguageSet = _AnyLanguage()


@dataclass(frozen=True)
class SomeLanguages(LanguageSet):
    """A concrete, non-empty set of language tags."""

    languages: FrozenSet[str]

    def __post_init__(self):
        if not isinstance(self.languages, frozenset):
            object.__setattr__(self, "languages", frozenset(self.languages))
        if not self.languages:
            raise ValueError("SomeLanguages requires at least one language, use NO_LANGUAGES instead")

    def is_singleton(self) -> bool:
        return len(self.languages) == 1

    def contains(self, language: str) -> bool:
        return language in self.languages

    def get_any(self) -> str:
        if len(self.languages) != 1:
            raise ValueError(f"{self!r} does not hold exactly one language")
        return next(iter(self.languages))

    def restrict_to(self, other: LanguageSet) -> LanguageSet:
        if isinstance(other, _AnyLanguage):
            return self
        if isinstance(other, SomeLanguages):
            return LanguageSet.from_set(self.languages & other.languages)
        return NO_LANGUAGES

    def merge(self, other: LanguageSet) -> LanguageSet:
        if isinstance(other, _AnyLanguage):
            return ANY_LANGUAGE
        if isinstance(other, SomeLanguages):
            return SomeLanguages(self.languages | other.languages)
        return self

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.languages))

    def __len__(self) -> int:
        return len(self.languages)

    def __repr__(self) -> str:
        return f"SomeLanguages({sorted(self.languages)})"


# ════════════════════════════════════════════════════════════════════════════════
# VOCABULARIES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Languages:
    """The full candidate set a guess starts from."""

    languages: FrozenSet[str]

    @classmethod
    def get_instance(cls, name_type: NameType) -> "Languages":
        """Bundled vocabulary for a name type, loaded once per process."""
        return _bundled_vocabulary(name_type)

    @classmethod
    def load_from_resource(
        cls, resource_id: Union[str, Path], config: Optional[LangConfig] = None
    ) -> "Languages":
        """
        Load a vocabulary file: one language per line, ``//`` and ``/* */`` comments allowed.

        Raises:
            ResourceNotFoundError: if the resource cannot be located.
        """
        config = config or LangConfig.create_default()
        raw_lines = read_resource_lines(resource_id, config)
        languages = {line for _, _, line in iter_logical_lines(raw_lines, config)}

        if ANY in languages:
            logging.warning(f"Vocabulary resource '{resource_id}' lists '{ANY}', which is reserved and dropped")
            languages.discard(ANY)

        logging.debug(f"Loaded {len(languages)} languages from '{resource_id}'")
        return cls(frozenset(languages))

    def __contains__(self, language: object) -> bool:
        return language in self.languages

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.languages))

    def __len__(self) -> int:
        return len(self.languages)


@lru_cache(maxsize=None)
def _bundled_vocabulary(name_type: NameType) -> Languages:
    config = LangConfig.create_default()
    return Languages.load_from_resource(config.languages_resource_name(name_type.value), config)
