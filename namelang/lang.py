"""
Language Guessing for Personal Names

This module guesses the probable source language(s) of a name by running an ordered
table of pattern rules over the word and narrowing a candidate set of languages.
The result selects which phonetic transcription rules a downstream matcher applies.

## Overview

Every name type (Ashkenazi, generic, Sephardic) has a vocabulary of candidate
languages and an ordered rule table. Each rule is a triple:

- **pattern**: a regular expression searched anywhere in the lowercased word
- **languages**: the languages the rule is about
- **accept_on_match**: what a match does to the working candidate set

Guessing starts from the full vocabulary and applies every rule, in order:

1. **Accept rule matches**: keep only the rule's languages (intersection)
2. **Reject rule matches**: drop the rule's languages (difference)
3. **No match**: the candidate set is unchanged

There is no early exit. Rules are cumulative constraints, not a decision tree, so an
accept rule can still be followed by further narrowing. A candidate set narrowed to
nothing is reported as ``ANY_LANGUAGE``, never as an empty result.

## Usage Examples

```python
from namelang.lang import build_registry, guess_language, guess_languages
from namelang.languages import NameType

registry = build_registry()
table = registry[NameType.GENERIC]

guess_languages(table, "schwarzenegger")
# Returns: SomeLanguages(['german'])

guess_language(table, "smith")
# Returns: "any" (no single language stands out)

# Convenience wrapper that lowercases the input and picks the table by name type
from namelang.lang import LanguageGuesser

guesser = LanguageGuesser(registry)
guesser.guess_language("Kowalczyk", NameType.GENERIC)
# Returns: "polish"
```

## Rule Resources

Custom tables are written in a line-oriented format, one rule per line:

    <pattern> <lang1>[+<lang2>...] <true|false>

- ``//`` starts an end-of-line comment
- a line starting with ``/*`` opens a block comment, closed by the next line ending in ``*/``
- blank lines are skipped

A line that does not split into exactly three fields raises ``FormatError``.

## Thread Safety

Tables are built once, before any guessing starts, and are never modified
afterwards. Guessing is a pure function of the table and the text and can run from
any number of threads without locking.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from namelang.config import LangConfig
from namelang.errors import FormatError, PatternCompileError
from namelang.lang_rules_data import BUILTIN_RULES
from namelang.languages import ANY, ANY_LANGUAGE, LanguageSet, Languages, NameType, NO_LANGUAGES
from namelang.text_resources import iter_logical_lines, read_resource_lines

Vocabulary = Union[Languages, Iterable[str]]


# ════════════════════════════════════════════════════════════════════════════════
# RULE MODEL
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Rule:
    """One pattern, the languages it concerns, and whether a match accepts or rejects them."""

    pattern: re.Pattern[str]
    languages: FrozenSet[str]
    accept_on_match: bool

    @classmethod
    def compile(
        cls, pattern: str, languages: Iterable[str], accept_on_match: bool, resource_name: str = "<builtin>"
    ) -> "Rule":
        """
        Build a rule from its textual parts.

        Raises:
            PatternCompileError: if ``pattern`` is not a valid regular expression.
        """
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise PatternCompileError(pattern, resource_name, str(e)) from e
        return cls(pattern=compiled, languages=frozenset(languages), accept_on_match=accept_on_match)

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def apply(self, candidates: FrozenSet[str]) -> FrozenSet[str]:
        """Narrow ``candidates`` as if this rule matched."""
        if self.accept_on_match:
            return candidates & self.languages
        return candidates - self.languages

    def __repr__(self) -> str:
        langs = "+".join(sorted(self.languages))
        return f"Rule({self.pattern.pattern!r}, {langs!r}, {self.accept_on_match})"


@dataclass(frozen=True)
class RuleTable:
    """Ordered rules and the vocabulary a guess starts from."""

    rules: Tuple[Rule, ...]
    vocabulary: FrozenSet[str]

    def __post_init__(self):
        # Callers may hand over lists or sets; store immutable copies
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "vocabulary", frozenset(self.vocabulary))

    def __len__(self) -> int:
        return len(self.rules)


@dataclass(frozen=True)
class NarrowingStep:
    """The candidate set after one rule was evaluated."""

    rule: Rule
    matched: bool
    candidates: FrozenSet[str]


# ════════════════════════════════════════════════════════════════════════════════
# LOADING
# ════════════════════════════════════════════════════════════════════════════════


def _as_vocabulary(vocabulary: Vocabulary) -> FrozenSet[str]:
    if isinstance(vocabulary, Languages):
        return vocabulary.languages
    if isinstance(vocabulary, str):
        raise TypeError(f"vocabulary must be a collection of language tags, not the string '{vocabulary}'")
    return frozenset(vocabulary)


def _warn_unknown_languages(rules: Sequence[Rule], vocabulary: FrozenSet[str], source: str) -> None:
    unknown = set()
    for rule in rules:
        unknown.update(rule.languages - vocabulary)
    if unknown:
        logging.warning(f"Rules from '{source}' name languages outside the vocabulary: {sorted(unknown)}")


def parse_rules(
    raw_lines: Iterable[str], resource_name: str, config: Optional[LangConfig] = None
) -> List[Rule]:
    """
    Parse rule lines of the form ``<pattern> <lang1>[+<lang2>...] <true|false>``.

    Args:
        raw_lines: Lines of the resource, without line terminators
        resource_name: Used in error messages

    Returns:
        Rules in file order.

    Raises:
        FormatError: a line does not split into exactly three fields, has an accept
            flag other than ``true``/``false``, or an empty language in its list.
        PatternCompileError: a pattern is not a valid regular expression.
    """
    config = config or LangConfig.create_default()
    accept_token, reject_token = config.accept_tokens
    rules = []

    for line_number, raw_line, line in iter_logical_lines(raw_lines, config):
        parts = config.field_splitter.split(line)
        if len(parts) != 3:
            raise FormatError(raw_line, resource_name, line_number, f"expected 3 fields, found {len(parts)}")

        pattern, languages_field, accept_field = parts
        if accept_field not in (accept_token, reject_token):
            raise FormatError(
                raw_line, resource_name, line_number, f"accept flag must be '{accept_token}' or '{reject_token}'"
            )

        languages = languages_field.split(config.language_separator)
        if not all(languages):
            raise FormatError(raw_line, resource_name, line_number, "empty language in language list")

        rules.append(Rule.compile(pattern, languages, accept_field == accept_token, resource_name))

    return rules


def load_from_resource(
    resource_id: Union[str, Path], vocabulary: Vocabulary, config: Optional[LangConfig] = None
) -> RuleTable:
    """
    Build a rule table from a rule resource.

    ``resource_id`` is either a path to an existing file or a name resolved under the
    configured resource directory.

    Raises:
        ResourceNotFoundError: the resource cannot be located.
        FormatError: a line is malformed.
        PatternCompileError: a pattern does not compile.
    """
    config = config or LangConfig.create_default()
    raw_lines = read_resource_lines(resource_id, config)
    rules = parse_rules(raw_lines, str(resource_id), config)
    languages = _as_vocabulary(vocabulary)

    _warn_unknown_languages(rules, languages, str(resource_id))
    logging.info(f"Loaded {len(rules)} language rules from '{resource_id}' ({len(languages)} languages)")
    return RuleTable(tuple(rules), languages)


def load_builtin(name_type: Union[NameType, str], vocabulary: Optional[Vocabulary] = None) -> RuleTable:
    """
    Build the bundled rule table for a name type.

    Args:
        name_type: A ``NameType`` or its value (``"ash"``, ``"gen"``, ``"sep"``)
        vocabulary: Candidate languages; defaults to the bundled vocabulary for the name type

    Raises:
        KeyError: no bundled rules exist for ``name_type``.
        PatternCompileError: a bundled pattern does not compile.
    """
    if not isinstance(name_type, NameType):
        try:
            name_type = NameType(name_type)
        except ValueError as e:
            raise KeyError(f"No built-in language rules for name type '{name_type}'") from e

    rows = BUILTIN_RULES[name_type.value]
    source = f"<builtin:{name_type.value}>"
    rules = [
        Rule.compile(pattern, languages.split("+"), accept_on_match, source)
        for pattern, languages, accept_on_match in rows
    ]

    if vocabulary is None:
        vocabulary = Languages.get_instance(name_type)
    languages = _as_vocabulary(vocabulary)

    _warn_unknown_languages(rules, languages, source)
    logging.info(f"Loaded {len(rules)} built-in language rules for '{name_type.value}' ({len(languages)} languages)")
    return RuleTable(tuple(rules), languages)


def build_registry(config: Optional[LangConfig] = None) -> Mapping[NameType, RuleTable]:
    """
    Build one rule table per name type.

    Call once at startup and pass the result to whatever needs to guess languages. The
    mapping is read-only; build a separate ``RuleTable`` for custom rules instead of
    changing it.
    """
    config = config or LangConfig.create_default()
    tables = {}
    for name_type in NameType:
        vocabulary = Languages.load_from_resource(config.languages_resource_name(name_type.value), config)
        tables[name_type] = load_builtin(name_type, vocabulary)
    return MappingProxyType(tables)


# ════════════════════════════════════════════════════════════════════════════════
# GUESSING
# ════════════════════════════════════════════════════════════════════════════════


def normalize_text(text: str) -> str:
    """Fold text the way rule patterns expect it: trimmed and lowercased."""
    return text.strip().lower()


def guess_languages(table: RuleTable, text: str) -> LanguageSet:
    """
    Narrow the table's vocabulary down to the languages ``text`` may come from.

    ``text`` must already be normalized (see ``normalize_text``); patterns are written
    for lowercase input. Patterns follow Python ``re`` semantics, so ``$`` also matches
    just before a single trailing newline; ``normalize_text`` strips surrounding
    whitespace, which keeps end anchors meaning end of word.

    Returns:
        ``SomeLanguages`` with the surviving candidates, or ``ANY_LANGUAGE`` when every
        candidate was eliminated. Never ``NO_LANGUAGES``.
    """
    candidates = table.vocabulary
    for rule in table.rules:
        if rule.matches(text):
            candidates = rule.apply(candidates)

    result = LanguageSet.from_set(candidates)
    return ANY_LANGUAGE if result == NO_LANGUAGES else result


def guess_language(table: RuleTable, text: str) -> str:
    """The single language ``text`` comes from, or ``ANY`` if there is no unique guess."""
    language_set = guess_languages(table, text)
    return language_set.get_any() if language_set.is_singleton() else ANY


def explain_guess(table: RuleTable, text: str) -> Tuple[NarrowingStep, ...]:
    """Candidate sets after each rule, in table order, for the same walk ``guess_languages`` does."""
    steps = []
    candidates = table.vocabulary
    for rule in table.rules:
        matched = rule.matches(text)
        if matched:
            candidates = rule.apply(candidates)
        steps.append(NarrowingStep(rule=rule, matched=matched, candidates=candidates))
    return tuple(steps)


class LanguageGuesser:
    """Guesses by name type against an explicit registry, normalizing input first."""

    def __init__(self, registry: Optional[Mapping[NameType, RuleTable]] = None):
        self._registry = registry if registry is not None else build_registry()

    def table(self, name_type: NameType) -> RuleTable:
        return self._registry[name_type]

    def guess_languages(self, text: str, name_type: NameType = NameType.GENERIC) -> LanguageSet:
        return guess_languages(self._registry[name_type], normalize_text(text))

    def guess_language(self, text: str, name_type: NameType = NameType.GENERIC) -> str:
        return guess_language(self._registry[name_type], normalize_text(text))


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global guesser instance for module-level functions
_global_guesser: Optional[LanguageGuesser] = None


def _get_global_guesser() -> LanguageGuesser:
    """Get or create the global guesser instance."""
    global _global_guesser
    if _global_guesser is None:
        _global_guesser = LanguageGuesser()
    return _global_guesser


def guess_language_for(text: str, name_type: NameType = NameType.GENERIC) -> str:
    """
    Module-level convenience function for guessing a single language.

    Args:
        text: A single word of a name, any case
        name_type: Naming convention whose rules apply

    Returns:
        The language tag, or ``ANY`` if no single language was determined.
    """
    return _get_global_guesser().guess_language(text, name_type)


def guess_languages_for(text: str, name_type: NameType = NameType.GENERIC) -> LanguageSet:
    """Module-level convenience function returning all candidate languages."""
    return _get_global_guesser().guess_languages(text, name_type)
