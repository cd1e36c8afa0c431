"""Errors raised while building language guessing tables."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class LanguageRulesError(Exception):
    """Base class for rule table construction failures."""


class PatternCompileError(LanguageRulesError, ValueError):
    """A rule pattern is not a valid regular expression."""

    def __init__(self, pattern: str, resource_name: str, reason: str):
        self.pattern = pattern
        self.resource_name = resource_name
        super().__init__(f"Invalid pattern '{pattern}' in language resource '{resource_name}': {reason}")


class FormatError(LanguageRulesError, ValueError):
    """A resource line does not parse into a rule."""

    def __init__(self, raw_line: str, resource_name: str, line_number: Optional[int] = None, reason: str = ""):
        self.raw_line = raw_line
        self.resource_name = resource_name
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        message = f"Malformed line '{raw_line}'{where} in language resource '{resource_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ResourceDecodeError(LanguageRulesError, ValueError):
    """A resource is not valid text in the configured encoding."""

    def __init__(self, resource_name: str, encoding: str, reason: str):
        self.resource_name = resource_name
        self.encoding = encoding
        super().__init__(f"Language resource '{resource_name}' is not valid {encoding}: {reason}")


class ResourceNotFoundError(LanguageRulesError, FileNotFoundError):
    """A named resource could not be located."""

    def __init__(self, expected_path: Union[str, Path]):
        self.expected_path = str(expected_path)
        super().__init__(f"Unable to resolve required resource: {self.expected_path}")
