"""Immutable configuration for locating and parsing language resources."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple

DEFAULT_RESOURCE_DIR = Path(__file__).parent / "resources"


@dataclass(frozen=True)
class LangConfig:
    """Resource locations and text format settings shared by all loaders."""

    # Where bare resource names are resolved
    resource_dir: Path

    # Vocabulary resource naming, filled with NameType.value ("ash", "gen", "sep")
    languages_resource_template: str
    encoding: str

    # Comment syntax
    line_comment: str
    block_comment_start: str
    block_comment_end: str

    # Rule line syntax
    language_separator: str
    field_splitter: re.Pattern[str]
    accept_tokens: Tuple[str, str]

    @classmethod
    def create_default(cls) -> "LangConfig":
        """Factory for the settings the bundled resources are written in."""
        return cls(
            resource_dir=DEFAULT_RESOURCE_DIR,
            languages_resource_template="{}_languages.txt",
            encoding="utf-8",
            line_comment="//",
            block_comment_start="/*",
            block_comment_end="*/",
            language_separator="+",
            field_splitter=re.compile(r"\s+"),
            accept_tokens=("true", "false"),
        )

    def with_resource_dir(self, new_resource_dir: Path) -> "LangConfig":
        """Immutable update method."""
        return replace(self, resource_dir=Path(new_resource_dir))

    def languages_resource_name(self, name_type_value: str) -> str:
        return self.languages_resource_template.format(name_type_value)
