"""Tests for rule resource parsing and built-in table construction."""

import sys
import logging
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from namelang.config import LangConfig
from namelang.errors import (
    FormatError,
    LanguageRulesError,
    PatternCompileError,
    ResourceDecodeError,
    ResourceNotFoundError,
)
from namelang.lang import RuleTable, load_builtin, load_from_resource, parse_rules
from namelang.lang_rules_data import ASHKENAZI_RULES, BUILTIN_RULES, GENERIC_RULES, SEPHARDIC_RULES
from namelang.languages import Languages, NameType
from namelang.text_resources import iter_logical_lines

VOCABULARY = frozenset({"german", "russian", "english", "french", "spanish", "polish"})


def write_resource(tmp_path: Path, text: str, name: str = "test_lang.txt") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_simple_rules():
    rules = parse_rules(
        ["^sch german+russian true", "tz$\tgerman+russian+english   true", "w french+spanish+polish false"],
        "inline",
    )

    assert [rule.pattern.pattern for rule in rules] == ["^sch", "tz$", "w"]
    assert rules[0].languages == frozenset({"german", "russian"})
    assert rules[1].languages == frozenset({"german", "russian", "english"})
    assert [rule.accept_on_match for rule in rules] == [True, True, False]


def test_comments_and_blank_lines_are_skipped():
    lines = [
        "/*",
        " * Licensed under something",
        " */",
        "",
        "// whole line comment",
        "^sch german+russian true // trailing comment",
        "    ",
        "tz$ german true//no space before comment",
    ]

    rules = parse_rules(lines, "inline")

    assert [(rule.pattern.pattern, rule.accept_on_match) for rule in rules] == [("^sch", True), ("tz$", True)]


def test_block_comment_closes_on_a_later_line():
    # The opening line is never checked for the closing marker
    lines = [
        "/* one-liner */",
        "w french false",
        "still inside */",
        "tz$ german true",
    ]

    rules = parse_rules(lines, "inline")

    assert [rule.pattern.pattern for rule in rules] == ["tz$"]


def test_block_comment_must_start_the_line():
    with pytest.raises(FormatError):
        parse_rules(["  /* indented", "w french false"], "inline")


def test_logical_lines_keep_raw_text_and_numbers():
    lines = ["// header", "", "^sch german true // note"]
    assert list(iter_logical_lines(lines)) == [(3, "^sch german true // note", "^sch german true")]


def test_two_field_line_is_a_format_error(tmp_path):
    resource = write_resource(tmp_path, "^sch german+russian true\nabc+def true\n")

    with pytest.raises(FormatError) as excinfo:
        load_from_resource(resource, VOCABULARY)

    error = excinfo.value
    assert error.raw_line == "abc+def true"
    assert error.line_number == 2
    assert "abc+def true" in str(error)
    assert str(resource) in str(error)


def test_four_field_line_is_a_format_error():
    with pytest.raises(FormatError):
        parse_rules(["^sch german true extra"], "inline")


@pytest.mark.parametrize("flag", ["yes", "True", "1", "TRUE"])
def test_accept_flag_must_be_literal(flag):
    with pytest.raises(FormatError):
        parse_rules([f"^sch german {flag}"], "inline")


@pytest.mark.parametrize("languages", ["german+", "+german", "german++russian"])
def test_empty_language_is_a_format_error(languages):
    with pytest.raises(FormatError):
        parse_rules([f"^sch {languages} true"], "inline")


def test_bad_pattern_fails_at_load_time(tmp_path):
    resource = write_resource(tmp_path, "^sch german true\n[abc german true\n")

    with pytest.raises(PatternCompileError) as excinfo:
        load_from_resource(resource, VOCABULARY)

    assert excinfo.value.pattern == "[abc"
    assert str(resource) in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, Exception)


def test_missing_resource_names_expected_path(tmp_path):
    config = LangConfig.create_default().with_resource_dir(tmp_path)

    with pytest.raises(ResourceNotFoundError) as excinfo:
        load_from_resource("absent_lang.txt", VOCABULARY, config)

    assert excinfo.value.expected_path == str(tmp_path / "absent_lang.txt")
    assert str(tmp_path / "absent_lang.txt") in str(excinfo.value)


def test_all_load_errors_share_a_base_class():
    for error_type in (FormatError, PatternCompileError, ResourceDecodeError, ResourceNotFoundError):
        assert issubclass(error_type, LanguageRulesError)


def test_resource_resolved_from_config_dir(tmp_path):
    write_resource(tmp_path, "^sch german+russian true\n", name="custom_lang.txt")
    config = LangConfig.create_default().with_resource_dir(tmp_path)

    table = load_from_resource("custom_lang.txt", VOCABULARY, config)

    assert isinstance(table, RuleTable)
    assert len(table) == 1
    assert table.vocabulary == VOCABULARY


def test_resource_with_non_latin_patterns(tmp_path):
    resource = write_resource(tmp_path, "ш cyrillic true\nא hebrew true\nß german true\n")

    table = load_from_resource(resource, {"cyrillic", "hebrew", "german"})

    assert [rule.pattern.pattern for rule in table.rules] == ["ш", "א", "ß"]


def test_vocabulary_accepts_languages_instance(tmp_path):
    resource = write_resource(tmp_path, "eau french true\n")
    table = load_from_resource(resource, Languages(frozenset({"french", "spanish"})))
    assert table.vocabulary == frozenset({"french", "spanish"})


def test_rule_table_is_immutable(tmp_path):
    resource = write_resource(tmp_path, "eau french true\n")
    table = load_from_resource(resource, ["french", "spanish"])

    assert isinstance(table.rules, tuple)
    assert isinstance(table.vocabulary, frozenset)
    with pytest.raises(AttributeError):
        table.rules = ()
    with pytest.raises(AttributeError):
        table.rules[0].accept_on_match = False


BUILTIN_SIZES = [
    (NameType.ASHKENAZI, 172),
    (NameType.GENERIC, 253),
    (NameType.SEPHARDIC, 72),
]


@pytest.mark.parametrize("name_type, size", BUILTIN_SIZES)
def test_builtin_tables_compile(name_type, size):
    table = load_builtin(name_type)
    assert len(table) == size
    assert table.vocabulary == Languages.get_instance(name_type).languages


def test_builtin_accepts_name_type_value():
    assert len(load_builtin("sep")) == len(SEPHARDIC_RULES)


def test_builtin_unknown_name_type():
    with pytest.raises(KeyError):
        load_builtin("klingon")


def test_builtin_rows_keep_their_order():
    table = load_builtin(NameType.GENERIC)
    assert [rule.pattern.pattern for rule in table.rules] == [row[0] for row in GENERIC_RULES]
    assert [rule.accept_on_match for rule in table.rules] == [row[2] for row in GENERIC_RULES]


def test_builtin_data_is_read_only():
    with pytest.raises(TypeError):
        BUILTIN_RULES["gen"] = ()


def test_builtin_malformed_tags_are_preserved(caplog):
    tags = {tag for _, languages, _ in ASHKENAZI_RULES for tag in languages.split("+")}
    assert "german," in tags
    assert "ebrew" in tags

    with caplog.at_level(logging.WARNING):
        load_builtin(NameType.ASHKENAZI)

    assert "german," in caplog.text
    assert "ebrew" in caplog.text


def test_builtin_with_custom_vocabulary():
    table = load_builtin(NameType.SEPHARDIC, ["hebrew", "spanish"])
    assert table.vocabulary == frozenset({"hebrew", "spanish"})


def test_undecodable_resource_is_a_rules_error(tmp_path):
    resource = tmp_path / "binary_lang.txt"
    resource.write_bytes(b"\xff\xfe sch german true\n")

    with pytest.raises(LanguageRulesError) as excinfo:
        load_from_resource(resource, ["german"])

    assert isinstance(excinfo.value, ResourceDecodeError)
    assert excinfo.value.encoding == "utf-8"
    assert str(resource) in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_undecodable_vocabulary_is_a_rules_error(tmp_path):
    resource = tmp_path / "binary_languages.txt"
    resource.write_bytes(b"german\n\xff\n")

    with pytest.raises(ResourceDecodeError):
        Languages.load_from_resource(resource)


def test_string_vocabulary_is_rejected(tmp_path):
    resource = write_resource(tmp_path, "eau french true\n")

    with pytest.raises(TypeError):
        load_from_resource(resource, "french")
    with pytest.raises(TypeError):
        load_builtin(NameType.SEPHARDIC, "french")
