"""
Summary: Validate separator policy and character classification predicates.
Why: Segment composition relies on the stricter file name check before joining.
"""

from __future__ import annotations

import pytest

from segpath.domain.errors import InvalidFileNameError
from segpath.domain.separators import (
    DEFAULT_POLICY,
    SeparatorPolicy,
    is_invalid_file_name_char,
    is_invalid_path_char,
    is_separator,
    validate_file_name,
)


def test_default_policy_accepts_both_slashes() -> None:
    assert DEFAULT_POLICY.canonical == "/"
    assert is_separator("/")
    assert is_separator("\\")
    assert not is_separator(":")


def test_default_policy_built_from_settings() -> None:
    from segpath.config.settings import SEPARATORS

    assert DEFAULT_POLICY == SeparatorPolicy(SEPARATORS)
    assert DEFAULT_POLICY.separators == SEPARATORS


def test_custom_policy() -> None:
    policy = SeparatorPolicy("\\")
    assert policy.canonical == "\\"
    assert is_separator("\\", policy)
    assert not is_separator("/", policy)


@pytest.mark.parametrize("separators", ["", "|", "/\x00"])
def test_policy_rejects_unusable_separators(separators: str) -> None:
    with pytest.raises(ValueError):
        _ = SeparatorPolicy(separators)


@pytest.mark.parametrize("char", ['"', "<", ">", "|", "\x00", "\x1f", "\n"])
def test_invalid_path_chars(char: str) -> None:
    assert is_invalid_path_char(char)
    assert is_invalid_file_name_char(char)


@pytest.mark.parametrize("char", [":", "*", "?", "\\", "/"])
def test_file_name_only_restrictions(char: str) -> None:
    assert not is_invalid_path_char(char)
    assert is_invalid_file_name_char(char)


@pytest.mark.parametrize("char", ["a", " ", ".", "-", "é", "\x7f"])
def test_ordinary_chars(char: str) -> None:
    assert not is_invalid_path_char(char)
    assert not is_invalid_file_name_char(char)


def test_validate_file_name() -> None:
    assert validate_file_name("report.txt") == "report.txt"

    with pytest.raises(InvalidFileNameError) as excinfo:
        _ = validate_file_name("a/b")
    assert excinfo.value.index == 1

    with pytest.raises(InvalidFileNameError, match="empty"):
        _ = validate_file_name("")
