"""Unit tests for branch name validation."""

import pytest

from kanban_flow.branching.validation import (
    CONSECUTIVE_SEPARATORS,
    EDGE_HYPHEN,
    EDGE_SLASH,
    INVALID_CHARACTERS,
    TOO_LONG,
    TOO_SHORT,
    validate_branch_name,
)


def test_accepts_generated_style_name():
    result = validate_branch_name("feature/svc-task-123456")
    assert result.is_valid is True
    assert result.errors == []


def test_accepts_mixed_case_and_underscores():
    assert validate_branch_name("Feature/Under_score").is_valid


def test_too_short():
    result = validate_branch_name("ab")
    assert result.is_valid is False
    assert result.errors == [TOO_SHORT]
    assert result.errors == ["too short"]


def test_too_long():
    assert validate_branch_name("a" * 101).errors == [TOO_LONG]
    assert validate_branch_name("a" * 100).is_valid


def test_reports_every_violation_in_order():
    result = validate_branch_name("-bad--name/")
    assert result.is_valid is False
    assert result.errors == [EDGE_HYPHEN, CONSECUTIVE_SEPARATORS, EDGE_SLASH]


def test_empty_name():
    assert validate_branch_name("").errors == [TOO_SHORT, INVALID_CHARACTERS]


@pytest.mark.parametrize(
    "name,error",
    [
        ("feature/hello world", INVALID_CHARACTERS),
        ("feature/x\n", INVALID_CHARACTERS),
        ("feature/ünï", INVALID_CHARACTERS),
        ("feature//x", CONSECUTIVE_SEPARATORS),
        ("/feature", EDGE_SLASH),
        ("feature-", EDGE_HYPHEN),
    ],
)
def test_single_violation(name, error):
    assert validate_branch_name(name).errors == [error]


def test_to_dict():
    assert validate_branch_name("ab").to_dict() == {"is_valid": False, "errors": ["too short"]}
